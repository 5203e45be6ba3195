"""
Entry point: wire settings -> gateway -> Repo -> runner -> controller -> UI, then run Tk.
"""

import logging
import sys
import tkinter as tk
from tkinter import messagebox

from clientes_app.config import ConfigError, load_settings
from clientes_app.controller import ListEditController
from clientes_app.gateway import create_gateway
from clientes_app.repository import Repo
from clientes_app.ui import AppUI
from clientes_app.worker import TkTaskRunner

logger = logging.getLogger(__name__)


def _report_fatal(message: str) -> None:
    print(message, file=sys.stderr)
    try:
        root = tk.Tk()
        root.withdraw()
        messagebox.showerror("Lista de Clientes", message)
        root.destroy()
    except tk.TclError:
        pass  # no display


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        settings = load_settings()
        logging.getLogger().setLevel(settings.log_level)
        gateway = create_gateway(settings)
    except ConfigError as exc:
        _report_fatal(str(exc))
        return 1

    repo = Repo()

    root = tk.Tk()
    runner = TkTaskRunner(root)
    controller = ListEditController(gateway, repo, runner)
    ui = AppUI(root, controller)
    controller.on_change = ui.refresh_ui

    controller.load()
    root.mainloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
