"""
Design (ui.py)
- Purpose: Build and manage the Tkinter UI (header, banners, one card per cliente, logs panel).
- Inputs: ListEditController (state + operations).
- Outputs: None (renders UI, forwards user actions to the controller).
- Side effects: Creates windows.
- Thread-safety: UI code runs on main thread; log records from other threads are
                 re-posted with Tk.after().
"""

import logging
import tkinter as tk
from dataclasses import dataclass
from tkinter import ttk

from .config import LOG_MAX_LINES, WINDOW_TITLE
from .controller import ListEditController
from .models import Cliente
from .utils import display_text, feedback_colors, reload_label, save_label

BG = "#f5f6f7"
CARD_BG = "#f8fafc"
MUTED = "#64748b"


@dataclass
class _Row:
    frame: tk.Frame
    nome: tk.StringVar
    email: tk.StringVar
    button: ttk.Button


class _LogPanelHandler(logging.Handler):
    """Mirrors log records into the Logs panel."""

    def __init__(self, ui: "AppUI") -> None:
        super().__init__(level=logging.INFO)
        self.ui = ui
        self.setFormatter(logging.Formatter("[%(asctime)s] %(levelname)s %(name)s: %(message)s",
                                            "%Y-%m-%d %H:%M:%S"))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            line = self.format(record) + "\n"
            self.ui.root.after(0, lambda: self.ui._append_log(line))
        except Exception:
            self.handleError(record)


class AppUI:
    """
    Design (AppUI)
    - Purpose: Encapsulate all UI creation and behavior.
    - Public attributes:
        show_logs (tk.BooleanVar): toggles visibility of the logs panel
    - Public methods:
        refresh_ui(): redraw from controller.snapshot(); passed to the controller as on_change
    - Rows are keyed by cliente id and rebuilt only when the ids (or the loading state) change,
      so typing in an entry keeps focus across redraws.
    """

    def __init__(self, root: tk.Tk, controller: ListEditController):
        self.root = root
        self.controller = controller
        self.show_logs = tk.BooleanVar(value=False)

        self._rows: dict[int, _Row] = {}
        self._row_ids: list[int] = []
        self._rows_loading = None
        self._syncing = False

        # Window
        self.root.title(WINDOW_TITLE)
        self.root.geometry("760x640")
        self.root.rowconfigure(2, weight=1)
        self.root.columnconfigure(0, weight=1)
        self.root.configure(bg=BG)

        style = ttk.Style(self.root)
        style.theme_use("default")
        style.configure("Reload.TButton", background="#2563eb", foreground="#ffffff", font=("Segoe UI", 10, "bold"))
        style.map("Reload.TButton", background=[("disabled", "#cbd5f5")], foreground=[("disabled", "#1e3a8a")])
        style.configure("Save.TButton", background="#10b981", foreground="#ffffff", font=("Segoe UI", 10, "bold"))
        style.map("Save.TButton", background=[("disabled", "#cbd5f5")], foreground=[("disabled", "#0f172a")])

        # Header
        header = tk.Frame(self.root, bg=BG)
        header.grid(row=0, column=0, sticky="ew", padx=16, pady=(16, 4))
        header.columnconfigure(0, weight=1)
        tk.Label(header, text=WINDOW_TITLE, bg=BG, font=("Segoe UI", 18, "bold")).grid(row=0, column=0, sticky="w")
        tk.Label(
            header,
            text="Conecta ao Supabase, permite edicao inline e sincroniza as mudancas.",
            bg=BG,
            fg="#475569",
        ).grid(row=1, column=0, sticky="w")
        self.reload_button = ttk.Button(header, text=reload_label(False), style="Reload.TButton",
                                        command=self.controller.reload)
        self.reload_button.grid(row=0, column=1, rowspan=2, sticky="e")

        # Banners (error box + transient feedback)
        banners = tk.Frame(self.root, bg=BG)
        banners.grid(row=1, column=0, sticky="ew", padx=16)
        banners.columnconfigure(0, weight=1)
        self.error_label = tk.Label(banners, bg="#fee2e2", fg="#b91c1c", anchor="w", padx=12, pady=10)
        self.error_label.grid(row=0, column=0, sticky="ew", pady=(8, 0))
        self.error_label.grid_remove()
        self.feedback_label = tk.Label(banners, anchor="w", padx=12, pady=8)
        self.feedback_label.grid(row=1, column=0, sticky="ew", pady=(8, 0))
        self.feedback_label.grid_remove()

        # Scrollable list of cards
        list_frame = tk.Frame(self.root, bg=BG)
        list_frame.grid(row=2, column=0, sticky="nsew", padx=16, pady=(12, 4))
        list_frame.rowconfigure(0, weight=1)
        list_frame.columnconfigure(0, weight=1)
        self.canvas = tk.Canvas(list_frame, bg=BG, highlightthickness=0)
        scrollbar = ttk.Scrollbar(list_frame, orient=tk.VERTICAL, command=self.canvas.yview)
        self.canvas.configure(yscrollcommand=scrollbar.set)
        self.canvas.grid(row=0, column=0, sticky="nsew")
        scrollbar.grid(row=0, column=1, sticky="ns")
        self.cards = tk.Frame(self.canvas, bg=BG)
        self.cards.columnconfigure(0, weight=1)
        cards_window = self.canvas.create_window((0, 0), window=self.cards, anchor="nw")
        self.cards.bind("<Configure>", lambda _e: self.canvas.configure(scrollregion=self.canvas.bbox("all")))
        self.canvas.bind("<Configure>", lambda e: self.canvas.itemconfigure(cards_window, width=e.width))

        # Logs toggle + panel
        bottom = tk.Frame(self.root, bg=BG)
        bottom.grid(row=3, column=0, sticky="ew", padx=16, pady=(0, 12))
        bottom.columnconfigure(0, weight=1)
        tk.Checkbutton(bottom, text="Mostrar logs", variable=self.show_logs, bg=BG,
                       activebackground=BG, command=self.toggle_logs).grid(row=0, column=0, sticky="w")
        self.logs_box = tk.Text(bottom, height=6, bg="#1b1b1b", fg="#dddddd", wrap="none")
        self.logs_box.configure(state="disabled")
        self.logs_box.grid(row=1, column=0, sticky="ew")
        self.logs_box.grid_remove()

        self.log_handler = _LogPanelHandler(self)
        logging.getLogger().addHandler(self.log_handler)
        self.root.bind("<Destroy>", self._on_destroy, add="+")

        # Initial paint
        self.refresh_ui()

    # ---------- UI callbacks & utilities ----------

    def toggle_logs(self) -> None:
        if self.show_logs.get():
            self.logs_box.grid()
        else:
            self.logs_box.grid_remove()

    def refresh_ui(self) -> None:
        """
        Purpose: Re-render from the controller snapshot.
        Side effects: Mutates widgets (UI only).
        Thread-safety: Must run on main thread.
        """
        clientes, status = self.controller.snapshot()

        self.reload_button.configure(text=reload_label(status.is_loading))
        self.reload_button.state(["disabled"] if status.is_loading else ["!disabled"])

        if status.error_message:
            self.error_label.configure(text=status.error_message)
            self.error_label.grid()
        else:
            self.error_label.grid_remove()

        if status.feedback:
            bg, fg = feedback_colors(status.feedback)
            self.feedback_label.configure(text=status.feedback.message, bg=bg, fg=fg)
            self.feedback_label.grid()
        else:
            self.feedback_label.grid_remove()

        ids = [c.id for c in clientes]
        if ids != self._row_ids or status.is_loading != self._rows_loading:
            self._rebuild_rows(clientes, status.is_loading, bool(status.error_message))
        else:
            self._sync_rows(clientes)

        for cliente_id, row in self._rows.items():
            saving = status.saving_id == cliente_id
            row.button.configure(text=save_label(saving))
            row.button.state(["disabled"] if saving else ["!disabled"])

    def _rebuild_rows(self, clientes: list[Cliente], loading: bool, has_error: bool) -> None:
        for child in self.cards.winfo_children():
            child.destroy()
        self._rows = {}
        self._row_ids = [c.id for c in clientes]
        self._rows_loading = loading

        if loading:
            tk.Label(self.cards, text="Carregando clientes...", bg=BG, fg=MUTED).grid(row=0, column=0, sticky="w")
            return
        if not clientes and not has_error:
            tk.Label(self.cards, text="Nenhum cliente encontrado.", bg=BG, fg=MUTED).grid(row=0, column=0, sticky="w")
            return

        for idx, cliente in enumerate(clientes):
            self._rows[cliente.id] = self._build_card(idx, cliente)

    def _build_card(self, idx: int, cliente: Cliente) -> _Row:
        card = tk.Frame(self.cards, bg=CARD_BG, highlightbackground="#e2e8f0", highlightthickness=1)
        card.grid(row=idx, column=0, sticky="ew", pady=(0, 12))
        card.columnconfigure(0, weight=1)

        nome = tk.StringVar(value=display_text(cliente.nome))
        email = tk.StringVar(value=display_text(cliente.email))

        tk.Label(card, text="Nome", bg=CARD_BG, fg="#475569").grid(row=0, column=0, sticky="w", padx=12, pady=(10, 0))
        tk.Entry(card, textvariable=nome).grid(row=1, column=0, columnspan=2, sticky="ew", padx=12)
        tk.Label(card, text="Email", bg=CARD_BG, fg="#475569").grid(row=2, column=0, sticky="w", padx=12, pady=(8, 0))
        tk.Entry(card, textvariable=email).grid(row=3, column=0, columnspan=2, sticky="ew", padx=12)

        tk.Label(card, text=f"ID: {cliente.id}", bg=CARD_BG, fg="#94a3b8").grid(row=4, column=0, sticky="w", padx=12, pady=10)
        button = ttk.Button(card, text=save_label(False), style="Save.TButton",
                            command=lambda cid=cliente.id: self._on_save(cid))
        button.grid(row=4, column=1, sticky="e", padx=12, pady=10)

        nome.trace_add("write", lambda *_a, cid=cliente.id, var=nome: self._on_edit(cid, "nome", var))
        email.trace_add("write", lambda *_a, cid=cliente.id, var=email: self._on_edit(cid, "email", var))
        return _Row(frame=card, nome=nome, email=email, button=button)

    def _sync_rows(self, clientes: list[Cliente]) -> None:
        """Push repo values into entries that differ, without re-triggering edits."""
        self._syncing = True
        try:
            for cliente in clientes:
                row = self._rows.get(cliente.id)
                if row is None:
                    continue
                for var, value in ((row.nome, cliente.nome), (row.email, cliente.email)):
                    text = display_text(value)
                    if var.get() != text:
                        var.set(text)
        finally:
            self._syncing = False

    def _on_edit(self, cliente_id: int, field: str, var: tk.StringVar) -> None:
        if self._syncing:
            return
        self.controller.edit_field(cliente_id, field, var.get())

    def _on_save(self, cliente_id: int) -> None:
        cliente = self.controller.get(cliente_id)
        if cliente is None:
            return
        self.controller.save(cliente)

    # ---------- internal helper for Logs ----------

    def _append_log(self, text: str) -> None:
        """
        Purpose: Append one line to the Logs panel and trim to LOG_MAX_LINES.
        Thread-safety: Main thread only (called via after()).
        """
        self.logs_box.configure(state="normal")
        self.logs_box.insert("end", text)
        self.logs_box.see("end")
        total_lines = int(self.logs_box.index("end-1c").split(".")[0])
        if total_lines > LOG_MAX_LINES:
            remove = total_lines - LOG_MAX_LINES
            self.logs_box.delete("1.0", f"{remove + 1}.0")
        self.logs_box.configure(state="disabled")

    def _on_destroy(self, event) -> None:
        if event.widget is self.root:
            logging.getLogger().removeHandler(self.log_handler)
