"""
Design (controller.py)
- Purpose: Mediate load / edit / save between the view, the Repo and the gateway, and own the
           transient feedback banner (auto-cleared after FEEDBACK_CLEAR_MS).
- Inputs: gateway (fetch_all/update_record), Repo, runner (submit/call_later/cancel),
          on_change callback (view redraw).
- Outputs: None; state lives in Repo and is read back with snapshot().
- Side effects: Submits gateway calls through the runner; arms/cancels the feedback timer.
- Thread-safety: Every method and completion callback runs on the UI main loop.
"""

import logging
from typing import Callable, List, Optional, Tuple

from .config import (
    FEEDBACK_CLEAR_MS,
    LOAD_ERROR_MESSAGE,
    SAVE_ERROR_PREFIX,
    SAVE_SUCCESS_MESSAGE,
)
from .gateway import ClienteGateway, GatewayError
from .models import FEEDBACK_ERROR, FEEDBACK_SUCCESS, Cliente, Feedback, UIStatus
from .repository import Repo
from .worker import TkTaskRunner

logger = logging.getLogger(__name__)


class ListEditController:
    def __init__(self, gateway: ClienteGateway, repo: Repo, runner: TkTaskRunner,
                 on_change: Callable[[], None] = lambda: None):
        self.gateway = gateway
        self.repo = repo
        self.runner = runner
        self.on_change = on_change
        self._feedback_timer: Optional[str] = None

    def snapshot(self) -> Tuple[List[Cliente], UIStatus]:
        return self.repo.snapshot()

    def get(self, cliente_id: int) -> Optional[Cliente]:
        return self.repo.get(cliente_id)

    # ---------- Load ----------

    def load(self) -> None:
        """
        Purpose: Fetch the whole list and replace the local one.
        Side effects: Unsaved local edits are overwritten when the fetch lands.
        """
        self.repo.set_loading(True)
        self.repo.set_error(None)
        self.on_change()
        self.runner.submit(self.gateway.fetch_all, self._load_succeeded, self._load_failed)

    def reload(self) -> bool:
        """User-triggered load; ignored while a load is already in flight."""
        if self.repo.is_loading():
            return False
        self.load()
        return True

    def _load_succeeded(self, clientes: Optional[List[Cliente]]) -> None:
        self.repo.replace_all(clientes or [])
        self.repo.set_error(None)
        logger.info("Loaded %d clientes", len(clientes or []))
        self._finish_load()

    def _load_failed(self, exc: Exception) -> None:
        logger.error("Erro ao buscar clientes: %s", exc)
        self.repo.clear()
        self.repo.set_error(LOAD_ERROR_MESSAGE)
        self._finish_load()

    def _finish_load(self) -> None:
        self.repo.set_loading(False)
        self.on_change()

    # ---------- Edit ----------

    def edit_field(self, cliente_id: int, field: str, value: Optional[str]) -> bool:
        changed = self.repo.edit_field(cliente_id, field, value)
        if changed:
            self.on_change()
        return changed

    # ---------- Save ----------

    def save(self, cliente: Cliente) -> None:
        """
        Purpose: Persist nome/email of one record.
        Inputs: cliente (local snapshot at click time)
        Side effects: saving_id set until the call completes; feedback set on completion.
                      A failed save keeps the local values as edited.
        """
        self.repo.set_saving(cliente.id)
        self.on_change()
        logger.info("Saving cliente %s", cliente.id)
        self.runner.submit(
            lambda: self.gateway.update_record(cliente.id, cliente.update_payload()),
            lambda _result: self._save_succeeded(cliente),
            lambda exc: self._save_failed(cliente, exc),
        )

    def _save_succeeded(self, cliente: Cliente) -> None:
        logger.info("Cliente %s atualizado", cliente.id)
        self._finish_save(Feedback(FEEDBACK_SUCCESS, SAVE_SUCCESS_MESSAGE))

    def _save_failed(self, cliente: Cliente, exc: Exception) -> None:
        logger.error("Erro ao atualizar cliente %s: %s", cliente.id, exc)
        detail = exc.message if isinstance(exc, GatewayError) else (str(exc) or exc.__class__.__name__)
        self._finish_save(Feedback(FEEDBACK_ERROR, f"{SAVE_ERROR_PREFIX}{detail}"))

    def _finish_save(self, feedback: Feedback) -> None:
        self.set_feedback(feedback)
        self.repo.set_saving(None)
        self.on_change()

    # ---------- Feedback ----------

    def set_feedback(self, feedback: Feedback) -> None:
        """Show a banner and (re)start its clear timer."""
        self.repo.set_feedback(feedback)
        if self._feedback_timer is not None:
            self.runner.cancel(self._feedback_timer)
        self._feedback_timer = self.runner.call_later(FEEDBACK_CLEAR_MS, self._clear_feedback)

    def _clear_feedback(self) -> None:
        self._feedback_timer = None
        self.repo.set_feedback(None)
        self.on_change()
