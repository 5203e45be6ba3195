"""
Design (repository.py)
- Purpose: Encapsulate the list of clientes and the UI status behind a tiny API (and a lock),
           so the controller and the view don't share bare lists/dicts.
- Inputs: Cliente objects, field edits, status values.
- Outputs: Snapshots (copies) of the current list and status.
- Side effects: Updates internal list/status.
- Thread-safety: All mutating methods take the internal lock; snapshot returns copies.
"""

import threading
from dataclasses import replace
from typing import Iterable, List, Optional, Tuple

from .config import EDITABLE_FIELDS
from .models import Cliente, Feedback, UIStatus


class Repo:
    """
    Design (Repo)
    - State:
        _clientes: ordered list of Cliente as last fetched (then locally edited)
        _status: UIStatus (loading flag, error message, saving id, feedback)
        _lock: threading.Lock to protect all mutating/reading operations
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._clientes: List[Cliente] = []
        self._status = UIStatus()

    # -------- List state --------

    def replace_all(self, clientes: Iterable[Cliente]) -> None:
        """
        Purpose: Swap the whole list for a freshly fetched one (unsaved local edits are lost).
        Thread-safety: Protected by _lock.
        """
        with self._lock:
            self._clientes = list(clientes)

    def clear(self) -> None:
        with self._lock:
            self._clientes = []

    def get(self, cliente_id: int) -> Cliente | None:
        with self._lock:
            for cliente in self._clientes:
                if cliente.id == cliente_id:
                    return cliente
            return None

    def edit_field(self, cliente_id: int, field: str, value: Optional[str]) -> bool:
        """
        Purpose: Replace one record with a copy carrying the new field value.
        Inputs: cliente_id, field ("nome" | "email"), value (not validated)
        Outputs: True if a record matched, else False.
        Side effects: Only the matching list slot changes; other entries keep identity and order.
        Thread-safety: Protected by _lock.
        """
        if field not in EDITABLE_FIELDS:
            raise ValueError(f"Campo nao editavel: {field!r}")
        with self._lock:
            for idx, cliente in enumerate(self._clientes):
                if cliente.id == cliente_id:
                    self._clientes[idx] = replace(cliente, **{field: value})
                    return True
            return False

    # -------- Status handling --------

    def set_loading(self, loading: bool) -> None:
        with self._lock:
            self._status.is_loading = loading

    def is_loading(self) -> bool:
        with self._lock:
            return self._status.is_loading

    def set_error(self, message: Optional[str]) -> None:
        with self._lock:
            self._status.error_message = message

    def set_saving(self, cliente_id: Optional[int]) -> None:
        with self._lock:
            self._status.saving_id = cliente_id

    def set_feedback(self, feedback: Optional[Feedback]) -> None:
        with self._lock:
            self._status.feedback = feedback

    # -------- Snapshots for safe reading --------

    def snapshot(self) -> Tuple[List[Cliente], UIStatus]:
        """
        Purpose: Return copies of the list and status for safe iteration/rendering.
        Thread-safety: Protected by _lock; returns copies to avoid mutation races.
        """
        with self._lock:
            return list(self._clientes), replace(self._status)
