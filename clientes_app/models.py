"""
Design (models.py)
- Purpose: Define simple, typed data structures for the customer list (Cliente) and the
           UI status that the view renders (UIStatus, Feedback).
- Inputs: Field values / backend rows (dict).
- Outputs: Dataclass instances.
- Side effects: None.
- Thread-safety: Plain containers; Repo protects concurrent access.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

FEEDBACK_SUCCESS = "success"
FEEDBACK_ERROR = "error"


@dataclass
class Cliente:
    """
    Design (Cliente)
    - Purpose: One customer row from the remote `clientes` table.
    - Fields:
        id: server-assigned primary key (immutable).
        nome: customer name, may be None.
        email: customer e-mail, may be None.
    """
    id: int
    nome: Optional[str] = None
    email: Optional[str] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Cliente":
        return cls(id=int(row["id"]), nome=row.get("nome"), email=row.get("email"))

    def update_payload(self) -> dict[str, Optional[str]]:
        """Fields sent on save; the id only selects the row."""
        return {"nome": self.nome, "email": self.email}


@dataclass(frozen=True)
class Feedback:
    kind: str  # FEEDBACK_SUCCESS | FEEDBACK_ERROR
    message: str

    @property
    def is_success(self) -> bool:
        return self.kind == FEEDBACK_SUCCESS


@dataclass
class UIStatus:
    is_loading: bool = False
    error_message: Optional[str] = None
    saving_id: Optional[int] = None
    feedback: Optional[Feedback] = None
