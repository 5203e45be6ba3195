"""
Design (utils.py)
- Purpose: Reusable view helpers: null-safe text for entries, banner colours, button labels.
- Side effects: None.
- Thread-safety: Stateless; safe to call from any thread.
"""

from typing import Optional, Tuple

from .models import Feedback

SUCCESS_COLORS = ("#dcfce7", "#166534")
ERROR_COLORS = ("#fee2e2", "#b91c1c")


def display_text(value: Optional[str]) -> str:
    """Entries show '' for a NULL column."""
    return "" if value is None else value


def feedback_colors(feedback: Feedback) -> Tuple[str, str]:
    """
    Purpose: Background/foreground pair for the feedback banner.
    Outputs: (bg, fg) hex colours; green for success, red for error.
    """
    return SUCCESS_COLORS if feedback.is_success else ERROR_COLORS


def reload_label(loading: bool) -> str:
    return "Carregando..." if loading else "Recarregar"


def save_label(saving: bool) -> str:
    return "Salvando..." if saving else "Atualizar"
