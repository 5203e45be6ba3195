"""
Design (gateway.py)
- Purpose: Two-operation handle over the hosted `clientes` table (read all, update by id).
- Inputs: A supabase Client (built once by create_gateway from Settings).
- Outputs: list[Cliente] from fetch_all(); None from update_record().
- Side effects: Network calls through the supabase client.
- Thread-safety: Stateless apart from the client; called from runner worker threads.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx
from postgrest.exceptions import APIError
from supabase import Client, SupabaseException, create_client

from .config import SELECT_COLUMNS, TABLE_NAME, ConfigError, Settings
from .models import Cliente

logger = logging.getLogger(__name__)


class GatewayError(Exception):
    """A backend or transport failure; str() is the user-presentable detail."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def _error_detail(exc: Exception) -> str:
    message = getattr(exc, "message", None)
    if message:
        return str(message)
    return str(exc) or exc.__class__.__name__


class ClienteGateway:
    def __init__(self, client: Client, table: str = TABLE_NAME) -> None:
        self._client = client
        self._table = table

    def fetch_all(self) -> List[Cliente]:
        """All rows ordered by id ascending, only id/nome/email."""
        try:
            response = (
                self._client.table(self._table)
                .select(SELECT_COLUMNS)
                .order("id")
                .execute()
            )
        except (APIError, httpx.HTTPError) as exc:
            raise GatewayError(_error_detail(exc)) from exc
        rows: Optional[List[dict[str, Any]]] = response.data
        return [Cliente.from_row(row) for row in rows or []]

    def update_record(self, cliente_id: int, payload: Dict[str, Optional[str]]) -> None:
        """Write exactly the fields in payload (Cliente.update_payload()) to row cliente_id."""
        try:
            (
                self._client.table(self._table)
                .update(payload)
                .eq("id", cliente_id)
                .execute()
            )
        except (APIError, httpx.HTTPError) as exc:
            raise GatewayError(_error_detail(exc)) from exc


def create_gateway(settings: Settings) -> ClienteGateway:
    """
    Build the process-wide gateway; call once at startup.
    A malformed URL or key is rejected by the client and surfaces as ConfigError.
    """
    logger.info("Connecting to %s (table %s)", settings.supabase_url, TABLE_NAME)
    try:
        client = create_client(settings.supabase_url, settings.supabase_key)
    except SupabaseException as exc:
        raise ConfigError(f"Configuracao do Supabase invalida: {exc}") from exc
    return ClienteGateway(client)
