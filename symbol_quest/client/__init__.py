"""Draw client: ledgers, remote API access and the draw flow."""
from symbol_quest.client.errors import (
    AlreadyDrawnError,
    ApiError,
    AuthenticationError,
    DrawValidationError,
    QuotaExceededError,
    ServiceUnavailableError,
)
from symbol_quest.client.ledger import DrawLedger, DrawRecord
from symbol_quest.client.local_ledger import LocalDrawLedger
from symbol_quest.client.orchestrator import DrawOrchestrator, DrawOutcome
from symbol_quest.client.remote_ledger import RemoteDrawLedger
from symbol_quest.client.session import ClientConfig, ClientSession
from symbol_quest.client.storage import JsonFileStorage, KeyValueStorage, MemoryStorage

__all__ = [
    "AlreadyDrawnError",
    "ApiError",
    "AuthenticationError",
    "DrawValidationError",
    "QuotaExceededError",
    "ServiceUnavailableError",
    "DrawLedger",
    "DrawRecord",
    "LocalDrawLedger",
    "RemoteDrawLedger",
    "DrawOrchestrator",
    "DrawOutcome",
    "ClientConfig",
    "ClientSession",
    "KeyValueStorage",
    "MemoryStorage",
    "JsonFileStorage",
]
