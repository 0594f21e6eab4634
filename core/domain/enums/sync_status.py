"""
Sync Status Enums.

Status values for product mapping sync and the append-only sync log.
"""
from enum import Enum


class SyncStatus(str, Enum):
    """
    Product mapping sync lifecycle.

    pending -> syncing -> {synced | error}; a new attempt from error
    goes through syncing again.
    """

    PENDING = "pending"
    SYNCING = "syncing"
    SYNCED = "synced"
    ERROR = "error"


class SyncOperationType(str, Enum):
    """Operation recorded in the sync log."""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    SYNC = "sync"


class SyncLogStatus(str, Enum):
    """Outcome recorded in the sync log."""

    SUCCESS = "success"
    ERROR = "error"
    PENDING = "pending"
