"""Object storage adapters."""

from .supabase_storage import StorageSigningError, SupabaseStorageClient

__all__ = ["StorageSigningError", "SupabaseStorageClient"]
