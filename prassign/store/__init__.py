"""In-memory record store with the derived reviewer index."""

from prassign.store.memory_store import MemoryStore

__all__ = ["MemoryStore"]
