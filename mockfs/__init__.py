"""mockfs: In-memory file store for testing file-system code without a disk."""

from .base import DirectoryEntry, Entry, FileEntry, FileMetadata, FileStore
from .config import StoreConfig, store_config
from .memory import MockFS, create_store, normalize_path

__all__ = [
    "create_store",
    "DirectoryEntry",
    "Entry",
    "FileEntry",
    "FileMetadata",
    "FileStore",
    "MockFS",
    "normalize_path",
    "store_config",
    "StoreConfig",
]
