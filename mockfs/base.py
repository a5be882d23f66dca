"""Entry types, metadata and the store interface.

An entry is either a ``FileEntry`` (text content plus mtime) or a
``DirectoryEntry`` (mtime only). Content is only reachable on files.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Protocol, runtime_checkable


def utcnow() -> datetime:
    """Current wall-clock time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class FileEntry:
    """A file in the store.

    Attributes:
        content: Text content of the file.
        mtime: When this path was last written (UTC).
    """

    content: str = ""
    mtime: datetime = field(default_factory=utcnow)


@dataclass(frozen=True)
class DirectoryEntry:
    """A directory in the store. Directories carry no content."""

    mtime: datetime = field(default_factory=utcnow)


# Type alias for anything stored under a path key
Entry = FileEntry | DirectoryEntry


@dataclass
class FileMetadata:
    """Metadata for a single file or directory.

    Attributes:
        size: Content length in characters (0 for directories).
        mtime: Timestamp of the last write to this exact path (UTC).
        is_dir: True if this is a directory, False for files.
    """

    size: int
    mtime: datetime
    is_dir: bool = False

    @classmethod
    def from_entry(cls, entry: Entry) -> FileMetadata:
        if isinstance(entry, FileEntry):
            return cls(size=len(entry.content), mtime=entry.mtime)
        return cls(size=0, mtime=entry.mtime, is_dir=True)

    @property
    def is_file(self) -> bool:
        return not self.is_dir

    # os.stat_result-compatible properties

    @property
    def st_size(self) -> int:
        return self.size

    @property
    def st_mode(self) -> int:
        return 0o040755 if self.is_dir else 0o100644

    @property
    def st_nlink(self) -> int:
        return 1

    @property
    def st_uid(self) -> int:
        return os.getuid() if hasattr(os, "getuid") else 0

    @property
    def st_gid(self) -> int:
        return os.getgid() if hasattr(os, "getgid") else 0

    @property
    def st_mtime(self) -> float:
        return self.mtime.timestamp()

    @property
    def st_atime(self) -> float:
        return self.st_mtime


@runtime_checkable
class FileStore(Protocol):
    """Minimal interface for code that accepts an injected file store.

    Code under test should depend on this protocol rather than on
    ``MockFS`` directly, so a disk-backed adapter can be swapped in
    outside of tests.
    """

    def read_file(self, path: str) -> str:
        """Read a file's text content."""
        ...

    def write_file(self, path: str, content: str = "") -> None:
        """Write text content, creating missing ancestors."""
        ...

    def exists(self, path: str) -> bool:
        """Check if path exists."""
        ...

    def unlink(self, path: str) -> None:
        """Remove a file."""
        ...

    def mkdir(self, path: str, recursive: bool = False) -> None:
        """Create a directory."""
        ...

    def readdir(self, path: str) -> list[str]:
        """List immediate child names."""
        ...
