"""In-memory file store implementation."""

from __future__ import annotations

import errno as _errno
import logging
from collections.abc import Iterable, Iterator, Mapping

from .base import DirectoryEntry, Entry, FileEntry, FileMetadata, utcnow
from .config import StoreConfig, store_config

logger = logging.getLogger(__name__)


def normalize_path(path: str) -> str:
    """Canonicalize a path for use as a store key.

    Backslashes become forward slashes and trailing slashes are stripped,
    so ``"\\src\\"``, ``"/src/"`` and ``"/src"`` all map to ``"/src"``.
    Nothing else is touched: no case folding, no ``.``/``..`` resolution,
    no collapsing of repeated interior slashes. The root ``"/"`` becomes
    the empty string.
    """
    return path.replace("\\", "/").rstrip("/")


def _ancestors(key: str) -> Iterator[str]:
    """Yield ancestor keys of a normalized key, root-most first.

    Empty segments never produce a key, so ``/a//b/c`` yields ``/a`` and
    ``/a//b`` only.
    """
    parts = key.split("/")[:-1]
    current = ""
    for i, part in enumerate(parts):
        current = part if i == 0 else f"{current}/{part}"
        if part:
            yield current


class MockFS:
    """In-memory file store for unit tests.

    Holds a single flat ``dict`` from normalized path to ``Entry``. Every
    operation normalizes its path argument first, then touches the mapping
    exactly as described on the method. Writes never fail; directories come
    into being implicitly when a file is written beneath them.

    ``entries`` is the live mapping, exposed so tests can assert on entry
    internals (type, content, mtime) directly.

    Example:
        >>> fs = MockFS(initial_files={"/config.json": "{}"})
        >>> fs.read_file("/config.json")
        '{}'
        >>> fs.write_file("/src/a.py", "x = 1")
        >>> fs.readdir("/")
        ['config.json', 'src']
    """

    def __init__(
        self,
        initial_dirs: Iterable[str] | None = None,
        initial_files: Mapping[str, str] | None = None,
        config: StoreConfig | None = None,
    ) -> None:
        """Initialize the store.

        Initial entries share one construction timestamp and do not create
        their ancestors. Directories are applied first, then files, so a path
        given in both ends up as a file.

        Args:
            initial_dirs: Paths to insert as directories.
            initial_files: Mapping of path to text content.
            config: Behavioral switches. Defaults to StoreConfig().
        """
        self.entries: dict[str, Entry] = {}
        self.config = config if config is not None else StoreConfig()

        now = utcnow()
        for path in initial_dirs or ():
            self.entries[normalize_path(path)] = DirectoryEntry(mtime=now)
        for path, content in (initial_files or {}).items():
            self.entries[normalize_path(path)] = FileEntry(content=content, mtime=now)

        logger.debug("Created store with %d initial entries", len(self.entries))

    # -------------------------------------------------------------------------
    # Files
    # -------------------------------------------------------------------------

    def read_file(self, path: str) -> str:
        """Return a file's content.

        Raises:
            FileNotFoundError: If nothing exists at path, or it is a directory.
        """
        entry = self.entries.get(normalize_path(path))
        if not isinstance(entry, FileEntry):
            raise FileNotFoundError(_errno.ENOENT, "No such file", path)
        return entry.content or ""

    def write_file(self, path: str, content: str = "") -> None:
        """Create or overwrite a file, creating any missing ancestors.

        Ancestors that already exist are left untouched.
        """
        key = normalize_path(path)
        self._ensure_ancestors(key, path)
        self.entries[key] = FileEntry(content=content, mtime=utcnow())

    def unlink(self, path: str) -> None:
        """Remove a single entry. Ancestors are never removed.

        With the default config a directory is removed like a file (its
        descendants are left in place). With ``strict_unlink`` it is refused.

        Raises:
            FileNotFoundError: If nothing exists at path.
            IsADirectoryError: If path is a directory and strict_unlink is set.
        """
        key = normalize_path(path)
        entry = self.entries.get(key)
        if entry is None:
            raise FileNotFoundError(_errno.ENOENT, "No such file", path)
        if self.config.strict_unlink and isinstance(entry, DirectoryEntry):
            raise IsADirectoryError(_errno.EISDIR, "Is a directory", path)
        del self.entries[key]

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def exists(self, path: str) -> bool:
        return normalize_path(path) in self.entries

    def isfile(self, path: str) -> bool:
        return isinstance(self.entries.get(normalize_path(path)), FileEntry)

    def isdir(self, path: str) -> bool:
        return isinstance(self.entries.get(normalize_path(path)), DirectoryEntry)

    def stat(self, path: str) -> FileMetadata:
        """Get metadata for a file or directory.

        Raises:
            FileNotFoundError: If nothing exists at path.
        """
        entry = self.entries.get(normalize_path(path))
        if entry is None:
            raise FileNotFoundError(_errno.ENOENT, "No such file or directory", path)
        return FileMetadata.from_entry(entry)

    # -------------------------------------------------------------------------
    # Directories
    # -------------------------------------------------------------------------

    def mkdir(self, path: str, recursive: bool = False) -> None:
        """Set path to a fresh directory entry, overwriting whatever was there.

        With ``recursive`` every missing ancestor is created first. Without
        it the ancestors are not checked, so orphan directories are allowed.
        """
        key = normalize_path(path)
        if recursive:
            self._ensure_ancestors(key, path)
        elif self.config.strict_parents:
            self._check_ancestors(key, path)
        self.entries[key] = DirectoryEntry(mtime=utcnow())

    def readdir(self, path: str) -> list[str]:
        """List the immediate child names under path.

        The scan is prefix-based over every key, so a missing path or a file
        simply yields an empty list. Names appear in first-seen order. The
        root (``"/"`` or ``""``) lists the first segment of every key, with
        or without a leading slash.
        """
        key = normalize_path(path)
        prefix = key + "/" if key else ""
        names: dict[str, None] = {}
        for candidate in self.entries:
            if candidate.startswith(prefix) and candidate != key:
                rest = candidate[len(prefix):]
                if not key:
                    rest = rest.removeprefix("/")
                name = rest.split("/", 1)[0]
                if name:
                    names[name] = None
        return list(names)

    def rmdir(self, path: str, recursive: bool = False) -> None:
        """Remove a directory entry.

        With ``recursive`` every key beneath the directory is removed too.
        By default nothing is checked: a missing key is ignored, a file key
        is removed like a directory, and without ``recursive`` descendants
        are left in place. ``strict_rmdir`` turns those cases into errors.

        Raises:
            FileNotFoundError: If nothing exists at path (strict_rmdir).
            NotADirectoryError: If path is a file (strict_rmdir).
            OSError: If the directory has descendants and recursive is
                False (strict_rmdir).
        """
        key = normalize_path(path)
        prefix = key + "/"
        descendants = [k for k in self.entries if k.startswith(prefix)]

        if self.config.strict_rmdir:
            entry = self.entries.get(key)
            if entry is None:
                raise FileNotFoundError(_errno.ENOENT, "No such directory", path)
            if isinstance(entry, FileEntry):
                raise NotADirectoryError(_errno.ENOTDIR, "Not a directory", path)
            if descendants and not recursive:
                raise OSError(_errno.ENOTEMPTY, "Directory not empty", path)

        if recursive:
            for k in descendants:
                del self.entries[k]
            if descendants:
                logger.debug("Removed %d entries beneath %s", len(descendants), key)
        self.entries.pop(key, None)

    # -------------------------------------------------------------------------
    # Whole-store operations
    # -------------------------------------------------------------------------

    def snapshot(self) -> dict[str, Entry]:
        """Return a copy of the mapping, unaffected by later mutations."""
        return dict(self.entries)

    def reset(self) -> None:
        """Remove every entry.

        The ``entries`` mapping is cleared in place, so handles obtained
        earlier observe the empty store.
        """
        logger.debug("Resetting store (%d entries)", len(self.entries))
        self.entries.clear()

    # -------------------------------------------------------------------------
    # Internal
    # -------------------------------------------------------------------------

    def _check_ancestors(self, key: str, path: str) -> None:
        for ancestor in _ancestors(key):
            if isinstance(self.entries.get(ancestor), FileEntry):
                raise NotADirectoryError(_errno.ENOTDIR, "Not a directory", path)

    def _ensure_ancestors(self, key: str, path: str) -> None:
        """Create each missing ancestor of key as a directory, root-most first."""
        if self.config.strict_parents:
            self._check_ancestors(key, path)
        for ancestor in _ancestors(key):
            if ancestor not in self.entries:
                self.entries[ancestor] = DirectoryEntry(mtime=utcnow())


def create_store(
    initial_dirs: Iterable[str] | None = None,
    initial_files: Mapping[str, str] | None = None,
    **kwargs,
) -> MockFS:
    """Create a MockFS.

    Args:
        initial_dirs: Paths to insert as directories.
        initial_files: Mapping of path to text content.
        **kwargs: StoreConfig options (strict_unlink, strict_parents, strict_rmdir).

    Returns:
        A new, independent store.

    Raises:
        ValueError: If an unknown option is given.

    Examples:
        >>> fs = create_store(initial_files={"/config.json": "{}"})
        >>> fs.exists("/config.json")
        True
    """
    return MockFS(initial_dirs, initial_files, config=store_config(**kwargs))
