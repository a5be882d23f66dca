"""Configuration for in-memory stores.

Provides the StoreConfig dataclass and the store_config factory function
that validates keyword options before a store is built.
"""

from dataclasses import dataclass


@dataclass
class StoreConfig:
    """Behavioral switches for a MockFS instance.

    The defaults are permissive, favoring test ergonomics over filesystem
    realism.

    Attributes:
        strict_unlink: Refuse to unlink directories (raise IsADirectoryError).
            When False, unlink removes any entry, file or directory.
        strict_parents: Refuse to create entries beneath an existing file
            (raise NotADirectoryError). When False, ancestors are never
            type-checked.
        strict_rmdir: Make rmdir raise on a missing path (FileNotFoundError),
            a file (NotADirectoryError), or a non-empty directory without
            recursive (OSError ENOTEMPTY). When False, rmdir never raises.
    """

    strict_unlink: bool = False
    strict_parents: bool = False
    strict_rmdir: bool = False


def store_config(**kwargs) -> StoreConfig:
    """Build a StoreConfig from keyword options.

    Args:
        **kwargs: Any StoreConfig field.
            - strict_unlink (bool): Optional (default: False).
            - strict_parents (bool): Optional (default: False).
            - strict_rmdir (bool): Optional (default: False).

    Returns:
        StoreConfig for MockFS construction.

    Raises:
        ValueError: If an unknown option is given.

    Examples:
        >>> store_config()
        StoreConfig(strict_unlink=False, strict_parents=False, strict_rmdir=False)

        >>> store_config(strict_unlink=True)
        StoreConfig(strict_unlink=True, strict_parents=False, strict_rmdir=False)
    """
    strict_unlink = kwargs.pop("strict_unlink", False)
    strict_parents = kwargs.pop("strict_parents", False)
    strict_rmdir = kwargs.pop("strict_rmdir", False)

    if kwargs:
        raise ValueError(f"Unexpected arguments for store: {list(kwargs.keys())}")

    return StoreConfig(
        strict_unlink=bool(strict_unlink),
        strict_parents=bool(strict_parents),
        strict_rmdir=bool(strict_rmdir),
    )
