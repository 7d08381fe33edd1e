"""ContextVar-based scan configuration for verlex.

Provides context-local configuration using Python's ContextVars (PEP 567).
A Scanner snapshots the active config when it is created, so changing the
config afterwards never affects a scanner already in use.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from verlex import Scanner
    from verlex.config import ScanConfig, scan_config_context

    with scan_config_context(ScanConfig(skip_comments=True)):
        tokens = list(Scanner("pkg >= 1.0 # pinned").tokenize())

    # Or pass the config explicitly
    scanner = Scanner(source, config=ScanConfig(strict=True))

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from verlex.errors import ConfigError

DEFAULT_CHUNK_SIZE = 4096


def check_chunk_size(chunk_size: int) -> None:
    """Reject chunk sizes that would make every stream read come back empty.

    Raises:
        ConfigError: If chunk_size is not a positive integer.
    """
    if not isinstance(chunk_size, int) or chunk_size <= 0:
        raise ConfigError("chunk_size", f"must be a positive integer, got {chunk_size!r}")


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    The policies here apply only to ``Scanner.tokenize()`` iteration;
    ``Scanner.scan()`` always reports every token as-is.

    Attributes:
        skip_comments: Do not yield COMMENT tokens while iterating
        strict: Raise IllegalTokenError on the first ILLEGAL token
        chunk_size: Characters requested per read from a text stream

    """

    skip_comments: bool = False
    strict: bool = False
    chunk_size: int = DEFAULT_CHUNK_SIZE

    def __post_init__(self) -> None:
        check_chunk_size(self.chunk_size)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ScanConfig":
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                ScanConfig attribute names.

        Returns:
            New ScanConfig instance with values from dict.

        Example:
            >>> config = ScanConfig.from_dict({"strict": True, "color": "red"})
            >>> config.strict
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (context-local)."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context.

    Args:
        config: ScanConfig instance to use for this context.

    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Args:
        config: ScanConfig to use within the context.

    Example:
        >>> with scan_config_context(ScanConfig(skip_comments=True)):
        ...     tokens = scan_all("a # note")
        >>> # Automatically reset to previous config

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "ScanConfig",
    "check_chunk_size",
    "get_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
]
