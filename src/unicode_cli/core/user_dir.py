"""Location of the per-user cache holding downloaded and generated databases."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
import os
from pathlib import Path


__all__ = [
    "UserDir",
    "get_user_dir",
    "resolve_cache_root",
    "user_dir_context",
]

APP_NAME = "unicode-cli"

# Set by ``user_dir_context``; wins over the environment while active.
_CACHE_OVERRIDE: Path | None = None


def resolve_cache_root() -> Path:
    """Return the cache root from ``UNICODE_CLI_CACHE_DIR``, ``XDG_CACHE_HOME`` or ``~/.cache``."""
    env_cache = os.environ.get("UNICODE_CLI_CACHE_DIR")
    if env_cache:
        return Path(env_cache).expanduser()
    xdg_cache = os.environ.get("XDG_CACHE_HOME")
    if xdg_cache:
        return Path(xdg_cache).expanduser() / APP_NAME
    return Path.home() / ".cache" / APP_NAME


@dataclass(frozen=True, slots=True)
class UserDir:
    """Resolved cache root."""

    cache_root: Path

    def cache_path(self, *parts: str | Path) -> Path:
        """Return a path under the cache root; nothing is created."""
        return self.cache_root.joinpath(*parts)


def get_user_dir() -> UserDir:
    """Return the cache location in effect, re-reading the environment on each call."""
    if _CACHE_OVERRIDE is not None:
        return UserDir(cache_root=_CACHE_OVERRIDE)
    return UserDir(cache_root=resolve_cache_root())


@contextmanager
def user_dir_context(cache_root: str | Path) -> Iterator[UserDir]:
    """Temporarily point the cache at ``cache_root``."""
    global _CACHE_OVERRIDE
    previous = _CACHE_OVERRIDE
    _CACHE_OVERRIDE = Path(cache_root).expanduser()
    try:
        yield get_user_dir()
    finally:
        _CACHE_OVERRIDE = previous
