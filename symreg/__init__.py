"""symreg — small registry of symbolic names with change notifications.

This package exposes a `Registry` mapping string names to arbitrary data.
Every registration and removal is announced synchronously to observers
through an owned `EventEmitter`. It's intentionally small and dependency-free.
"""
from importlib.metadata import PackageNotFoundError, version as _pkg_version
from pathlib import Path
from typing import Optional

from symreg._types import NOT_FOUND
from symreg.core import Registry
from symreg.events import REGISTER, UNREGISTER, EventEmitter
from symreg.exceptions import (
    InvalidArgumentError,
    NotRegisteredError,
    RegistryError,
)


def _read_version_file() -> Optional[str]:
    try:
        return Path(__file__).with_name("VERSION").read_text(encoding="utf8").strip()
    except OSError:
        return None


def _get_version() -> str:
    # 1) Try to read installed distribution metadata
    try:
        return _pkg_version("symreg")
    except PackageNotFoundError:
        pass

    # 2) Try the VERSION file shipped with the package
    v = _read_version_file()
    if v:
        return v

    # 3) Fall back to a safe default
    return "0.0.0"


__version__ = _get_version()


__all__ = [
    "Registry",
    "EventEmitter",
    "REGISTER",
    "UNREGISTER",
    "NOT_FOUND",
    "RegistryError",
    "InvalidArgumentError",
    "NotRegisteredError",
    "__version__",
]
