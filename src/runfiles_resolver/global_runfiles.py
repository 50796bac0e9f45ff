"""Process-wide runfiles resolver.

Provides thread-safe, lazily-built access to a single :class:`Runfiles`
discovered from ``sys.argv[0]`` and the environment.

Usage:
    import runfiles_resolver

    data = runfiles_resolver.path("my_workspace/pkg/data.txt")
"""

from __future__ import annotations

import logging
import threading
from typing import cast

from .errors import RunfilesError
from .resolver import Runfiles

logger = logging.getLogger(__name__)

_runfiles: Runfiles | None = None
_error: RunfilesError | None = None
_lock = threading.Lock()


def get_runfiles() -> Runfiles:
    """Get the process-wide Runfiles instance.

    Discovery runs at most once, guarded by double-checked locking. A
    discovery failure is cached as well and re-raised on every later call.

    Raises:
        DiscoveryError: If no runfiles were found.
        ManifestParseError: If the discovered manifest is malformed.
    """
    global _runfiles, _error
    if _runfiles is None and _error is None:
        with _lock:
            if _runfiles is None and _error is None:
                try:
                    _runfiles = Runfiles.create()
                except RunfilesError as e:
                    logger.debug("Runfiles discovery failed; caching error: %s", e)
                    _error = e
    if _runfiles is None:
        raise cast(RunfilesError, _error)
    return _runfiles


def path(name: str) -> str:
    """Return the filesystem location of ``name`` via the process-wide resolver."""
    return get_runfiles().resolve(name)


def env() -> list[str]:
    """Return ``KEY=VALUE`` strings for subprocesses via the process-wide resolver."""
    return get_runfiles().environment()


def reset_runfiles() -> None:
    """Reset the singleton (for testing only)."""
    global _runfiles, _error
    with _lock:
        _runfiles = None
        _error = None
