"""Exception hierarchy for runfiles resolution."""

from __future__ import annotations

import errno
import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import DiscoveryConfig


class RunfilesError(Exception):
    """Base exception for runfiles errors."""
    pass


class InvalidNameError(RunfilesError, ValueError):
    """A requested runfile name is empty, absolute, non-canonical or escapes the root."""

    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        if name:
            super().__init__(f"runfiles: name {name!r} {reason}")
        else:
            super().__init__(f"runfiles: name {reason}")


class ManifestParseError(RunfilesError):
    """The manifest file could not be read or contains a malformed line."""

    def __init__(
        self,
        manifest: str | os.PathLike[str],
        message: str,
        *,
        line_number: int | None = None,
        line: str | None = None,
    ):
        self.manifest = os.fspath(manifest)
        self.line_number = line_number
        self.line = line
        if line_number is not None:
            super().__init__(
                f"runfiles: bad manifest line {line_number} {line!r} in file {self.manifest}: {message}"
            )
        else:
            super().__init__(f"runfiles: {message}: {self.manifest}")


class RunfileNotFoundError(RunfilesError, FileNotFoundError):
    """The name is absent from the active backend."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(errno.ENOENT, "runfile not found", name)


class EmptyRunfileError(RunfilesError):
    """The name maps to the manifest's empty marker.

    The runfile is declared but has no filesystem counterpart. Callers that
    treat it as a zero-byte file catch this exception explicitly.
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"runfiles: {name!r} is an empty runfile without a filesystem location")


class UninitializedError(RunfilesError):
    """The resolver was created without a backend."""

    def __init__(self) -> None:
        super().__init__("runfiles: uninitialized Runfiles object")


class DiscoveryError(RunfilesError):
    """No discovery strategy yielded a backend."""

    def __init__(self, config: "DiscoveryConfig | None" = None):
        self.config = config
        super().__init__("runfiles: no runfiles found")
