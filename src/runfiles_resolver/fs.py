"""File access on top of a :class:`Runfiles` resolver.

Empty runfiles (manifest entries without a location) read as zero bytes.
"""

from __future__ import annotations

import io
import os
from typing import BinaryIO

from .errors import InvalidNameError, RunfileNotFoundError, UninitializedError
from .models import LookupStatus
from .resolver import Runfiles


class RunfilesFS:
    """Read-only file operations addressed by runfile name."""

    def __init__(self, runfiles: Runfiles):
        self.runfiles = runfiles

    def _location(self, name: str) -> str | None:
        """Resolve ``name``; ``None`` means the runfile is empty."""
        result = self.runfiles.lookup(name)
        if result.status is LookupStatus.NOT_FOUND:
            raise RunfileNotFoundError(name)
        return result.location

    def exists(self, name: str) -> bool:
        try:
            location = self._location(name)
        except (InvalidNameError, RunfileNotFoundError, UninitializedError):
            return False
        return location is None or os.path.exists(location)

    def stat(self, name: str) -> os.stat_result:
        """Return ``os.stat`` of the resolved location.

        Raises:
            EmptyRunfileError: Empty runfiles have nothing to stat.
        """
        return os.stat(self.runfiles.resolve(name))

    def open(self, name: str) -> BinaryIO:
        location = self._location(name)
        if location is None:
            return io.BytesIO(b"")
        return open(location, "rb")

    def read_bytes(self, name: str) -> bytes:
        location = self._location(name)
        if location is None:
            return b""
        with open(location, "rb") as fh:
            return fh.read()

    def read_text(self, name: str, encoding: str = "utf-8") -> str:
        return self.read_bytes(name).decode(encoding)
