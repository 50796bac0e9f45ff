"""Directory-based runfiles lookup."""

from __future__ import annotations

import os

from .models import DIRECTORY_VAR, Lookup


class DirectoryBackend:
    """Resolve runfiles by joining names onto a runfiles root directory.

    No existence check happens here; a missing file surfaces from whatever
    file operation the caller performs on the returned location.
    """

    def __init__(self, root: str | os.PathLike[str]):
        self._root = os.fspath(root)

    @property
    def root(self) -> str:
        return self._root

    def resolve(self, name: str) -> Lookup:
        return Lookup.found(os.path.join(self._root, name))

    def environment(self) -> list[str]:
        return [f"{DIRECTORY_VAR}={self._root}"]

    def __repr__(self) -> str:
        return f"DirectoryBackend({self._root!r})"
