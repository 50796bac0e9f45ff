"""Manifest-based runfiles lookup.

A manifest maps runfile names to filesystem locations, one entry per line::

    <name> <location>

Lines split on the first space only, so locations may contain spaces. A line
with an empty location (``"<name> "``) declares an empty runfile that has no
filesystem counterpart.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType

from .errors import ManifestParseError
from .models import EMPTY, MANIFEST_FILE_VAR, NOT_FOUND, Lookup

logger = logging.getLogger(__name__)


def parse_manifest(lines: Iterable[str], *, source: str = "<manifest>") -> Mapping[str, str]:
    """Parse manifest lines into a read-only name -> location mapping.

    Args:
        lines: Manifest lines without line terminators. A trailing ``"\\r"``
               is dropped.
        source: Manifest path used in error messages.

    Returns:
        Immutable mapping; the empty marker is stored as ``""``.

    Raises:
        ManifestParseError: On the first line without a space separator or
                            with an empty name.
    """
    entries: dict[str, str] = {}
    for line_number, raw in enumerate(lines, start=1):
        line = raw[:-1] if raw.endswith("\r") else raw
        name, sep, location = line.partition(" ")
        if not sep:
            raise ManifestParseError(
                source, "missing space separator", line_number=line_number, line=line,
            )
        if not name:
            raise ManifestParseError(
                source, "empty runfile name", line_number=line_number, line=line,
            )
        entries[name] = location
    return MappingProxyType(entries)


def read_manifest(path: str | os.PathLike[str]) -> Mapping[str, str]:
    """Read and parse the manifest file at ``path``.

    Raises:
        ManifestParseError: If the file cannot be read, is not UTF-8, or
                            contains a malformed line.
    """
    try:
        text = Path(path).read_bytes().decode("utf-8")
    except OSError as exc:
        raise ManifestParseError(path, f"can't open manifest file ({exc.strerror or exc})") from exc
    except UnicodeDecodeError as exc:
        raise ManifestParseError(path, "manifest file is not valid UTF-8") from exc

    lines = text.split("\n")
    # A final newline terminates the last entry rather than starting a new one.
    if lines and lines[-1] == "":
        lines.pop()
    return parse_manifest(lines, source=os.fspath(path))


class ManifestBackend:
    """Resolve runfiles through a parsed manifest."""

    def __init__(self, path: str | os.PathLike[str], entries: Mapping[str, str]):
        self._path = os.fspath(path)
        self._entries = entries

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> ManifestBackend:
        entries = read_manifest(path)
        logger.debug("Parsed %d runfiles manifest entries from %s", len(entries), path)
        return cls(path, entries)

    @property
    def path(self) -> str:
        return self._path

    @property
    def entries(self) -> Mapping[str, str]:
        return self._entries

    def resolve(self, name: str) -> Lookup:
        """Look up ``name`` by exact match, then by longest directory prefix.

        A manifest entry for a directory stands in for everything nested
        below it: with ``foo/dir -> /x/dir``, ``foo/dir/a/b`` resolves to
        ``/x/dir/a/b``. Empty markers never act as directory prefixes.
        """
        location = self._entries.get(name)
        if location is not None:
            return Lookup.found(location) if location else EMPTY

        end = name.rfind("/")
        while end > 0:
            prefix_location = self._entries.get(name[:end])
            if prefix_location:
                return Lookup.found(prefix_location + name[end:])
            end = name.rfind("/", 0, end)
        return NOT_FOUND

    def environment(self) -> list[str]:
        return [f"{MANIFEST_FILE_VAR}={self._path}"]

    def __repr__(self) -> str:
        return f"ManifestBackend({self._path!r}, entries={len(self._entries)})"
