"""Core data structures shared by the runfiles backends and the resolver."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

#: Environment variable naming the runfiles manifest file.
MANIFEST_FILE_VAR = "RUNFILES_MANIFEST_FILE"

#: Environment variable naming the runfiles directory.
DIRECTORY_VAR = "RUNFILES_DIR"


class LookupStatus(Enum):
    FOUND = "found"
    EMPTY = "empty"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class Lookup:
    """Outcome of a backend lookup.

    ``location`` is only set when ``status`` is :attr:`LookupStatus.FOUND`.
    """

    status: LookupStatus
    location: str | None = None

    @classmethod
    def found(cls, location: str) -> Lookup:
        return cls(LookupStatus.FOUND, location)

    @property
    def is_found(self) -> bool:
        return self.status is LookupStatus.FOUND


EMPTY = Lookup(LookupStatus.EMPTY)
NOT_FOUND = Lookup(LookupStatus.NOT_FOUND)


class Backend(Protocol):
    """One runfiles lookup strategy."""

    def resolve(self, name: str) -> Lookup:
        """Look up an already validated runfile name."""
        ...

    def environment(self) -> list[str]:
        """Return ``KEY=VALUE`` assignments for subprocesses."""
        ...


@dataclass(frozen=True)
class DiscoveryConfig:
    """Inputs to runfiles discovery.

    Empty strings mean "unset". Use :meth:`from_environment` to fill unset
    values from the process invocation and the environment.
    """

    program: str = ""
    manifest_file: str = ""
    directory: str = ""

    @classmethod
    def from_environment(
        cls,
        *,
        program: str | os.PathLike[str] | None = None,
        manifest_file: str | os.PathLike[str] | None = None,
        directory: str | os.PathLike[str] | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> DiscoveryConfig:
        """Build a config, deriving every unset value.

        Resolution order per value:
        1. Explicit argument (non-empty)
        2. ``sys.argv[0]`` for the program, ``RUNFILES_MANIFEST_FILE`` for the
           manifest, ``RUNFILES_DIR`` for the directory
        """
        env = os.environ if environ is None else environ
        program_str = os.fspath(program) if program else ""
        if not program_str:
            program_str = sys.argv[0] if sys.argv else ""
        manifest_str = os.fspath(manifest_file) if manifest_file else ""
        if not manifest_str:
            manifest_str = env.get(MANIFEST_FILE_VAR, "")
        directory_str = os.fspath(directory) if directory else ""
        if not directory_str:
            directory_str = env.get(DIRECTORY_VAR, "")
        return cls(program=program_str, manifest_file=manifest_str, directory=directory_str)
