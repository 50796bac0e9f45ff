"""The :class:`Runfiles` resolver.

Typical use::

    r = Runfiles.create()
    data = r.resolve("my_workspace/pkg/data.txt")
    subprocess.run([tool], env=r.environ(), check=True)

A ``Runfiles`` is immutable once created, so one instance can be shared
between threads without locking.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from .discovery import discover
from .errors import EmptyRunfileError, RunfileNotFoundError, UninitializedError
from .models import Backend, DiscoveryConfig, Lookup, LookupStatus
from .names import validate_name


class Runfiles:
    """Resolve runfile names through a single backend.

    ``Runfiles()`` without a backend is the zero resolver: ``resolve`` always
    raises :class:`UninitializedError` and ``environment`` returns ``[]``.
    """

    __slots__ = ("_backend",)

    def __init__(self, backend: Backend | None = None):
        self._backend = backend

    @classmethod
    def create(
        cls,
        *,
        program: str | os.PathLike[str] | None = None,
        manifest_file: str | os.PathLike[str] | None = None,
        directory: str | os.PathLike[str] | None = None,
    ) -> Runfiles:
        """Discover the runfiles location and build a resolver.

        Unset arguments default to ``sys.argv[0]``, ``RUNFILES_MANIFEST_FILE``
        and ``RUNFILES_DIR``. See :mod:`runfiles_resolver.discovery` for the
        precedence between them.

        Raises:
            DiscoveryError: If no runfiles can be found.
            ManifestParseError: If the selected manifest is malformed.
        """
        config = DiscoveryConfig.from_environment(
            program=program, manifest_file=manifest_file, directory=directory,
        )
        return cls.from_config(config)

    @classmethod
    def from_config(cls, config: DiscoveryConfig) -> Runfiles:
        return cls(discover(config))

    @property
    def backend(self) -> Backend | None:
        return self._backend

    def lookup(self, name: str) -> Lookup:
        """Return the three-way lookup result for ``name``.

        Raises:
            InvalidNameError: If ``name`` is not a valid runfile name.
            UninitializedError: If this is the zero resolver.
        """
        validate_name(name)
        if self._backend is None:
            raise UninitializedError()
        return self._backend.resolve(name)

    def resolve(self, name: str) -> str:
        """Return the filesystem location of the runfile ``name``.

        ``name`` is relative and uses ``/`` as separator on every platform.

        Raises:
            InvalidNameError: If ``name`` is not a valid runfile name.
            UninitializedError: If this is the zero resolver.
            RunfileNotFoundError: If the backend has no entry for ``name``.
            EmptyRunfileError: If ``name`` is declared as an empty file.
        """
        result = self.lookup(name)
        if result.status is LookupStatus.FOUND and result.location is not None:
            return result.location
        if result.status is LookupStatus.EMPTY:
            raise EmptyRunfileError(name)
        raise RunfileNotFoundError(name)

    def environment(self) -> list[str]:
        """Return ``KEY=VALUE`` strings to append to a subprocess environment.

        The list is newly allocated on every call.
        """
        if self._backend is None:
            return []
        return list(self._backend.environment())

    def environ(self, base: Mapping[str, str] | None = None) -> dict[str, str]:
        """Return ``base`` (default ``os.environ``) overlaid with :meth:`environment`."""
        merged = dict(os.environ if base is None else base)
        for entry in self.environment():
            key, _, value = entry.partition("=")
            merged[key] = value
        return merged

    def __repr__(self) -> str:
        return f"Runfiles({self._backend!r})"
