"""Runtime lookup of Bazel runfiles.

Two entry points:

- :func:`path` and :func:`env` use a process-wide resolver discovered from
  ``sys.argv[0]``, ``RUNFILES_MANIFEST_FILE`` and ``RUNFILES_DIR``.
- :class:`Runfiles` objects, created with :meth:`Runfiles.create`, for
  hermetic use or to change how runfiles are discovered.
"""

from runfiles_resolver.discovery import DiscoveryStrategy, discover, select_strategy
from runfiles_resolver.directory import DirectoryBackend
from runfiles_resolver.errors import (
    DiscoveryError,
    EmptyRunfileError,
    InvalidNameError,
    ManifestParseError,
    RunfileNotFoundError,
    RunfilesError,
    UninitializedError,
)
from runfiles_resolver.fs import RunfilesFS
from runfiles_resolver.global_runfiles import env, get_runfiles, path
from runfiles_resolver.manifest import ManifestBackend, parse_manifest, read_manifest
from runfiles_resolver.models import (
    DIRECTORY_VAR,
    MANIFEST_FILE_VAR,
    Backend,
    DiscoveryConfig,
    Lookup,
    LookupStatus,
)
from runfiles_resolver.names import validate_name
from runfiles_resolver.resolver import Runfiles

__all__ = [
    "DIRECTORY_VAR",
    "MANIFEST_FILE_VAR",
    "Backend",
    "DirectoryBackend",
    "DiscoveryConfig",
    "DiscoveryError",
    "DiscoveryStrategy",
    "EmptyRunfileError",
    "InvalidNameError",
    "Lookup",
    "LookupStatus",
    "ManifestBackend",
    "ManifestParseError",
    "RunfileNotFoundError",
    "Runfiles",
    "RunfilesError",
    "RunfilesFS",
    "UninitializedError",
    "discover",
    "env",
    "get_runfiles",
    "parse_manifest",
    "path",
    "read_manifest",
    "select_strategy",
    "validate_name",
]
