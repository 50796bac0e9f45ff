"""Runfiles discovery: choose exactly one lookup backend.

Strategies (checked in order):
1. CO_LOCATED_MANIFEST  -- ``<program>.runfiles_manifest`` (regular file)
2. CO_LOCATED_DIRECTORY -- ``<program>.runfiles/`` (directory)
3. MANIFEST             -- explicit manifest path or ``RUNFILES_MANIFEST_FILE``
4. DIRECTORY            -- explicit directory or ``RUNFILES_DIR``

Artifacts next to the program always win over explicit or environment
overrides. Manifest and directory strategies are never combined.
"""

from __future__ import annotations

import logging
import os
from enum import Enum

from .directory import DirectoryBackend
from .errors import DiscoveryError
from .manifest import ManifestBackend
from .models import Backend, DiscoveryConfig

logger = logging.getLogger(__name__)

MANIFEST_SUFFIX = ".runfiles_manifest"
DIRECTORY_SUFFIX = ".runfiles"


class DiscoveryStrategy(Enum):
    CO_LOCATED_MANIFEST = "co_located_manifest"
    CO_LOCATED_DIRECTORY = "co_located_directory"
    MANIFEST = "manifest"
    DIRECTORY = "directory"


def select_strategy(config: DiscoveryConfig) -> tuple[DiscoveryStrategy, str]:
    """Return the winning strategy and the path it applies to.

    Only the two co-located candidates touch the filesystem.

    Raises:
        DiscoveryError: If no strategy applies.
    """
    if config.program:
        manifest = config.program + MANIFEST_SUFFIX
        if os.path.isfile(manifest):
            return DiscoveryStrategy.CO_LOCATED_MANIFEST, manifest

        directory = config.program + DIRECTORY_SUFFIX
        if os.path.isdir(directory):
            return DiscoveryStrategy.CO_LOCATED_DIRECTORY, directory

    if config.manifest_file:
        return DiscoveryStrategy.MANIFEST, config.manifest_file

    if config.directory:
        return DiscoveryStrategy.DIRECTORY, config.directory

    raise DiscoveryError(config)


def discover(config: DiscoveryConfig) -> Backend:
    """Build the backend chosen by :func:`select_strategy`.

    Raises:
        DiscoveryError: If no strategy applies.
        ManifestParseError: If the chosen manifest cannot be parsed.
    """
    strategy, location = select_strategy(config)
    logger.debug("Runfiles discovery selected %s: %s", strategy.value, location)
    if strategy in (DiscoveryStrategy.CO_LOCATED_MANIFEST, DiscoveryStrategy.MANIFEST):
        return ManifestBackend.from_file(location)
    return DirectoryBackend(location)
