"""Validation of requested runfile names.

Runfile names always use the slash as separator, independent of the host
platform, so all checks go through :mod:`posixpath`.
"""

from __future__ import annotations

import posixpath

from .errors import InvalidNameError


def validate_name(name: str) -> str:
    """Return ``name`` unchanged if it is a valid runfile name.

    Checks (in order):
    1. non-empty
    2. not absolute
    3. canonical, i.e. equal to its lexically cleaned form
    4. does not escape the runfiles root

    Raises:
        InvalidNameError: With a ``reason`` naming the first failed check.
    """
    if not name:
        raise InvalidNameError(name, "may not be empty")
    if posixpath.isabs(name):
        raise InvalidNameError(name, "may not be absolute")
    if name != posixpath.normpath(name):
        raise InvalidNameError(name, "must be canonical")
    if name == ".." or name.startswith("../"):
        raise InvalidNameError(name, "may not escape the runfiles root")
    return name


def is_valid_name(name: str) -> bool:
    try:
        validate_name(name)
    except InvalidNameError:
        return False
    return True
