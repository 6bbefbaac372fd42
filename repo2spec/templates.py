"""
templates.py

Responsibility: Enumerate the spec template types installed on this machine.

A type is the file name of a template with its suffix stripped, e.g.
`golang.spec` -> `golang`, `golang-bin.spec` -> `golang-bin`.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def list_types(directory: str | Path, suffix: str = ".spec") -> list[str]:
    """
    Return available template types in lexicographic order.

    A missing or unreadable directory is not fatal: a warning is logged and
    the list is empty.
    """
    path = Path(directory)
    try:
        names = [entry.name for entry in path.iterdir()]
    except OSError as e:
        logger.warning("Cannot read template directory %s: %s", path, e.strerror or e)
        return []

    types = {name[: -len(suffix)] for name in names if name.endswith(suffix) and len(name) > len(suffix)}
    return sorted(types)
