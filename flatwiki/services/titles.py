#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Title validation and path routing
=================================
Resolves a request path of the form ``/<op>/<title>`` into a :class:`Route`.

    /view/FrontPage   → Route(Operation.VIEW, "FrontPage")
    /edit/Sandbox2    → Route(Operation.EDIT, "Sandbox2")
    /save/Sandbox2    → Route(Operation.SAVE, "Sandbox2")

Titles are one or more ASCII letters or digits.  They double as storage keys,
so anything else (dots, slashes, empty) is refused outright.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import enum
import re
from typing import NamedTuple


# -----------------------------------------------------------------------------

TITLE_PATTERN = r"[a-zA-Z0-9]+"

_TITLE_RE = re.compile(TITLE_PATTERN)
_VALID_PATH_RE = re.compile(r"/(edit|save|view)/(" + TITLE_PATTERN + r")")


# -----------------------------------------------------------------------------

class InvalidPathError(ValueError):
    """Raised when a path or title does not match the wiki's naming rules."""


# -----------------------------------------------------------------------------

class Operation(str, enum.Enum):
    EDIT = "edit"
    SAVE = "save"
    VIEW = "view"


class Route(NamedTuple):
    operation: Operation
    title: str


# -----------------------------------------------------------------------------

def parse_path(path: str) -> Route:
    """Match *path* against the routing table; raise InvalidPathError on a miss."""
    m = _VALID_PATH_RE.fullmatch(path)
    if m is None:
        raise InvalidPathError(f"Invalid page path: {path!r}")
    return Route(Operation(m.group(1)), m.group(2))


def is_valid_title(title: str) -> bool:
    return _TITLE_RE.fullmatch(title) is not None


def validate_title(title: str) -> str:
    if not is_valid_title(title):
        raise InvalidPathError(f"Invalid page title: {title!r}")
    return title


def page_url(operation: Operation, title: str) -> str:
    return f"/{operation.value}/{title}"


# -----------------------------------------------------------------------------
