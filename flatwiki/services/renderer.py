#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Markup renderer
===============
Turns a raw page body into HTML for the view template.

The only markup is the link token: ``[PageName]`` becomes
``<a href="/view/PageName">PageName</a>``.  Everything else is shown as
literal text.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import html as _html
import re

from .titles import TITLE_PATTERN, Operation, page_url


# -----------------------------------------------------------------------------

_LINK_RE = re.compile(r"\[(" + TITLE_PATTERN + r")\]")


# -----------------------------------------------------------------------------

def _link(m: re.Match) -> str:
    term = m.group(1)
    return f'<a href="{page_url(Operation.VIEW, term)}">{term}</a>'


def to_html(body: str) -> str:
    """
    Escape *body* and rewrite ``[term]`` tokens into page links.

    Escaping runs first so the anchors inserted afterwards are left intact.
    Brackets are not touched by the escaper, and terms are alphanumeric, so
    the substitution always sees the same tokens the author wrote.
    """
    escaped = _html.escape(body, quote=True)
    return _LINK_RE.sub(_link, escaped)


# -----------------------------------------------------------------------------
