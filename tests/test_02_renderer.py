#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""Tests for the [link] markup renderer."""
# -----------------------------------------------------------------------------

from __future__ import annotations

from flatwiki.services.renderer import to_html


# -----------------------------------------------------------------------------

def test_plain_text_unchanged():
    assert to_html("just some words") == "just some words"


def test_idempotent_without_tokens():
    text = "no links here, only words and 42 numbers\nover two lines"
    once = to_html(text)
    assert to_html(once) == once


def test_html_is_escaped():
    html = to_html("<b>")
    assert "<b>" not in html
    assert html == "&lt;b&gt;"


def test_quotes_and_ampersands_escaped():
    html = to_html("Tom & \"Jerry\" 'n' co")
    assert "&amp;" in html
    assert '"' not in html
    assert "'" not in html


def test_single_link():
    html = to_html("see [Home] page")
    assert html == 'see <a href="/view/Home">Home</a> page'
    assert html.count("<a ") == 1


def test_multiple_links_left_to_right():
    html = to_html("[One] and [Two][Three]")
    assert html == (
        '<a href="/view/One">One</a> and '
        '<a href="/view/Two">Two</a><a href="/view/Three">Three</a>'
    )


def test_empty_brackets_not_linked():
    assert to_html("[]") == "[]"


def test_non_alphanumeric_token_left_alone():
    assert to_html("[not a link]") == "[not a link]"
    assert to_html("[bad!id]") == "[bad!id]"


def test_nested_brackets_link_inner_token():
    assert to_html("[[Inner]]") == '[<a href="/view/Inner">Inner</a>]'


def test_markup_inside_brackets_stays_escaped():
    html = to_html("[<script>]")
    assert "<script>" not in html
    assert "<a " not in html


def test_escape_happens_before_linking():
    html = to_html("<i>[Page]</i>")
    assert html == '&lt;i&gt;<a href="/view/Page">Page</a>&lt;/i&gt;'


def test_empty_body():
    assert to_html("") == ""


# -----------------------------------------------------------------------------
