#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Jinja2 UI views (server-rendered HTML pages)
============================================
GET  /               — redirect to the front page
GET  /view/{title}   — view a page (redirects to edit when it doesn't exist)
GET  /edit/{title}   — edit form, empty for a new page
POST /save/{title}   — save the ``body`` form field, then redirect to view
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Form, HTTPException, Request, status
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError

from flatwiki.core.config import Settings
from flatwiki.schemas import Page
from flatwiki.services.pages import PageNotFoundError, PageReadError, PageStore, PageWriteError
from flatwiki.services.renderer import to_html
from flatwiki.services.titles import InvalidPathError, Operation, page_url, parse_path

log = logging.getLogger(__name__)


# -----------------------------------------------------------------------------

router = APIRouter(tags=["ui"])


# -----------------------------------------------------------------------------
# Dependencies
# -----------------------------------------------------------------------------

def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> PageStore:
    return request.app.state.store


def get_templates(request: Request) -> Jinja2Templates:
    return request.app.state.templates


def _title_for(operation: Operation):
    """Build a dependency that resolves the page title for *operation*.

    The raw ASGI path goes through the title validator (``request.url`` drops
    tab and newline characters); a mismatch, or a path that names another
    operation, ends the request with a 404.
    """
    def dependency(request: Request) -> str:
        try:
            route = parse_path(request.scope["path"])
        except InvalidPathError:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        if route.operation is not operation:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return route.title

    return dependency


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------

def _ctx(settings: Settings, page: Page, **extra) -> dict:
    """Base template context (request passed separately as first arg to TemplateResponse)."""
    return {
        "site_name": settings.site_name,
        "app_version": settings.app_version,
        "page": page,
        **extra,
    }


def _render(request: Request, templates: Jinja2Templates, name: str, context: dict):
    try:
        return templates.TemplateResponse(request, f"{name}.html", context)
    except TemplateError as exc:
        log.error("Rendering %s.html failed: %s", name, exc)
        return PlainTextResponse(str(exc), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def _redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url=url, status_code=status.HTTP_302_FOUND)


def _store_error(exc: Exception) -> PlainTextResponse:
    log.error("%s", exc)
    return PlainTextResponse(str(exc), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Index
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@router.get("/")
async def index(settings: Settings = Depends(get_app_settings)):
    return _redirect(page_url(Operation.VIEW, settings.front_page))


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Page view
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@router.get("/view/{title}", response_class=HTMLResponse)
async def view_page(
    request: Request,
    page_title: str = Depends(_title_for(Operation.VIEW)),
    store: PageStore = Depends(get_store),
    templates: Jinja2Templates = Depends(get_templates),
    settings: Settings = Depends(get_app_settings),
):
    try:
        page = await store.load(page_title)
    except PageNotFoundError:
        return _redirect(page_url(Operation.EDIT, page_title))
    except PageReadError as exc:
        return _store_error(exc)

    return _render(
        request, templates, "view",
        _ctx(settings, page, rendered=to_html(page.body)),
    )


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Edit
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@router.get("/edit/{title}", response_class=HTMLResponse)
async def edit_page_form(
    request: Request,
    page_title: str = Depends(_title_for(Operation.EDIT)),
    store: PageStore = Depends(get_store),
    templates: Jinja2Templates = Depends(get_templates),
    settings: Settings = Depends(get_app_settings),
):
    try:
        page = await store.load(page_title)
    except PageNotFoundError:
        page = Page(title=page_title)
    except PageReadError as exc:
        return _store_error(exc)

    return _render(request, templates, "edit", _ctx(settings, page))


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Save
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@router.post("/save/{title}")
async def save_page(
    page_title: str = Depends(_title_for(Operation.SAVE)),
    body: str = Form(default=""),
    store: PageStore = Depends(get_store),
):
    page = Page(title=page_title, body=body)
    try:
        await store.save(page)
    except PageWriteError as exc:
        return _store_error(exc)

    return _redirect(page_url(Operation.VIEW, page_title))


# -----------------------------------------------------------------------------
