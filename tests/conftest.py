#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Pytest fixtures for FlatWiki tests.
Every test gets its own temporary data directory.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from flatwiki.core.config import Settings
from flatwiki.main import create_app
from flatwiki.services.pages import PageStore


# -----------------------------------------------------------------------------

@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(environment="testing", data_dir=tmp_path / "data")


@pytest.fixture
def store(settings) -> PageStore:
    return PageStore(settings.data_dir, suffix=settings.page_suffix, file_mode=settings.page_file_mode)


@pytest_asyncio.fixture(scope="function")
async def client(settings):
    """HTTP test client wired to an isolated data directory."""
    app = create_app(settings)

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


# -----------------------------------------------------------------------------
