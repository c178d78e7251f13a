#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Page service
============
Flat-file storage for wiki pages: one ``<title>.txt`` file per page under the
configured data directory.

Saves overwrite the whole file.  The new content goes to a temporary file
beside the target which is then renamed over it, so a concurrent load sees
either the old body or the new one.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
import os
import uuid
from pathlib import Path

import aiofiles
import aiofiles.os

from flatwiki.schemas import Page
from .titles import validate_title

log = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Errors
# -----------------------------------------------------------------------------

class PageStoreError(Exception):
    """Base class for storage failures."""


class PageNotFoundError(PageStoreError):
    def __init__(self, title: str):
        super().__init__(f"Page '{title}' not found")
        self.title = title


class PageReadError(PageStoreError):
    def __init__(self, title: str, reason: str):
        super().__init__(f"Could not read page '{title}': {reason}")
        self.title = title


class PageWriteError(PageStoreError):
    def __init__(self, title: str, reason: str):
        super().__init__(f"Could not save page '{title}': {reason}")
        self.title = title


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Store
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class PageStore:

    def __init__(self, root: Path, suffix: str = ".txt", file_mode: int = 0o600):
        self.root = Path(root)
        self.suffix = suffix
        self.file_mode = file_mode

    def path_for(self, title: str) -> Path:
        return self.root / f"{validate_title(title)}{self.suffix}"

    # -------------------------------------------------------------------------

    async def exists(self, title: str) -> bool:
        return await aiofiles.os.path.isfile(self.path_for(title))

    # -------------------------------------------------------------------------

    async def load(self, title: str) -> Page:
        path = self.path_for(title)
        try:
            # newline="" keeps \r\n from browser textareas byte for byte
            async with aiofiles.open(path, "r", encoding="utf-8", newline="") as f:
                body = await f.read()
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError):
            log.debug("No page file at %s", path)
            raise PageNotFoundError(title) from None
        except UnicodeDecodeError as exc:
            raise PageReadError(title, f"not valid UTF-8 at byte {exc.start}") from exc
        return Page(title=title, body=body)

    # -------------------------------------------------------------------------

    async def save(self, page: Page) -> None:
        path = self.path_for(page.title)
        tmp_path = self.root / f".{page.title}.{uuid.uuid4().hex}.tmp"
        try:
            await aiofiles.os.makedirs(self.root, exist_ok=True)
            async with aiofiles.open(tmp_path, "w", encoding="utf-8", newline="") as f:
                await f.write(page.body)
            os.chmod(tmp_path, self.file_mode)
            await aiofiles.os.replace(tmp_path, path)
        except OSError as exc:
            await self._discard(tmp_path)
            raise PageWriteError(page.title, exc.strerror or str(exc)) from exc
        log.info("Saved page %s (%d chars)", page.title, len(page.body))

    # -------------------------------------------------------------------------

    @staticmethod
    async def _discard(tmp_path: Path) -> None:
        try:
            await aiofiles.os.remove(tmp_path)
        except FileNotFoundError:
            pass
        except OSError as exc:
            log.warning("Could not remove temporary file %s: %s", tmp_path, exc)


# -----------------------------------------------------------------------------
