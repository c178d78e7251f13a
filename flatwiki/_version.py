"""Single source of version truth — the installed distribution's metadata."""
from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__: str = version("flatwiki")
except PackageNotFoundError:
    # Running from a source checkout without pip install -e .
    __version__ = "0.0.0"
