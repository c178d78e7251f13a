from flatwiki.schemas.schemas import (
    Page,
    HealthResponse,
)

__all__ = [
    "Page",
    "HealthResponse",
]
