"""Helpers shared by the test modules."""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

FIXTURE_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> bytes:
    return (FIXTURE_DIR / name).read_bytes()


def make_http_response(content: bytes, status_code: int = 200) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.content = content
    return response


def make_async_client_ctx(get: AsyncMock) -> AsyncMock:
    """Return an async context manager whose .get() is *get*."""
    inner = AsyncMock()
    inner.get = get
    ctx = AsyncMock()
    ctx.__aenter__ = AsyncMock(return_value=inner)
    ctx.__aexit__ = AsyncMock(return_value=False)
    return ctx
