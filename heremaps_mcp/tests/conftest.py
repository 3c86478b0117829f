import os

import httpx
import pytest

os.environ.setdefault("HERE_MAPS_API_KEY", "test-key")

from heremaps_mcp.core.config import get_settings  # noqa: E402
from heremaps_mcp.core.here_client import HereMapsClient  # noqa: E402
from heremaps_mcp.mcp.dispatcher import ToolDispatcher  # noqa: E402

API_KEY = "test-key"


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_dispatcher():
    """Build a dispatcher whose HTTP traffic goes to ``handler``."""

    def factory(handler):
        client = HereMapsClient(transport=httpx.MockTransport(handler))
        return ToolDispatcher(API_KEY, client)

    return factory
