"""Centralized Testing Stuff."""

# third party
import httpx
import pytest

# This repo
from pyawc.util import get_test_file


@pytest.fixture()
def awc_client(request):
    """Yield a httpx.Client answering every request with a canned file.

    Parametrize with ``(status_code, filename)``, a filename of None
    yields an empty body.
    """
    status_code, filename = getattr(request, "param", (200, None))
    content = b"" if filename is None else get_test_file(filename).encode()
    seen = []

    def handler(req):
        """Record the request and hand back the canned response."""
        seen.append(req)
        return httpx.Response(status_code, content=content)

    client = httpx.Client(transport=httpx.MockTransport(handler))
    client.requests = seen
    yield client
    client.close()
