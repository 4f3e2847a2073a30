"""
Shared fixtures for tests.
"""

import pytest

from imgix_srcset.utils.render_logger import RenderLogger


class StubCdnClient:
    """Deterministic CDN client that records every call."""

    def __init__(self, options):
        self.options = options
        self.calls = []

    def create_url(self, path, params):
        self.calls.append((path, dict(params)))
        return f"https://{self.options.host}/{path}?w={params['w']}"


@pytest.fixture(autouse=True)
def quiet_logger(monkeypatch, tmp_path):
    """Keep the render logger silent and out of the working tree."""
    monkeypatch.setenv("SRCSET_DEBUG_LEVEL", "NONE")
    monkeypatch.setenv("SRCSET_LOG_DIR", str(tmp_path / "render-logs"))
    RenderLogger.reset()
    yield
    RenderLogger.reset()


@pytest.fixture
def stub_factory():
    """Client factory that keeps the clients it creates."""
    created = []

    def factory(options):
        client = StubCdnClient(options)
        created.append(client)
        return client

    factory.created = created
    return factory
