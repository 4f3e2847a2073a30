"""
Tests for CDN URL construction.
"""

import re

import pytest

from imgix_srcset import LIBRARY_NAME, __version__
from imgix_srcset.models import CdnClientOptions, RenderConfig, RenderMode
from imgix_srcset.urls.url_builder import (
    ImgixCdnClient,
    URLBuilder,
    build_url,
    client_options,
)


def test_client_options_from_config():
    config = RenderConfig(cdn_host="my.imgix.net", secure_token="s3cret", include_library_param=False)
    options = client_options(config)

    assert options.host == "my.imgix.net"
    assert options.library_name == LIBRARY_NAME
    assert options.library_version == __version__
    assert options.use_https is True
    assert options.secure_token == "s3cret"
    assert options.include_library_param is False


def test_client_options_pass_missing_host_through():
    options = client_options(RenderConfig())
    assert options.host is None
    assert options.secure_token is None


def test_build_url_delegates_width_only(stub_factory):
    builder = URLBuilder(RenderConfig(cdn_host="my.imgix.net"), client_factory=stub_factory)

    url = builder.build_url("foo.jpg", 640)

    assert url == "https://my.imgix.net/foo.jpg?w=640"
    client = stub_factory.created[0]
    assert client.calls == [("foo.jpg", {"w": 640})]


def test_builder_creates_one_client(stub_factory):
    builder = URLBuilder(RenderConfig(cdn_host="my.imgix.net"), client_factory=stub_factory)

    builder.build_url("foo.jpg", 100)
    builder.build_url("foo.jpg", 200)

    assert len(stub_factory.created) == 1
    assert len(stub_factory.created[0].calls) == 2


def test_builder_applies_wrapper(stub_factory):
    wrapped = []

    def wrap(client):
        wrapped.append(client)
        return client

    builder = URLBuilder(RenderConfig(cdn_host="my.imgix.net"), client_factory=stub_factory, wrap_client=wrap)
    builder.build_url("foo.jpg", 100)

    assert wrapped == stub_factory.created


def test_client_errors_propagate():
    def failing_factory(options):
        raise ValueError("bad host")

    with pytest.raises(ValueError, match="bad host"):
        build_url("foo.jpg", 100, RenderConfig(), client_factory=failing_factory)


def test_build_url_function(stub_factory):
    config = RenderConfig(cdn_host="cdn.example.net", mode=RenderMode.PRODUCTION)
    assert build_url("a/b.png", 320, config, client_factory=stub_factory) == "https://cdn.example.net/a/b.png?w=320"


def _imgix_options(**overrides):
    values = dict(
        host="my.imgix.net",
        library_name=LIBRARY_NAME,
        library_version=__version__,
        use_https=True,
    )
    values.update(overrides)
    return CdnClientOptions(**values)


def test_imgix_client_builds_https_url_with_library_param():
    url = ImgixCdnClient(_imgix_options()).create_url("foo.jpg", {"w": 640})

    assert url.startswith("https://my.imgix.net/")
    assert "foo.jpg" in url
    assert "w=640" in url
    assert f"ixlib={LIBRARY_NAME}-{__version__}" in url


def test_imgix_client_omits_library_param():
    url = ImgixCdnClient(_imgix_options(include_library_param=False)).create_url("foo.jpg", {"w": 640})
    assert "ixlib" not in url


def test_imgix_client_signs_with_token():
    unsigned = ImgixCdnClient(_imgix_options(include_library_param=False)).create_url("foo.jpg", {"w": 640})
    signed = ImgixCdnClient(
        _imgix_options(include_library_param=False, secure_token="s3cret")
    ).create_url("foo.jpg", {"w": 640})

    assert not re.search(r"[?&]s=", unsigned)
    assert re.search(r"[?&]s=[0-9a-f]{32}", signed)


def test_imgix_client_does_not_mutate_params():
    params = {"w": 640}
    ImgixCdnClient(_imgix_options()).create_url("foo.jpg", params)
    assert params == {"w": 640}
