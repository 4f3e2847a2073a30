"""
Tests for configuration loading.
"""

import json

import pytest

from imgix_srcset.io.config_loader import (
    config_from_env,
    environment_mode,
    load_render_config,
    load_site_config,
)
from imgix_srcset.models import RenderMode


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate from the caller's environment and any .env file."""
    for name in ("IMGIX_SOURCE", "IMGIX_SECURE_URL_TOKEN", "IMGIX_INCLUDE_LIBRARY_PARAM", "SRCSET_ENV"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def site_config(tmp_path):
    path = tmp_path / "site.json"
    path.write_text(json.dumps({
        "title": "Blog",
        "imgix": {"source": "site.imgix.net", "include_library_param": False},
    }))
    return path


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("IMGIX_SOURCE", "env.imgix.net")
    monkeypatch.setenv("IMGIX_SECURE_URL_TOKEN", "tok")
    monkeypatch.setenv("IMGIX_INCLUDE_LIBRARY_PARAM", "false")

    assert config_from_env() == {
        "source": "env.imgix.net",
        "secure_url_token": "tok",
        "include_library_param": False,
    }


def test_config_from_env_skips_unset():
    assert config_from_env() == {}


def test_environment_mode(monkeypatch):
    assert environment_mode() == RenderMode.NON_PRODUCTION
    monkeypatch.setenv("SRCSET_ENV", "production")
    assert environment_mode() == RenderMode.PRODUCTION


def test_load_site_config(site_config):
    assert load_site_config(site_config) == {"source": "site.imgix.net", "include_library_param": False}


def test_load_site_config_without_section(tmp_path):
    path = tmp_path / "site.json"
    path.write_text(json.dumps({"title": "Blog"}))
    assert load_site_config(path) == {}


def test_load_site_config_invalid_section(tmp_path):
    path = tmp_path / "site.json"
    path.write_text(json.dumps({"imgix": "my.imgix.net"}))
    with pytest.raises(ValueError):
        load_site_config(path)


def test_load_site_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_site_config(tmp_path / "missing.json")


def test_load_render_config_site_file_wins(monkeypatch, site_config):
    monkeypatch.setenv("IMGIX_SOURCE", "env.imgix.net")
    monkeypatch.setenv("IMGIX_SECURE_URL_TOKEN", "tok")

    config = load_render_config(site_config_path=site_config)

    assert config.cdn_host == "site.imgix.net"
    assert config.secure_token == "tok"
    assert config.include_library_param is False
    assert config.mode == RenderMode.NON_PRODUCTION


def test_load_render_config_explicit_mode_wins(monkeypatch):
    monkeypatch.setenv("SRCSET_ENV", "development")
    config = load_render_config(mode=RenderMode.PRODUCTION)
    assert config.is_production


def test_load_render_config_leaves_host_unset():
    config = load_render_config()
    assert config.cdn_host is None
    assert config.include_library_param is True
