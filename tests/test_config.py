"""Tests for configuration loading."""

from unittest.mock import patch

import pytest

from bannercheck.config import Config, find_config, load_config


def test_defaults():
    c = Config()
    assert c.api_base_url == "https://api.github.com"
    assert c.timeout_seconds == 30.0
    assert c.max_workers == 8
    assert c.log_file is None


def test_load_config(tmp_path):
    p = tmp_path / "config.yaml"
    p.write_text(
        "api:\n  base_url: https://ghe.example/api/v3\n  timeout_seconds: 5\n"
        "audit:\n  max_workers: 2\n"
        "logging:\n  level: DEBUG\n  file: /tmp/bannercheck.log\n"
    )
    c = load_config(p)
    assert c.api_base_url == "https://ghe.example/api/v3"
    assert c.timeout_seconds == 5.0
    assert c.max_workers == 2
    assert c.log_level == "DEBUG"
    assert c.log_file == "/tmp/bannercheck.log"


def test_load_config_partial(tmp_path):
    """Missing sections fall back to defaults."""
    p = tmp_path / "config.yaml"
    p.write_text("audit:\n  max_workers: 1\n")
    c = load_config(p)
    assert c.max_workers == 1
    assert c.api_base_url == Config.api_base_url


def test_load_config_empty_file(tmp_path):
    p = tmp_path / "config.yaml"
    p.write_text("")
    assert load_config(p) == Config()


def test_load_config_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_find_config_without_user_file(tmp_path):
    with patch("bannercheck.config.DEFAULT_CONFIG_PATH", tmp_path / "absent.yaml"):
        assert find_config() == Config()


def test_find_config_user_file(tmp_path):
    p = tmp_path / "config.yaml"
    p.write_text("api:\n  timeout_seconds: 3\n")
    with patch("bannercheck.config.DEFAULT_CONFIG_PATH", p):
        assert find_config().timeout_seconds == 3.0


@pytest.mark.parametrize(
    "text",
    [
        "api: nope\n",
        "audit:\n  - 1\n",
        "api:\n  timeout_seconds: abc\n",
        "audit:\n  max_workers: many\n",
        "api: [unclosed\n",
        "- just\n- a list\n",
    ],
)
def test_load_config_rejects_bad_shapes(tmp_path, text):
    """Wrong section types, bad values and broken YAML raise ValueError naming the file."""
    p = tmp_path / "config.yaml"
    p.write_text(text)
    with pytest.raises(ValueError) as exc:
        load_config(p)
    assert str(p) in str(exc.value)
