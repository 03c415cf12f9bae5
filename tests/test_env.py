from __future__ import annotations

import pytest

from wpdev.env import load_env, missing_keys, require_keys
from wpdev.errors import MissingConfigError


def test_load_env_reads_file(tmp_path):
    path = tmp_path / ".env"
    path.write_text('WP_SITE_TITLE="My Site"\nWP_ADMIN_USER=admin\n# comment\n')
    env = load_env(path, environ={})
    assert env["WP_SITE_TITLE"] == "My Site"
    assert env["WP_ADMIN_USER"] == "admin"


def test_process_environment_wins(tmp_path):
    path = tmp_path / ".env"
    path.write_text("WP_ADMIN_USER=admin\n")
    env = load_env(path, environ={"WP_ADMIN_USER": "root", "OTHER": "1"})
    assert env["WP_ADMIN_USER"] == "root"
    assert env["OTHER"] == "1"


def test_missing_file_is_not_fatal(tmp_path):
    env = load_env(tmp_path / ".env", environ={"WP_ADMIN_USER": "admin"})
    assert dict(env) == {"WP_ADMIN_USER": "admin"}


def test_loaded_config_is_read_only(tmp_path):
    env = load_env(tmp_path / ".env", environ={"A": "1"})
    with pytest.raises(TypeError):
        env["A"] = "2"


def test_blank_values_count_as_missing():
    env = {"A": "x", "B": "", "C": "   "}
    assert missing_keys(env, ["A", "B", "C", "D"]) == ["B", "C", "D"]


def test_require_keys_lists_exactly_the_missing_ones():
    with pytest.raises(MissingConfigError) as exc:
        require_keys({"WP_ADMIN_USER": "admin"}, ["WP_SITE_TITLE", "WP_ADMIN_USER", "WP_ADMIN_PASSWORD"])
    assert exc.value.keys == ["WP_SITE_TITLE", "WP_ADMIN_PASSWORD"]
    assert str(exc.value).endswith("WP_SITE_TITLE, WP_ADMIN_PASSWORD")


def test_require_keys_names_the_source_file():
    with pytest.raises(MissingConfigError, match="in local.env: WP_SITE_TITLE"):
        require_keys({}, ["WP_SITE_TITLE"], "local.env")
