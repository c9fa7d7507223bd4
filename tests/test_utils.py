# tests/test_utils.py
"""Catalog-file loader (load_config) and topic debug logger, with env/cache isolation."""

from __future__ import annotations

import json
import os
from importlib import import_module

import pytest

LC = import_module("pantone_tcx_matcher.utils.load_config")
LOG = import_module("pantone_tcx_matcher.utils.log")

ConfigFileNotFound = LC.ConfigFileNotFound
ConfigParseError = LC.ConfigParseError
ConfigTypeError = LC.ConfigTypeError
DataDirNotFound = LC.DataDirNotFound
load_config = LC.load_config
clear_config_cache = LC.clear_config_cache


# ---------- Fixtures ----------
@pytest.fixture
def tmp_data_dir(tmp_path, monkeypatch):
    """Provide an isolated data/ dir and point loader via PANTONE_TCX_DATA_DIR."""
    data = tmp_path / "data"
    data.mkdir()
    monkeypatch.setenv("PANTONE_TCX_DATA_DIR", str(data))
    clear_config_cache()
    return data


@pytest.fixture(autouse=True)
def _reset_env_and_cache(monkeypatch):
    """Reset debug topics, data-dir env and config cache between tests."""
    monkeypatch.delenv(LOG.ENV_VAR, raising=False)
    for var in LC.DATA_DIR_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    clear_config_cache()
    LOG.reload_topics()
    yield
    clear_config_cache()
    LOG.reload_topics()


def _write(path, payload) -> None:
    path.write_text(json.dumps(payload), encoding="utf-8")


# ---------- load_config tests ----------
def test_load_config_parses_and_caches(tmp_data_dir):
    _write(tmp_data_dir / "palette.json", {"colors": []})

    out1 = load_config("palette")
    out2 = load_config("palette.json")
    assert out1 == {"colors": []}
    assert out2 is out1  # cached

    clear_config_cache()
    assert load_config("palette") is not out1


def test_load_config_rereads_file_after_it_changes(tmp_data_dir):
    path = tmp_data_dir / "palette.json"
    _write(path, {"colors": []})
    assert load_config("palette") == {"colors": []}

    _write(path, {"colors": [{"name": "Red", "code": "00-0001", "hex": "#FF0000"}]})
    st = path.stat()
    os.utime(path, (st.st_atime, st.st_mtime + 10))
    assert len(load_config("palette")["colors"]) == 1


def test_load_config_requires_json_object(tmp_data_dir):
    _write(tmp_data_dir / "oops.json", ["not", "a", "dict"])
    with pytest.raises(ConfigTypeError):
        load_config("oops")


def test_load_config_missing_file(tmp_data_dir):
    with pytest.raises(ConfigFileNotFound):
        load_config("does_not_exist")


def test_load_config_invalid_json(tmp_data_dir):
    (tmp_data_dir / "broken.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigParseError):
        load_config("broken")


def test_load_config_refuses_escape_from_data_dir(tmp_data_dir):
    _write(tmp_data_dir.parent / "secret.json", {"x": 1})
    with pytest.raises(ConfigFileNotFound):
        load_config("../secret")


# ---------- data-dir resolution ----------
def test_explicit_base_dir_beats_env(tmp_data_dir, tmp_path):
    other = tmp_path / "other"
    other.mkdir()
    _write(tmp_data_dir / "pick.json", {"from": "env"})
    _write(other / "pick.json", {"from": "explicit"})
    assert load_config("pick") == {"from": "env"}
    assert load_config("pick", base_dir=other) == {"from": "explicit"}


def test_env_vars_are_tried_in_order(tmp_path, monkeypatch):
    first, second = tmp_path / "first", tmp_path / "second"
    monkeypatch.setenv("DATA_DIR", str(second))
    assert LC.resolve_data_dir() == second.resolve()
    monkeypatch.setenv("PANTONE_TCX_DATA_DIR", str(first))
    assert LC.resolve_data_dir() == first.resolve()


def test_default_data_dir_finds_packaged_data():
    data = LC.resolve_data_dir()
    assert (data / "pantone_tcx.json").is_file()


def test_default_data_dir_raises_when_missing(tmp_path):
    start = tmp_path / "a" / "b"
    start.mkdir(parents=True)
    if any(p.is_dir() for p in LC._candidate_data_dirs(start)):
        pytest.skip("a 'data' directory exists above tmp_path")
    with pytest.raises(DataDirNotFound):
        LC._default_data_dir(start)


# ---------- log.debug tests ----------
def test_log_debug_respects_topics_env(monkeypatch, capsys):
    monkeypatch.setenv(LOG.ENV_VAR, "matcher")
    LOG.reload_topics()

    LOG.debug("hello on matcher", topic="matcher")
    LOG.debug("should be silent", topic="catalog")

    captured = capsys.readouterr()
    assert "hello on matcher" in captured.err
    assert "should be silent" not in captured.err


def test_log_debug_all_topics(monkeypatch, capsys):
    monkeypatch.setenv(LOG.ENV_VAR, "all")
    LOG.reload_topics()

    LOG.debug("m1", topic="foo")
    LOG.debug("m2", topic="bar", level="warning")

    captured = capsys.readouterr()
    assert "m1" in captured.err and "[bar][WARNING] m2" in captured.err


def test_log_debug_unset_env_enables_package_topics(capsys):
    assert all(LOG.topic_enabled(t) for t in LOG.TOPICS)
    assert not LOG.topic_enabled("anything")

    LOG.debug("visible", topic="Catalog ")
    LOG.debug("hidden", topic="anything")
    err = capsys.readouterr().err
    assert "[catalog][DEBUG] visible" in err
    assert "hidden" not in err
