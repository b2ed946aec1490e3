"""Tests for the configuration service."""
from pathlib import Path

import pytest

from iparams_core import ParamStore
from iparams_core.services.config_service import (
    DEFAULT_FILE_NAME,
    StoreSettings,
    clear_config_cache,
    get_iparams_home,
    get_store_settings,
    load_config,
    resolve_store_path,
)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    monkeypatch.delenv("IPARAMS_CONFIG_PATH", raising=False)
    monkeypatch.delenv("IPARAMS_HOME", raising=False)
    monkeypatch.chdir(tmp_path)
    clear_config_cache()
    yield
    clear_config_cache()


def write_config(path: Path, body: str) -> Path:
    path.write_text(body, encoding="utf-8")
    return path


class TestLoadConfig:
    def test_missing_default_config_is_empty(self):
        assert load_config() == {}

    def test_missing_explicit_path_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_reads_default_location(self, tmp_path):
        write_config(tmp_path / "iparams.yaml", "store:\n  file_name: game.enfity\n")
        assert load_config()["store"]["file_name"] == "game.enfity"

    def test_env_override(self, tmp_path, monkeypatch):
        cfg = write_config(tmp_path / "custom.yaml", "store:\n  encoding: latin-1\n")
        monkeypatch.setenv("IPARAMS_CONFIG_PATH", str(cfg))
        assert load_config() == {"store": {"encoding": "latin-1"}}

    def test_cached_until_cleared(self, tmp_path):
        cfg = write_config(tmp_path / "c.yaml", "store:\n  file_name: a\n")
        assert load_config(cfg)["store"]["file_name"] == "a"
        write_config(cfg, "store:\n  file_name: b\n")
        assert load_config(cfg)["store"]["file_name"] == "a"
        clear_config_cache()
        assert load_config(cfg)["store"]["file_name"] == "b"

    def test_empty_file(self, tmp_path):
        cfg = write_config(tmp_path / "empty.yaml", "")
        assert load_config(cfg) == {}


class TestStoreSettings:
    def test_defaults(self, tmp_path):
        settings = get_store_settings({})
        assert settings.file_name == DEFAULT_FILE_NAME
        assert settings.encoding == "utf-8"
        assert Path(settings.storage_dir) == tmp_path

    def test_home_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("IPARAMS_HOME", str(tmp_path / "home"))
        assert get_iparams_home() == tmp_path / "home"
        assert get_store_settings({}).storage_dir == tmp_path / "home"

    def test_from_config(self, tmp_path):
        settings = get_store_settings({
            "store": {"file_name": "s.enfity", "storage_dir": str(tmp_path / "data"), "unknown": 1},
        })
        assert settings.file_name == "s.enfity"
        assert settings.storage_dir == tmp_path / "data"

    def test_non_dict_section_ignored(self):
        assert get_store_settings({"store": "oops"}).file_name == DEFAULT_FILE_NAME


class TestResolveStorePath:
    def test_relative(self, tmp_path):
        settings = StoreSettings(storage_dir=tmp_path / "dir")
        assert resolve_store_path("a.enfity", settings) == tmp_path / "dir" / "a.enfity"

    def test_absolute(self, tmp_path):
        settings = StoreSettings(storage_dir=tmp_path / "dir")
        target = tmp_path / "abs.enfity"
        assert resolve_store_path(target, settings) == target


class TestParamStoreFromConfig:
    def test_store_uses_config_file(self, tmp_path):
        write_config(
            tmp_path / "iparams.yaml",
            f"store:\n  file_name: cfg.enfity\n  storage_dir: {tmp_path / 'data'}\n",
        )
        store = ParamStore()
        store.set_int("a", 1)
        assert store.path == tmp_path / "data" / "cfg.enfity"
        assert store.path.exists()

    def test_encoding_is_used(self, tmp_path):
        settings = StoreSettings(storage_dir=tmp_path, encoding="latin-1")
        store = ParamStore("enc.enfity", settings=settings)
        store.set_string("city", "Zürich")
        assert "Zürich".encode("latin-1") in store.path.read_bytes()
        assert store.get_string("city") == "Zürich"
