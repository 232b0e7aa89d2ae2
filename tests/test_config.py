"""Tests for config.py: env loading, saving, and typed parsing."""

import os

import pytest

from zentao_mcp import config


class TestLoadEnv:
    @pytest.fixture(autouse=True)
    def _clean_environ(self, monkeypatch):
        """Remove ZENTAO_* keys from os.environ so file-parsing tests are isolated."""
        for key in list(os.environ):
            if key.startswith("ZENTAO_"):
                monkeypatch.delenv(key)

    def test_basic_key_value(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("ZENTAO_BASE_URL=http://pm\nOTHER=x\n")
        monkeypatch.setattr(config, "ENV_PATH", str(env_file))
        assert config.load_env() == {"ZENTAO_BASE_URL": "http://pm", "OTHER": "x"}

    def test_skips_comments_and_blank_lines(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("# comment\n\n  KEY  =  value  \nnot a pair\n")
        monkeypatch.setattr(config, "ENV_PATH", str(env_file))
        assert config.load_env() == {"KEY": "value"}

    def test_value_may_contain_equals(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("ZENTAO_APP_KEY=a=b\n")
        monkeypatch.setattr(config, "ENV_PATH", str(env_file))
        assert config.load_env()["ZENTAO_APP_KEY"] == "a=b"

    def test_process_environment_wins(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("ZENTAO_APP_CODE=from-file\n")
        monkeypatch.setattr(config, "ENV_PATH", str(env_file))
        monkeypatch.setenv("ZENTAO_APP_CODE", "from-env")
        monkeypatch.setenv("UNRELATED", "ignored")
        env = config.load_env()
        assert env["ZENTAO_APP_CODE"] == "from-env"
        assert "UNRELATED" not in env

    def test_missing_file(self):
        assert config.load_env() == {}


class TestSaveEnvValue:
    def test_creates_file(self):
        config.save_env_value("ZENTAO_APP_CODE", "abc")
        with open(config.ENV_PATH) as f:
            assert f.read() == "ZENTAO_APP_CODE=abc\n"

    def test_updates_existing_key_in_place(self):
        with open(config.ENV_PATH, "w") as f:
            f.write("# zentao\nZENTAO_APP_CODE=old\nZENTAO_APP_KEY=k\n")
        config.save_env_value("ZENTAO_APP_CODE", "new")
        with open(config.ENV_PATH) as f:
            assert f.read() == "# zentao\nZENTAO_APP_CODE=new\nZENTAO_APP_KEY=k\n"

    @pytest.mark.skipif(os.name == "nt", reason="POSIX permissions")
    def test_owner_only_permissions(self):
        config.save_env_value("ZENTAO_APP_KEY", "secret")
        assert os.stat(config.ENV_PATH).st_mode & 0o777 == 0o600


class TestTypedParsing:
    def test_env_bool(self, monkeypatch):
        monkeypatch.setattr(config, "env", {"A": "yes", "B": "off"})
        assert config._env_bool("A") is True
        assert config._env_bool("B") is False
        assert config._env_bool("C", default=True) is True

    def test_env_int_fallback(self, monkeypatch):
        monkeypatch.setattr(config, "env", {"A": "12", "B": "twelve"})
        assert config._env_int("A", 1) == 12
        assert config._env_int("B", 1) == 1

    def test_env_float(self, monkeypatch):
        monkeypatch.setattr(config, "env", {"A": "0.5"})
        assert config._env_float("A", 1.0) == 0.5

    def test_env_choice_case_insensitive(self, monkeypatch):
        monkeypatch.setattr(config, "env", {"M": "Session", "N": "oauth"})
        assert config._env_choice("M", config.AUTH_METHODS, "app") == "session"
        assert config._env_choice("N", config.AUTH_METHODS, "app") == "app"


class TestConstants:
    def test_defaults(self):
        assert config.DEFAULT_BASE_URL == "http://localhost:8080"
        assert config.AUTH_METHODS == ("none", "app", "session")
        assert config.TOKEN_CACHE_SECONDS < 30
