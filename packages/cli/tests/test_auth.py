"""Tests for API key resolution."""

from revyu_cli.auth import resolve_api_key


class TestResolveApiKey:
    def test_returns_env_var_when_set(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("OPENAI_API_KEY", "env-key")
        assert resolve_api_key("openai") == "env-key"

    def test_env_var_wins_over_dotenv(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env").write_text("OPENAI_API_KEY=file-key\n")
        monkeypatch.setenv("OPENAI_API_KEY", "env-key")
        assert resolve_api_key("openai") == "env-key"

    def test_falls_back_to_dotenv(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
        (tmp_path / ".env").write_text("ANTHROPIC_API_KEY=file-key\n")
        assert resolve_api_key("anthropic") == "file-key"

    def test_dotenv_does_not_modify_environment(self, monkeypatch, tmp_path):
        import os

        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        (tmp_path / ".env").write_text("OPENAI_API_KEY=file-key\n")
        resolve_api_key("openai")
        assert "OPENAI_API_KEY" not in os.environ

    def test_returns_none_when_nothing_found(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        assert resolve_api_key("openai") is None

    def test_returns_none_when_dotenv_lacks_key(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        (tmp_path / ".env").write_text("OTHER=value\n")
        assert resolve_api_key("openai") is None

    def test_unknown_provider(self):
        assert resolve_api_key("mystery") is None
