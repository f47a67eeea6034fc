import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from mind_palace.config import Settings


def test_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ["CHAT_MODEL", "PALACE_PATH", "TEMPERATURE", "USER_NAME", "PROVIDER"]:
        monkeypatch.delenv(name, raising=False)
    settings = Settings()
    assert settings.provider == "openai"
    assert settings.chat_model == "gpt-4o"
    assert settings.temperature == 0.9
    assert settings.palace_path == "mind_palace.json"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CHAT_MODEL", "gpt-4o-mini")
    monkeypatch.setenv("PALACE_PATH", "/tmp/palace.json")
    monkeypatch.setenv("HISTORY_TURNS", "4")
    settings = Settings()
    assert settings.chat_model == "gpt-4o-mini"
    assert settings.palace_path == "/tmp/palace.json"
    assert settings.history_turns == 4


def test_env_file_is_read(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("USER_NAME", raising=False)
    (tmp_path / ".env").write_text("USER_NAME=Ada\n", encoding="utf-8")
    assert Settings().user_name == "Ada"


@pytest.mark.parametrize("field", [{"temperature": 3.0}, {"history_turns": 0}])
def test_invalid_values_rejected(field):
    with pytest.raises(ValidationError):
        Settings(**field)


def test_public_dump_hides_keys():
    dumped = Settings(openai_api_key="sk-secret", azure_openai_api_key="az-secret").public_dump()
    assert "sk-secret" not in dumped
    assert "az-secret" not in dumped
    assert "chat_model" in dumped
