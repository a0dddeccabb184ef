# tests/test_config.py
import datetime
from pathlib import Path

import pytest

from mcp_dev_bridges.config import (
    load_env_file,
    get_chat_config,
    get_browser_config,
    get_images_dir,
    image_timestamp,
    image_filename,
)

_CHAT_VARS = (
    "OPENAI_API_KEY",
    "OPENAI_MODEL",
    "OPENAI_MAX_TOKENS",
    "MCP_SERVER_NAME",
    "MCP_SERVER_VERSION",
    "CHATGPT_IMAGES_DIR",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _CHAT_VARS + ("MCP_BROWSER_SERVER_NAME", "MCP_BROWSER_SERVER_VERSION"):
        # setenv first so teardown also removes values loaded from a .env file
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


def test_chat_config_requires_api_key():
    with pytest.raises(EnvironmentError, match="OPENAI_API_KEY"):
        get_chat_config()


def test_chat_config_defaults(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-abc")

    config = get_chat_config()

    assert config["api_key"] == "sk-abc"
    assert config["model"] == "gpt-4o-mini"
    assert config["max_tokens"] == 2000
    assert config["server_name"] == "ChatGPT Development Assistant"
    assert config["images_dir"] == str(Path.home() / "chatgpt-images")


def test_chat_config_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-abc")
    monkeypatch.setenv("OPENAI_MODEL", "gpt-4o")
    monkeypatch.setenv("OPENAI_MAX_TOKENS", "512")
    monkeypatch.setenv("CHATGPT_IMAGES_DIR", str(tmp_path))

    config = get_chat_config()

    assert config["model"] == "gpt-4o"
    assert config["max_tokens"] == 512
    assert config["images_dir"] == str(tmp_path)


def test_chat_config_rejects_non_numeric_max_tokens(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-abc")
    monkeypatch.setenv("OPENAI_MAX_TOKENS", "lots")

    with pytest.raises(EnvironmentError, match="OPENAI_MAX_TOKENS"):
        get_chat_config()


def test_browser_config_needs_nothing():
    assert get_browser_config() == {"server_name": "js-debug-bridge", "server_version": "1.0.0"}


def test_images_dir_expands_user(monkeypatch):
    monkeypatch.setenv("CHATGPT_IMAGES_DIR", "~/pics")

    assert get_images_dir() == Path.home() / "pics"


def test_load_env_file_does_not_override_existing(monkeypatch, tmp_path):
    (tmp_path / ".env").write_text("OPENAI_API_KEY=from-file\nOPENAI_MODEL=gpt-4o\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("OPENAI_API_KEY", "from-process")

    assert load_env_file() is True
    config = get_chat_config()

    assert config["api_key"] == "from-process"
    assert config["model"] == "gpt-4o"


def test_image_timestamp_is_filename_safe():
    now = datetime.datetime(2025, 3, 4, 5, 6, 7, 891000, tzinfo=datetime.timezone.utc)

    assert image_timestamp(now) == "2025-03-04T05-06-07-891Z"


def test_image_filename_layout():
    assert image_filename("2025-03-04T05-06-07-891Z", "dall-e-3", 2) == "2025-03-04T05-06-07-891Z_dall-e-3_2.png"
