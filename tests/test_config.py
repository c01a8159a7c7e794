import pytest

from config import ChatConfig, load_chat_config
from errors import ConfigurationError
from messages import DEFAULT_MAX_TOKENS, DEFAULT_MODEL, Model


def test_missing_api_key_is_fatal(clean_env) -> None:
    with pytest.raises(ConfigurationError, match="ANTHROPIC_API_KEY environment variable is required"):
        load_chat_config()


def test_blank_api_key_is_fatal() -> None:
    with pytest.raises(ConfigurationError):
        load_chat_config({"ANTHROPIC_API_KEY": "   "})


def test_load_config_uses_defaults(clean_env) -> None:
    clean_env.setenv("ANTHROPIC_API_KEY", " sk-test ")

    cfg = load_chat_config()

    assert cfg.api_key == "sk-test"
    assert cfg.model is DEFAULT_MODEL
    assert cfg.max_tokens == DEFAULT_MAX_TOKENS
    assert cfg.timeout is None


def test_load_config_honours_env() -> None:
    cfg = load_chat_config(
        {
            "ANTHROPIC_API_KEY": "sk-test",
            "ANTHROPIC_MODEL": "claude-opus-4-20250514",
            "ANTHROPIC_MAX_TOKENS": "2048",
            "ANTHROPIC_TIMEOUT": "30",
        }
    )

    assert cfg.model is Model.CLAUDE_OPUS_4
    assert cfg.max_tokens == 2048
    assert cfg.timeout == 30.0


def test_load_config_invalid_numbers_fall_back() -> None:
    cfg = load_chat_config(
        {
            "ANTHROPIC_API_KEY": "sk-test",
            "ANTHROPIC_MODEL": " ",
            "ANTHROPIC_MAX_TOKENS": "not-an-int",
            "ANTHROPIC_TIMEOUT": "-5",
        }
    )

    assert cfg.model is DEFAULT_MODEL
    assert cfg.max_tokens == DEFAULT_MAX_TOKENS
    assert cfg.timeout is None


def test_unknown_model_is_rejected() -> None:
    with pytest.raises(ConfigurationError, match="ANTHROPIC_MODEL"):
        load_chat_config({"ANTHROPIC_API_KEY": "sk-test", "ANTHROPIC_MODEL": "gpt-4"})


def test_repr_hides_api_key() -> None:
    cfg = ChatConfig(api_key="sk-secret")

    assert "sk-secret" not in repr(cfg)
