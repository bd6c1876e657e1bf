from pathlib import Path

import pytest

from heblemma.config import load_config

REPO_ROOT = Path(__file__).resolve().parents[1]


def test_load_dev_profile() -> None:
    config = load_config("dev", config_dir=REPO_ROOT / "configs")

    assert config.env == "dev"
    assert config.log_level == "DEBUG"
    assert config.api_host == "127.0.0.1"
    assert config.api_port == 5001
    assert config.dictionary_path is None
    assert config.use_gpu is False


def test_env_override(monkeypatch) -> None:
    monkeypatch.setenv("HEBLEMMA_ENV", "prod")
    monkeypatch.setenv("HEBLEMMA_API_PORT", "9000")
    monkeypatch.setenv("HEBLEMMA_DICTIONARY_PATH", "/srv/stanza")
    monkeypatch.setenv("HEBLEMMA_USE_GPU", "yes")

    config = load_config(config_dir=REPO_ROOT / "configs")

    assert config.env == "prod"
    assert config.api_host == "0.0.0.0"
    assert config.api_port == 9000
    assert config.dictionary_path == "/srv/stanza"
    assert config.use_gpu is True


def test_missing_profile_uses_defaults(tmp_path: Path) -> None:
    config = load_config("staging", config_dir=tmp_path)

    assert config.log_level == "INFO"
    assert config.api_port == 5001


def test_profile_dictionary_path(tmp_path: Path) -> None:
    (tmp_path / "dev.toml").write_text(
        'dictionary_path = "/opt/he"\nlog_level = "warning"\n', encoding="utf-8"
    )

    config = load_config("dev", config_dir=tmp_path)

    assert config.dictionary_path == "/opt/he"
    assert config.log_level == "WARNING"


def test_invalid_port(monkeypatch) -> None:
    monkeypatch.setenv("HEBLEMMA_API_PORT", "http")

    with pytest.raises(ValueError, match="HEBLEMMA_API_PORT must be an integer"):
        load_config(config_dir=REPO_ROOT / "configs")


def test_invalid_boolean(monkeypatch) -> None:
    monkeypatch.setenv("HEBLEMMA_USE_GPU", "maybe")

    with pytest.raises(ValueError, match="HEBLEMMA_USE_GPU must be a boolean"):
        load_config(config_dir=REPO_ROOT / "configs")
