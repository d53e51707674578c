import pytest

from docpath.config import DocpathConfig
from docpath.options import SetOptions


def test_defaults(monkeypatch) -> None:
    for name in (
        "DOCPATH_LOG_LEVEL",
        "DOCPATH_RICH_LOGGING",
        "DOCPATH_CREATE_PATH",
        "DOCPATH_OVERWRITE",
    ):
        monkeypatch.delenv(name, raising=False)

    config = DocpathConfig()

    assert config.log_level == "WARNING"
    assert config.rich_logging is True
    assert config.create_path is True
    assert config.overwrite is True


def test_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("DOCPATH_LOG_LEVEL", " debug ")
    monkeypatch.setenv("DOCPATH_RICH_LOGGING", "off")
    monkeypatch.setenv("DOCPATH_CREATE_PATH", "0")
    monkeypatch.setenv("DOCPATH_OVERWRITE", "No")

    config = DocpathConfig()

    assert config.log_level == "DEBUG"
    assert config.rich_logging is False
    assert config.create_path is False
    assert config.overwrite is False


def test_blank_flag_uses_default(monkeypatch) -> None:
    monkeypatch.setenv("DOCPATH_CREATE_PATH", "  ")

    assert DocpathConfig().create_path is True


def test_invalid_flag_is_rejected(monkeypatch) -> None:
    monkeypatch.setenv("DOCPATH_OVERWRITE", "maybe")

    with pytest.raises(ValueError, match="DOCPATH_OVERWRITE"):
        DocpathConfig()


def test_set_options_reflect_config(monkeypatch) -> None:
    monkeypatch.setenv("DOCPATH_CREATE_PATH", "false")
    monkeypatch.setenv("DOCPATH_OVERWRITE", "true")

    options = DocpathConfig().set_options()

    assert isinstance(options, SetOptions)
    assert options.create_path is False
    assert options.overwrite is True


def test_set_options_defaults() -> None:
    options = SetOptions()

    assert options.create_path is True
    assert options.overwrite is True
