import pytest
from pydantic import ValidationError
from sassy_gradients.config import RenderConfig, DEFAULT_CONFIG, LEGACY_PREFIX_ENV, PRECISION_ENV


@pytest.fixture
def clean_env(monkeypatch):
    monkeypatch.delenv(LEGACY_PREFIX_ENV, raising=False)
    monkeypatch.delenv(PRECISION_ENV, raising=False)
    return monkeypatch


def test_defaults():
    assert DEFAULT_CONFIG.legacy_prefix is False
    assert DEFAULT_CONFIG.precision == 10
    assert DEFAULT_CONFIG.legacy_prefix_name == "-webkit-"


def test_from_env(clean_env):
    clean_env.setenv(LEGACY_PREFIX_ENV, "true")
    clean_env.setenv(PRECISION_ENV, "4")
    config = RenderConfig.from_env()
    assert config.legacy_prefix is True
    assert config.precision == 4


def test_from_env_without_variables(clean_env):
    assert RenderConfig.from_env() == DEFAULT_CONFIG


def test_from_env_boolean_spellings(clean_env):
    clean_env.setenv(LEGACY_PREFIX_ENV, "off")
    assert RenderConfig.from_env().legacy_prefix is False
    clean_env.setenv(LEGACY_PREFIX_ENV, "1")
    assert RenderConfig.from_env().legacy_prefix is True


def test_explicit_arguments_win(clean_env):
    clean_env.setenv(LEGACY_PREFIX_ENV, "true")
    assert RenderConfig(legacy_prefix=False).legacy_prefix is False
    assert DEFAULT_CONFIG.legacy_prefix is False


def test_invalid_values(clean_env):
    clean_env.setenv(LEGACY_PREFIX_ENV, "maybe")
    with pytest.raises(ValidationError):
        RenderConfig.from_env()
    with pytest.raises(ValidationError):
        RenderConfig(legacy_prefix=False, precision=-1)


def test_precision_zero_allowed():
    assert RenderConfig(legacy_prefix=False, precision=0).precision == 0


def test_frozen():
    with pytest.raises(ValidationError):
        DEFAULT_CONFIG.legacy_prefix = True
