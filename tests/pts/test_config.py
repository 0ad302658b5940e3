import pytest

from pts.config import CheckerConfig


def test_defaults_from_empty_environment() -> None:
    assert CheckerConfig.from_env({}) == CheckerConfig(None, False)


def test_values_from_environment() -> None:
    config = CheckerConfig.from_env(
        {"PTS_NORMALIZE_TIMEOUT": "0.5", "PTS_PRETTY": "Yes"}
    )
    assert config == CheckerConfig(normalize_timeout=0.5, pretty=True)


@pytest.mark.parametrize("raw", ["soon", "-1"])
def test_malformed_timeout(raw) -> None:
    with pytest.raises(ValueError):
        CheckerConfig.from_env({"PTS_NORMALIZE_TIMEOUT": raw})


def test_override_keeps_unset_values() -> None:
    config = CheckerConfig(normalize_timeout=2.0, pretty=True)
    assert config.override() == config
    assert config.override(pretty=False) == CheckerConfig(2.0, False)
    assert config.override(normalize_timeout=0.1).normalize_timeout == 0.1
