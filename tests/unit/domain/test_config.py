"""Tests for StampConfig."""

import pytest

from vcstamp.domain.config import StampConfig


def test_defaults() -> None:
    config = StampConfig.default()
    assert config.git_executable == "git"
    assert config.no_repository_exit_code == 128
    assert config.quote == "'"


def test_config_is_frozen() -> None:
    config = StampConfig.default()
    with pytest.raises(AttributeError):
        config.quote = '"'  # type: ignore[misc]


@pytest.mark.parametrize(
    ("kwargs", "message"),
    [
        ({"git_executable": ""}, "git_executable"),
        ({"no_repository_exit_code": 0}, "no_repository_exit_code"),
        ({"quote": "''"}, "quote"),
    ],
)
def test_invalid_values_rejected(kwargs: dict, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        StampConfig(**kwargs)
