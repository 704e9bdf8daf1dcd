# /// script
# requires-python = ">=3.12"
# dependencies = ["pytest>=7.0", "pydantic>=2.0"]
# ///
"""Tests for environment-variable configuration."""

import logging
import sys
from pathlib import Path

# Ensure project root is on the path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pytest

import config
from pitching import HARD_PITCH_LIMIT


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        config.SEED_ENV,
        config.LOG_LEVEL_ENV,
        config.COEFFICIENTS_ENV,
        config.HARD_PITCH_LIMIT_ENV,
        config.SEASON_PATH_ENV,
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    assert config.get_seed() is None
    assert config.get_log_level() == logging.WARNING
    c = config.get_model_coefficients()
    assert (c.batter, c.pitcher, c.league) == (1.0, 1.0, -1.0)
    assert config.get_hard_pitch_limit() == HARD_PITCH_LIMIT
    assert config.get_season_path() == config.DEFAULT_SEASON_PATH
    assert config.DEFAULT_SEASON_PATH.exists()


def test_seed(monkeypatch):
    monkeypatch.setenv("SIM_SEED", " 42 ")
    assert config.get_seed() == 42


def test_bad_seed_names_the_variable(monkeypatch):
    monkeypatch.setenv("SIM_SEED", "forty-two")
    with pytest.raises(ValueError, match="SIM_SEED"):
        config.get_seed()


@pytest.mark.parametrize("raw,expected", [("debug", logging.DEBUG), ("INFO", logging.INFO)])
def test_log_level(monkeypatch, raw, expected):
    monkeypatch.setenv("SIM_LOG_LEVEL", raw)
    assert config.get_log_level() == expected


def test_bad_log_level(monkeypatch):
    monkeypatch.setenv("SIM_LOG_LEVEL", "chatty")
    with pytest.raises(ValueError, match="SIM_LOG_LEVEL"):
        config.get_log_level()


def test_model_coefficients(monkeypatch):
    monkeypatch.setenv("SIM_MODEL_COEFFICIENTS", "0.9, 1.1, -0.8")
    c = config.get_model_coefficients()
    assert (c.batter, c.pitcher, c.league) == (0.9, 1.1, -0.8)


@pytest.mark.parametrize("raw", ["1,2", "a,b,c", "1,2,3,4"])
def test_bad_model_coefficients(monkeypatch, raw):
    monkeypatch.setenv("SIM_MODEL_COEFFICIENTS", raw)
    with pytest.raises(ValueError, match="SIM_MODEL_COEFFICIENTS"):
        config.get_model_coefficients()


def test_hard_pitch_limit(monkeypatch):
    monkeypatch.setenv("SIM_HARD_PITCH_LIMIT", "95")
    assert config.get_hard_pitch_limit() == 95
    monkeypatch.setenv("SIM_HARD_PITCH_LIMIT", "0")
    with pytest.raises(ValueError, match="positive"):
        config.get_hard_pitch_limit()


def test_season_path(monkeypatch, tmp_path):
    monkeypatch.setenv("SIM_SEASON_PATH", str(tmp_path / "s.json"))
    assert config.get_season_path() == tmp_path / "s.json"
