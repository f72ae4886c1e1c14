import pytest
from pydantic import ValidationError

from config import GameConfig, load_config

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("LOWER_BOUND", "UPPER_BOUND", "THINK_DELAY"):
        monkeypatch.delenv(f"GUESSING_GAME_{name}", raising=False)

def test_defaults():
    cfg = load_config()
    assert (cfg.lower_bound, cfg.upper_bound, cfg.think_delay) == (0, 100, 1.5)

def test_env_values(monkeypatch):
    monkeypatch.setenv("GUESSING_GAME_UPPER_BOUND", "50")
    monkeypatch.setenv("GUESSING_GAME_THINK_DELAY", "0")
    cfg = load_config()
    assert cfg.upper_bound == 50
    assert cfg.think_delay == 0

def test_overrides_win_over_env(monkeypatch):
    monkeypatch.setenv("GUESSING_GAME_LOWER_BOUND", "5")
    cfg = load_config(lower_bound=1, upper_bound=None)
    assert cfg.lower_bound == 1
    assert cfg.upper_bound == 100

def test_inverted_range_rejected():
    with pytest.raises(ValidationError):
        GameConfig(lower_bound=10, upper_bound=9)

def test_negative_delay_rejected():
    with pytest.raises(ValidationError):
        load_config(think_delay=-1)

def test_garbage_env_rejected(monkeypatch):
    monkeypatch.setenv("GUESSING_GAME_UPPER_BOUND", "lots")
    with pytest.raises(ValidationError):
        load_config()

@pytest.mark.parametrize("value", ["inf", "nan"])
def test_non_finite_delay_rejected(monkeypatch, value):
    monkeypatch.setenv("GUESSING_GAME_THINK_DELAY", value)
    with pytest.raises(ValidationError):
        load_config()
