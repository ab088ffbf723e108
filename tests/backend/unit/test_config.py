"""
Unit tests for hotel_booking.config defaults.
The suite runs with a low bcrypt cost; these pin what production gets.
"""
import importlib

import hotel_booking.config as config_module
from hotel_booking.config import DEFAULT_BCRYPT_ROUNDS, Settings
from hotel_booking.core.security import pwd_context


def test_default_bcrypt_cost_is_12():
    assert DEFAULT_BCRYPT_ROUNDS == 12


def test_settings_use_cost_12_when_env_unset(monkeypatch):
    monkeypatch.delenv("BCRYPT_ROUNDS", raising=False)
    fresh = importlib.reload(config_module)
    try:
        assert fresh.Settings().bcrypt_rounds == 12
        assert fresh.settings.bcrypt_rounds == 12
    finally:
        monkeypatch.undo()
        importlib.reload(config_module)


def test_cost_12_hash_format():
    hashed = pwd_context.using(rounds=DEFAULT_BCRYPT_ROUNDS).hash("pw")
    assert hashed.startswith("$2b$12$")
    assert pwd_context.verify("pw", hashed)


def test_env_overrides_cost_in_suite():
    assert Settings().bcrypt_rounds == 4
