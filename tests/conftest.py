"""Shared fixtures for unit and integration tests."""

import pytest

PAYOS_ENV_VARS = (
    "PAYOS_CLIENT_ID",
    "PAYOS_API_KEY",
    "PAYOS_CHECKSUM_KEY",
    "PAYOS_PAYOUT_CLIENT_ID",
    "PAYOS_PAYOUT_API_KEY",
    "PAYOS_PAYOUT_CHECKSUM_KEY",
    "PAYOS_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_payos_env(monkeypatch):
    """Keep the developer's shell PAYOS_* variables out of the tests."""
    for name in PAYOS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def payos_properties() -> dict:
    """A complete, valid Spring-style property mapping."""
    return {
        "payos.client-id": "pay-client-0001",
        "payos.api-key": "pay-api-key",
        "payos.checksum-key": "pay-checksum-key",
        "payos.payout-client-id": "payout-client-0002",
        "payos.payout-api-key": "payout-api-key",
        "payos.payout-checksum-key": "payout-checksum-key",
        "payos.log-level": "info",
    }


@pytest.fixture
def payos_env(monkeypatch, payos_properties) -> dict:
    """Export the valid property mapping as PAYOS_* environment variables."""
    env = {
        "PAYOS_" + key[len("payos."):].replace("-", "_").upper(): value
        for key, value in payos_properties.items()
    }
    for name, value in env.items():
        monkeypatch.setenv(name, value)
    return env
