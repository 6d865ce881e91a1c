from __future__ import annotations
import pytest
from pydantic import ValidationError

from adr_registry.config import RegistrySettings
from adr_registry.registry import ReportRegistry


@pytest.fixture
def clean_env(monkeypatch):
    for key in (
        "REGISTRY_MAX_REPORTS",
        "REGISTRY_SUBMISSION_FEE",
        "REGISTRY_NULL_PRINCIPAL",
        "REGISTRY_DEFAULT_CALLER",
        "REGISTRY_AUTHORITIES",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr("adr_registry.config.load_env", lambda: None)
    return monkeypatch


def test_defaults(clean_env):
    s = RegistrySettings.from_env()
    assert s.max_reports == 1_000_000
    assert s.submission_fee == 500
    assert s.default_caller == "ST1TEST"
    assert s.initial_authorities() == ["ST1TEST"]


def test_env_overrides(clean_env):
    clean_env.setenv("REGISTRY_SUBMISSION_FEE", "750")
    clean_env.setenv("REGISTRY_DEFAULT_CALLER", "ST5USER")
    clean_env.setenv("REGISTRY_AUTHORITIES", "ST5USER, ST6USER,")
    reg = ReportRegistry()
    assert reg.state.submission_fee == 750
    assert reg.caller == "ST5USER"
    assert reg.is_verified_authority("ST6USER").value is True


def test_bad_value_raises(clean_env):
    clean_env.setenv("REGISTRY_MAX_REPORTS", "lots")
    with pytest.raises(ValidationError):
        RegistrySettings.from_env()


def test_custom_null_principal():
    reg = ReportRegistry(RegistrySettings(null_principal="BURN"))
    assert reg.set_authority_contract("BURN").ok is False
    assert reg.set_authority_contract("SP000000000000000000002Q6VF78").ok is True
