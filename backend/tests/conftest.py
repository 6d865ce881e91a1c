from __future__ import annotations
import pytest

from adr_registry.config import RegistrySettings
from adr_registry.registry import ReportRegistry


@pytest.fixture
def registry() -> ReportRegistry:
    return ReportRegistry(RegistrySettings())


@pytest.fixture
def bound(registry: ReportRegistry) -> ReportRegistry:
    registry.set_authority_contract("ST2TEST")
    return registry


@pytest.fixture
def submit():
    """Submit the standard "Headache" report, with any field overridden."""

    def _submit(reg: ReportRegistry, **overrides):
        args = dict(
            drug_id=1,
            anonymous_id=b"a" * 32,
            description="Headache",
            severity=3,
            location="New York",
            evidence_hash=b"b" * 32,
            metadata="Age: 30",
        )
        args.update(overrides)
        return reg.submit_report(**args)

    return _submit
