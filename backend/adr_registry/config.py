from __future__ import annotations
from dotenv import load_dotenv
from typing import List, Optional
from pydantic import BaseModel, Field
import os

from .codes import (
    DEFAULT_CALLER,
    DEFAULT_MAX_REPORTS,
    DEFAULT_SUBMISSION_FEE,
    NULL_PRINCIPAL,
)


def load_env():
    load_dotenv()


def _env(key: str) -> Optional[str]:
    v = os.getenv(key)
    return v if v else None


class RegistrySettings(BaseModel):
    max_reports: int = Field(DEFAULT_MAX_REPORTS, ge=0)
    submission_fee: int = Field(DEFAULT_SUBMISSION_FEE, ge=0)
    null_principal: str = NULL_PRINCIPAL
    default_caller: str = Field(DEFAULT_CALLER, min_length=1)
    authorities: Optional[List[str]] = None

    def initial_authorities(self) -> List[str]:
        if self.authorities is None:
            return [self.default_caller]
        return list(self.authorities)

    @classmethod
    def from_env(cls) -> "RegistrySettings":
        load_env()
        values = {}
        for field, key in (
            ("max_reports", "REGISTRY_MAX_REPORTS"),
            ("submission_fee", "REGISTRY_SUBMISSION_FEE"),
            ("null_principal", "REGISTRY_NULL_PRINCIPAL"),
            ("default_caller", "REGISTRY_DEFAULT_CALLER"),
        ):
            v = _env(key)
            if v is not None:
                values[field] = v.strip()
        auth = _env("REGISTRY_AUTHORITIES")
        if auth is not None:
            values["authorities"] = [a.strip() for a in auth.split(",") if a.strip()]
        return cls(**values)
