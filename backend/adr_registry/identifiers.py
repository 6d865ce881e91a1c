from __future__ import annotations
from typing import Union
from pydantic import BaseModel, ConfigDict


class OpaqueId(BaseModel):
    """Opaque byte identifier (anonymous ids, evidence hashes).

    Compares by value and is hashable, so it can key dicts directly; the
    registry indexes by its hex form.
    """

    model_config = ConfigDict(frozen=True)

    raw: bytes

    @classmethod
    def of(cls, value: Union["OpaqueId", bytes, bytearray]) -> "OpaqueId":
        if isinstance(value, OpaqueId):
            return value
        return cls(raw=bytes(value))

    @classmethod
    def from_hex(cls, text: str) -> "OpaqueId":
        return cls(raw=bytes.fromhex(text))

    def hex(self) -> str:
        return self.raw.hex()

    def is_empty(self) -> bool:
        return len(self.raw) == 0

    def __len__(self) -> int:
        return len(self.raw)

    def __bytes__(self) -> bytes:
        return self.raw
