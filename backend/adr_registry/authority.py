from __future__ import annotations
from typing import Iterable, Optional, Set


class AuthoritySet:
    """Mocked allow-list of verified authorities, maintained outside the registry."""

    def __init__(self, principals: Optional[Iterable[str]] = None):
        self._principals: Set[str] = set(principals or [])

    def add(self, principal: str) -> None:
        self._principals.add(principal)

    def remove(self, principal: str) -> None:
        self._principals.discard(principal)

    def __contains__(self, principal: object) -> bool:
        return principal in self._principals

    def __len__(self) -> int:
        return len(self._principals)
