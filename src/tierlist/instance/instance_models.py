"""Instance level singletons."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Config:
    admin_address: str


@dataclass(frozen=True, slots=True)
class ContractInfo:
    contract: str
    version: str
