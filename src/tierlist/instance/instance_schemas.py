"""Pydantic schemas for instance info endpoints."""

from __future__ import annotations

from pydantic import BaseModel


class ConfigResponse(BaseModel):
    admin_address: str


class ContractInfoResponse(BaseModel):
    contract: str
    version: str
