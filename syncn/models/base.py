"""Shared Pydantic base models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SyncnBase(BaseModel):
    """Base model with shared config for all SyncN schemas."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class ErrorDetail(SyncnBase):
    """Body of a 400 response: the rejected month or payload, in words."""

    detail: str
