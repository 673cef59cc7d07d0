"""Pydantic schemas for the activity endpoints."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ActivityCreate(BaseModel):
    """Writable activity properties accepted when posting an activity."""

    model_config = ConfigDict(extra="ignore")

    id: int | None = Field(
        default=None,
        description="Read only. Supplying a non-zero id is rejected.",
    )
    component: str | None = Field(
        default=None, description="The component the object relates to."
    )
    type: str | None = Field(
        default=None, description="The activity type of the object."
    )
    content: str | None = Field(
        default=None, description="HTML content of the object."
    )
    prime_association: int | None = Field(
        default=None,
        description="The ID of some other object primarily associated with this one.",
    )
    secondary_association: int | None = Field(
        default=None,
        description="The ID of some other object also associated with this one.",
    )
    visibility: str | None = Field(
        default=None, description="Set activity visibility."
    )


class ActivityCreated(BaseModel):
    id: int = Field(..., description="Identifier assigned to the new activity.")


class ActivityTypeRead(BaseModel):
    type: str = Field(..., description="Tag name.")
    name: str = Field(..., description="Display name.")


ActivityRead = dict[str, Any]


__all__ = [
    "ActivityCreate",
    "ActivityCreated",
    "ActivityRead",
    "ActivityTypeRead",
]
