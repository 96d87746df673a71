"""Pydantic schemas for API request/response models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class LocationRequest(BaseModel):
    """Request body carrying a location query."""

    location: str


class StoryResponse(BaseModel):
    """Response schema for a generated story."""

    model_config = ConfigDict(from_attributes=True)

    title: str
    story: str


class SavedLocationResponse(BaseModel):
    """Response schema for a saved location."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    summary: str
    created_at: datetime


class CoordinatesResponse(BaseModel):
    """Response schema for a location query derived from coordinates."""

    location: str
