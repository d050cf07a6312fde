"""
Pydantic response schemas for the API.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    rows: int
    countries: int
    competitors: int
    segments: int


class FilterStateModel(BaseModel):
    country: Optional[str] = None
    competitor: Optional[str] = None
    segment: Optional[str] = None
    kit_size: Optional[str] = None


class OptionsResponse(BaseModel):
    country: list[str]
    competitor: list[str]
    segment: list[str]
    kit_size: list[str]


class FilterSelectionResponse(BaseModel):
    filters: FilterStateModel
    options: OptionsResponse
    record_count: int
