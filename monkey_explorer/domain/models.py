"""
Domain models for the Monkey Explorer.

Defines the record schema of the shipped dataset. Field names in the source
JSON are matched case-insensitively (the shipped file uses "Name", "Location",
...), unknown fields are ignored, and missing fields or null text fields fall back
to empty values. Numbers are strict: a quoted number is a malformed record.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator

_TEXT_FIELDS = ("name", "location", "image", "details")


class Record(BaseModel):
    """
    Representation of a single entry in the dataset.
    """

    name: str = Field("", description="Display name; unique lookup key (case-insensitive).")
    location: str = Field("", description="Where the species lives.")
    population: int = Field(0, strict=True, description="Estimated population.")
    latitude: float = Field(0.0, strict=True, description="Latitude in decimal degrees.")
    longitude: float = Field(0.0, strict=True, description="Longitude in decimal degrees.")
    image: str = Field("", description="Image URI.")
    details: str = Field("", description="Free-form description.")

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }

    @model_validator(mode="before")
    @classmethod
    def _fold_field_names(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        folded: dict[str, Any] = {}
        for key, value in data.items():
            if isinstance(key, str):
                key = key.lower()
            # first spelling wins when a document repeats a field in another casing
            folded.setdefault(key, value)
        for key in _TEXT_FIELDS:
            if key in folded and folded[key] is None:
                folded[key] = ""
        return folded


__all__ = ["Record"]
