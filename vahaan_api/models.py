"""
Pydantic models for vehicle records and API response serialization.
"""
import math
from enum import Enum
from typing import Any, List, Literal, Optional, Union

from pydantic import BaseModel, field_validator


class VehicleCategory(str, Enum):
    """Vehicle categories served by the marketplace."""
    CAR = "car"
    BIKE = "bike"

    @property
    def table_name(self) -> str:
        return f"{self.value}_seller_listings"

    @classmethod
    def parse(cls, value: str) -> Optional["VehicleCategory"]:
        """Return the matching category, or None for anything unsupported."""
        try:
            return cls(value)
        except ValueError:
            return None


PHOTO_CATEGORY_ORDER = ("exterior", "interior", "engine", "dashboard", "other")


def _as_number(value: Any) -> Optional[Union[int, float]]:
    """Numbers and numeric strings pass, anything else is dropped."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value if math.isfinite(value) else None
    if isinstance(value, str):
        try:
            number = float(value.replace(",", ""))
        except ValueError:
            return None
        if not math.isfinite(number):
            return None
        return int(number) if number.is_integer() else number
    return None


def _as_text(value: Any) -> Optional[str]:
    """Strings and numbers become text, other values are dropped."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (str, int, float)):
        return str(value)
    return None


class VehiclePhotos(BaseModel):
    """Photo URLs grouped by what they show."""

    exterior: List[str] = []
    interior: List[str] = []
    engine: List[str] = []
    dashboard: List[str] = []
    other: List[str] = []

    @field_validator(*PHOTO_CATEGORY_ORDER, mode="before")
    @classmethod
    def _urls_only(cls, value: Any) -> List[str]:
        if not isinstance(value, list):
            return []
        return [url for url in value if isinstance(url, str) and url.strip()]


class VehicleRecord(BaseModel):
    """
    A vehicle row as stored in a seller listings table.

    Columns that cannot be read as the expected type are treated as absent,
    so formatting falls back to its defaults instead of failing.
    """

    id: str
    year: Optional[int] = None
    brand: Optional[str] = None
    model: Optional[str] = None
    variant: Optional[str] = None
    fuel_type: Optional[str] = None
    kilometers_driven: Optional[Union[int, float]] = None
    sell_price: Optional[Union[int, float]] = None
    seller_location_city: Optional[str] = None
    photos: Optional[VehiclePhotos] = None

    # Set by the lookup from the table the row came from
    category: VehicleCategory

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_text(cls, value: Any) -> Any:
        return value if value is None else str(value)

    @field_validator("year", mode="before")
    @classmethod
    def _whole_year(cls, value: Any) -> Optional[int]:
        number = _as_number(value)
        return int(number) if number is not None and float(number).is_integer() else None

    @field_validator("kilometers_driven", "sell_price", mode="before")
    @classmethod
    def _numbers(cls, value: Any) -> Optional[Union[int, float]]:
        return _as_number(value)

    @field_validator("brand", "model", "variant", "fuel_type", "seller_location_city", mode="before")
    @classmethod
    def _texts(cls, value: Any) -> Optional[str]:
        return _as_text(value)

    @field_validator("photos", mode="before")
    @classmethod
    def _photos_object(cls, value: Any) -> Any:
        return value if isinstance(value, dict) else None

    @classmethod
    def from_row(cls, row: dict, category: VehicleCategory) -> "VehicleRecord":
        """Read the fields used for sharing metadata out of a store row."""
        fields = {name: row[name] for name in cls.model_fields if name in row}
        fields["category"] = category
        return cls.model_validate(fields)


class MetaDescriptor(BaseModel):
    """Social sharing metadata for a vehicle page."""
    title: str
    description: str
    image: str
    url: str
    type: Literal["website"] = "website"


class VehicleResponse(BaseModel):
    """Response model for the raw vehicle endpoint."""
    vehicle: dict


class HealthOut(BaseModel):
    """Model for the liveness probe."""
    status: str
    timestamp: str
    service: str
