"""
Builds social sharing metadata from vehicle records.
"""
from typing import Optional

from .config import config
from .models import PHOTO_CATEGORY_ORDER, MetaDescriptor, VehiclePhotos, VehicleRecord
from .utils import format_grouped


def select_main_image(photos: Optional[VehiclePhotos]) -> str:
    """Pick the first photo by category priority, or the placeholder image."""
    if photos is not None:
        for category_name in PHOTO_CATEGORY_ORDER:
            images = getattr(photos, category_name)
            if images:
                return images[0]
    return config.PLACEHOLDER_IMAGE_URL


def build_title(record: VehicleRecord) -> str:
    parts = [record.year, record.brand, record.model, record.variant]
    texts = (str(part).strip() for part in parts if part is not None)
    name = " ".join(text for text in texts if text)
    return f"{name} - {config.SITE_NAME}" if name else config.SITE_NAME


def build_description(record: VehicleRecord) -> str:
    kilometers = format_grouped(record.kilometers_driven) or "Low"
    price = format_grouped(record.sell_price) or "Best Price"
    city = record.seller_location_city or "Available"

    segments = [f"{kilometers} km", f"₹{price}", city]
    if record.fuel_type:
        segments.insert(0, record.fuel_type)
    return " | ".join(segments)


def build_canonical_url(record: VehicleRecord, frontend_url: str) -> str:
    return f"{frontend_url.rstrip('/')}/used-{record.category.value}-details/{record.id}"


def build_meta(record: VehicleRecord, frontend_url: Optional[str] = None) -> MetaDescriptor:
    """Turn a vehicle record into the metadata shown on shared links."""
    return MetaDescriptor(
        title=build_title(record),
        description=build_description(record),
        image=select_main_image(record.photos),
        url=build_canonical_url(record, frontend_url or config.FRONTEND_BASE_URL),
    )
