"""
Vehicle store client and lookup operations.
"""
import logging
from typing import Any, Dict

import httpx
from fastapi import Request
from postgrest.exceptions import APIError
from supabase import Client, create_client

from .config import config
from .models import VehicleCategory, VehicleRecord

logger = logging.getLogger(__name__)


class VehicleNotFound(Exception):
    """Raised when a vehicle cannot be fetched for a category and id."""

    def __init__(self, category: str, vehicle_id: str):
        super().__init__(f"Vehicle not found: {category}/{vehicle_id}")
        self.category = category
        self.vehicle_id = vehicle_id


def create_store_client() -> Client:
    """Create the Supabase client shared by every request."""
    config.validate()
    return create_client(config.SUPABASE_URL, config.SUPABASE_ANON_KEY)


def get_store(request: Request) -> Client:
    """Dependency returning the process-scoped store client."""
    return request.app.state.store


def fetch_vehicle_row(store: Client, table_name: str, vehicle_id: str) -> Dict[str, Any]:
    """Run a single-row equality query against a listings table."""
    response = (
        store.table(table_name)
        .select("*")
        .eq("id", vehicle_id)
        .single()
        .execute()
    )
    return response.data


def get_vehicle_row(store: Client, category: str, vehicle_id: str) -> Dict[str, Any]:
    """
    Fetch one vehicle row, unchanged, by category and id.

    Missing rows, errors reported by the store and connection failures all
    raise VehicleNotFound. Anything else propagates to the caller.
    """
    vehicle_category = VehicleCategory.parse(category)
    if vehicle_category is None:
        logger.info(f"Unknown vehicle category requested: {category}")
        raise VehicleNotFound(category, vehicle_id)

    try:
        row = fetch_vehicle_row(store, vehicle_category.table_name, vehicle_id)
    except APIError as e:
        logger.warning(f"Store error fetching {category}/{vehicle_id}: {e}")
        raise VehicleNotFound(category, vehicle_id) from e
    except httpx.HTTPError as e:
        logger.error(f"Store unreachable fetching {category}/{vehicle_id}: {e}")
        raise VehicleNotFound(category, vehicle_id) from e

    if not row:
        raise VehicleNotFound(category, vehicle_id)

    return row


def lookup_vehicle(store: Client, category: str, vehicle_id: str) -> VehicleRecord:
    """Fetch a vehicle and read it into a VehicleRecord."""
    row = get_vehicle_row(store, category, vehicle_id)
    return VehicleRecord.from_row(row, VehicleCategory(category))
