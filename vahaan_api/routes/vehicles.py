"""
API route handlers for vehicle data and sharing metadata.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException
from starlette.concurrency import run_in_threadpool
from supabase import Client

from ..database import VehicleNotFound, get_store, get_vehicle_row, lookup_vehicle
from ..meta import build_meta
from ..models import MetaDescriptor, VehicleResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["vehicles"])


@router.get("/vehicles/{vehicle_type}/{vehicle_id}", response_model=VehicleResponse)
async def get_api_vehicle(vehicle_type: str, vehicle_id: str, store: Client = Depends(get_store)):
    """Get the stored record for a vehicle."""
    try:
        row = await run_in_threadpool(get_vehicle_row, store, vehicle_type, vehicle_id)
    except VehicleNotFound as e:
        logger.info(str(e))
        raise HTTPException(status_code=404, detail="Vehicle not found")

    return VehicleResponse(vehicle=row)


@router.get("/meta/{vehicle_type}/{vehicle_id}", response_model=MetaDescriptor)
async def get_api_meta(vehicle_type: str, vehicle_id: str, store: Client = Depends(get_store)):
    """Get social sharing metadata for a vehicle."""
    try:
        record = await run_in_threadpool(lookup_vehicle, store, vehicle_type, vehicle_id)
    except VehicleNotFound as e:
        logger.info(str(e))
        raise HTTPException(status_code=404, detail="Vehicle not found")

    return build_meta(record)
