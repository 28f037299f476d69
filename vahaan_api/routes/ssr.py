"""
Share page route handlers for social media crawlers.
"""
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, PlainTextResponse
from starlette.concurrency import run_in_threadpool
from supabase import Client

from ..database import VehicleNotFound, get_store, lookup_vehicle
from ..meta import build_meta
from ..rendering import render_share_page

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/ssr", tags=["ssr"])


@router.get("/{vehicle_type}/{vehicle_id}", response_class=HTMLResponse)
async def ssr_vehicle(vehicle_type: str, vehicle_id: str, store: Client = Depends(get_store)):
    """Static page with sharing tags that redirects to the frontend."""
    try:
        record = await run_in_threadpool(lookup_vehicle, store, vehicle_type, vehicle_id)
        html = render_share_page(build_meta(record))
    except VehicleNotFound as e:
        logger.info(str(e))
        return PlainTextResponse("Vehicle not found", status_code=404)
    except Exception as e:
        logger.error(f"SSR error for {vehicle_type}/{vehicle_id}: {e}", exc_info=True)
        return PlainTextResponse("Internal Server Error", status_code=500)

    return HTMLResponse(html)
