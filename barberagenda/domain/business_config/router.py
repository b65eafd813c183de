"""Business configuration router - FastAPI endpoints for hours and service catalog"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...auth import require_admin
from ...database import get_db
from .schemas import BusinessConfigResponse, BusinessConfigUpdate, ServiceItem
from .service import BusinessConfigService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/config", tags=["Business Config"])


def get_config_service(db: Session = Depends(get_db)) -> BusinessConfigService:
    """Dependency injection for BusinessConfigService"""
    return BusinessConfigService(db)


@router.get("/public", response_model=BusinessConfigResponse)
async def get_public_config(service: BusinessConfigService = Depends(get_config_service)):
    """Hours, open days and catalog for the public booking form"""
    return service.get_config()


@router.get("", response_model=BusinessConfigResponse)
async def get_config(
    _admin: dict = Depends(require_admin),
    service: BusinessConfigService = Depends(get_config_service),
):
    return service.get_config()


@router.patch("", response_model=BusinessConfigResponse)
async def update_config(
    data: BusinessConfigUpdate,
    _admin: dict = Depends(require_admin),
    service: BusinessConfigService = Depends(get_config_service),
):
    """Update operating hours, slot interval, open days or catalog (merge semantics)"""
    return service.set_config(data)


@router.post("/services", response_model=BusinessConfigResponse, status_code=201)
async def add_service(
    data: ServiceItem,
    _admin: dict = Depends(require_admin),
    service: BusinessConfigService = Depends(get_config_service),
):
    return service.add_service(data)


@router.delete("/services/{index}", response_model=BusinessConfigResponse)
async def remove_service(
    index: int,
    _admin: dict = Depends(require_admin),
    service: BusinessConfigService = Depends(get_config_service),
):
    """Remove the catalog entry at `index`"""
    return service.remove_service(index)
