from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from ..infrastructure.database import get_db
from ..domain.models import SiteResponse
from ..domain.services.waste_service import waste_service

router = APIRouter()


@router.get("", response_model=List[SiteResponse])
def list_sites(db: Session = Depends(get_db)):
    """
    List all sites, for the worker submission form.
    """
    return waste_service.list_sites(db)
