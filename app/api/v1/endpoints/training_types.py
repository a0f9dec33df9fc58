"""
Training type endpoints.
"""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.db.session import get_db
from app.schemas.training_type import TrainingTypeResponse
from app.services.training_type_service import TrainingTypeService

router = APIRouter()


@router.get("", summary="List training types.", response_model=list[TrainingTypeResponse])
def list_training_types(db: Session = Depends(get_db)):
    return TrainingTypeService(db).get_all()
