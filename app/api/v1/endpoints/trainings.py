"""
Training endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPBasicCredentials
from sqlmodel import Session

from app.api.dependencies import require_trainee
from app.db.session import get_db
from app.schemas.training import TrainingCreate, TrainingResponse
from app.services.training_service import TrainingService

router = APIRouter()


@router.post("", summary="Book a training for the authenticated trainee.", response_model=TrainingResponse,
             status_code=status.HTTP_201_CREATED, )
def add_training(data: TrainingCreate, credentials: HTTPBasicCredentials = Depends(require_trainee),
                 db: Session = Depends(get_db), ):
    """
    Raises:
        HTTPException 404: Trainer not found
        HTTPException 400: Trainer does not offer the type, or date not in the future
    """
    training = TrainingService(db).add_training(credentials.username, credentials.password, data)
    if training is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND,
                            detail=f"Trainer not found: '{data.trainer_username}'", )
    return TrainingResponse.from_training(training)
