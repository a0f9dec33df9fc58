"""
Trainer endpoints.

Registration is open; every ``/me`` endpoint acts on the trainer whose
HTTP Basic credentials come with the request.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.security import HTTPBasicCredentials
from sqlmodel import Session

from app.api.dependencies import basic_scheme, require_trainer, unauthorized
from app.db.session import get_db
from app.schemas.trainer import TrainerCreate, TrainerRegistered, TrainerResponse, TrainerUpdate
from app.schemas.training import TrainingResponse
from app.schemas.user import ActiveStatusUpdate, PasswordChange
from app.services.auth_service import AuthenticationService
from app.services.trainer_service import TrainerService

router = APIRouter()


@router.post("", summary="Register a trainer.", response_model=TrainerRegistered,
             status_code=status.HTTP_201_CREATED, )
def register(data: TrainerCreate, db: Session = Depends(get_db)):
    """
    Register a trainer and return the generated username and password.

    Raises:
        HTTPException 400: Blank name or unknown specialization
    """
    created = TrainerService(db).create_profile(data)
    if created is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST,
                            detail=f"Invalid trainer data or unknown specialization '{data.specialization}'", )
    trainer, credentials = created
    return TrainerRegistered(profile=TrainerResponse.from_trainer(trainer), credentials=credentials)


@router.get("/me", summary="Get the authenticated trainer.", response_model=TrainerResponse)
def get_profile(credentials: HTTPBasicCredentials = Depends(require_trainer), db: Session = Depends(get_db)):
    trainer = TrainerService(db).get_profile(credentials.username, credentials.password)
    return TrainerResponse.from_trainer(trainer)


@router.put("/me", summary="Update the authenticated trainer.", response_model=TrainerResponse)
def update_profile(data: TrainerUpdate, credentials: HTTPBasicCredentials = Depends(require_trainer),
                   db: Session = Depends(get_db), ):
    trainer = TrainerService(db).update_profile(credentials.username, credentials.password, data)
    if trainer is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST,
                            detail=f"Unknown specialization '{data.specialization}'", )
    return TrainerResponse.from_trainer(trainer)


@router.put("/me/password", summary="Change the trainer password.", status_code=status.HTTP_204_NO_CONTENT)
def change_password(data: PasswordChange, credentials: HTTPBasicCredentials = Depends(require_trainer),
                    db: Session = Depends(get_db), ):
    if not TrainerService(db).change_password(credentials.username, credentials.password, data.new_password):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="New password cannot be empty")


@router.patch("/me/status", summary="Activate or deactivate the trainer.", status_code=status.HTTP_204_NO_CONTENT)
def set_status(data: ActiveStatusUpdate, credentials: HTTPBasicCredentials = Depends(basic_scheme),
               db: Session = Depends(get_db), ):
    """
    Deactivated trainers can call this to reactivate themselves.

    Raises:
        HTTPException 401: Bad credentials
        HTTPException 409: Already in the requested state
    """
    if not AuthenticationService(db).authenticate_trainer(credentials.username, credentials.password,
                                                         require_active=False):
        raise unauthorized()
    if not TrainerService(db).set_active(credentials.username, credentials.password, data.is_active):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Status not changed")


@router.delete("/me", summary="Delete the trainer and its trainings.", status_code=status.HTTP_204_NO_CONTENT)
def delete_profile(credentials: HTTPBasicCredentials = Depends(require_trainer), db: Session = Depends(get_db)):
    if not TrainerService(db).delete_profile(credentials.username, credentials.password):
        raise unauthorized()


@router.get("/me/trainings", summary="List the trainer's trainings.", response_model=list[TrainingResponse])
def list_trainings(from_date: Optional[datetime.date] = Query(None, description="Range start (inclusive)"),
                   to_date: Optional[datetime.date] = Query(None, description="Range end (inclusive)"),
                   trainee_name: Optional[str] = Query(None, description="Part of the trainee's name"),
                   training_type: Optional[str] = Query(None, description="Training type name"),
                   credentials: HTTPBasicCredentials = Depends(require_trainer), db: Session = Depends(get_db), ):
    trainings = TrainerService(db).get_trainings(credentials.username, credentials.password, from_date, to_date,
                                                 trainee_name, training_type)
    return [TrainingResponse.from_training(t) for t in trainings]
