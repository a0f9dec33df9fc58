"""
Trainee endpoints.

Registration is open; every ``/me`` endpoint acts on the trainee whose
HTTP Basic credentials come with the request.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.security import HTTPBasicCredentials
from sqlmodel import Session

from app.api.dependencies import basic_scheme, require_trainee, unauthorized
from app.db.session import get_db
from app.schemas.trainee import (TraineeCreate, TraineeRegistered, TraineeResponse, TraineeUpdate,
                                 TrainerSummary, TrainerUsernames, )
from app.schemas.training import TrainingResponse
from app.schemas.user import ActiveStatusUpdate, PasswordChange
from app.services.auth_service import AuthenticationService
from app.services.trainee_service import TraineeService

router = APIRouter()


@router.post("", summary="Register a trainee.", response_model=TraineeRegistered,
             status_code=status.HTTP_201_CREATED, )
def register(data: TraineeCreate, db: Session = Depends(get_db)):
    """
    Register a trainee and return the generated username and password.

    Raises:
        HTTPException 400: Blank name or date of birth in the future
    """
    created = TraineeService(db).create_profile(data)
    if created is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid trainee data")
    trainee, credentials = created
    return TraineeRegistered(profile=TraineeResponse.from_trainee(trainee), credentials=credentials)


@router.get("/me", summary="Get the authenticated trainee.", response_model=TraineeResponse)
def get_profile(credentials: HTTPBasicCredentials = Depends(require_trainee), db: Session = Depends(get_db)):
    trainee = TraineeService(db).get_profile(credentials.username, credentials.password)
    return TraineeResponse.from_trainee(trainee)


@router.put("/me", summary="Update the authenticated trainee.", response_model=TraineeResponse)
def update_profile(data: TraineeUpdate, credentials: HTTPBasicCredentials = Depends(require_trainee),
                   db: Session = Depends(get_db), ):
    trainee = TraineeService(db).update_profile(credentials.username, credentials.password, data)
    if trainee is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid trainee data")
    return TraineeResponse.from_trainee(trainee)


@router.put("/me/password", summary="Change the trainee password.", status_code=status.HTTP_204_NO_CONTENT)
def change_password(data: PasswordChange, credentials: HTTPBasicCredentials = Depends(require_trainee),
                    db: Session = Depends(get_db), ):
    if not TraineeService(db).change_password(credentials.username, credentials.password, data.new_password):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="New password cannot be empty")


@router.patch("/me/status", summary="Activate or deactivate the trainee.", status_code=status.HTTP_204_NO_CONTENT)
def set_status(data: ActiveStatusUpdate, credentials: HTTPBasicCredentials = Depends(basic_scheme),
               db: Session = Depends(get_db), ):
    """
    Deactivated trainees can call this to reactivate themselves.

    Raises:
        HTTPException 401: Bad credentials
        HTTPException 409: Already in the requested state
    """
    if not AuthenticationService(db).authenticate_trainee(credentials.username, credentials.password,
                                                         require_active=False):
        raise unauthorized()
    if not TraineeService(db).set_active(credentials.username, credentials.password, data.is_active):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Status not changed")


@router.delete("/me", summary="Delete the trainee and its trainings.", status_code=status.HTTP_204_NO_CONTENT)
def delete_profile(credentials: HTTPBasicCredentials = Depends(require_trainee), db: Session = Depends(get_db)):
    if not TraineeService(db).delete_profile(credentials.username, credentials.password):
        raise unauthorized()


@router.get("/me/trainings", summary="List the trainee's trainings.", response_model=list[TrainingResponse])
def list_trainings(from_date: Optional[datetime.date] = Query(None, description="Range start (inclusive)"),
                   to_date: Optional[datetime.date] = Query(None, description="Range end (inclusive)"),
                   trainer_name: Optional[str] = Query(None, description="Part of the trainer's name"),
                   training_type: Optional[str] = Query(None, description="Training type name"),
                   credentials: HTTPBasicCredentials = Depends(require_trainee), db: Session = Depends(get_db), ):
    trainings = TraineeService(db).get_trainings(credentials.username, credentials.password, from_date, to_date,
                                                 trainer_name, training_type)
    return [TrainingResponse.from_training(t) for t in trainings]


@router.get("/me/unassigned-trainers", summary="List active trainers not assigned to the trainee.",
            response_model=list[TrainerSummary], )
def list_unassigned_trainers(credentials: HTTPBasicCredentials = Depends(require_trainee),
                             db: Session = Depends(get_db), ):
    trainers = TraineeService(db).get_unassigned_trainers(credentials.username, credentials.password)
    return [TrainerSummary.from_trainer(t) for t in trainers]


@router.put("/me/trainers", summary="Replace the trainee's trainers.", response_model=TraineeResponse)
def update_trainers(data: TrainerUsernames, credentials: HTTPBasicCredentials = Depends(require_trainee),
                    db: Session = Depends(get_db), ):
    trainee = TraineeService(db).update_trainers(credentials.username, credentials.password, data.trainer_usernames)
    return TraineeResponse.from_trainee(trainee)
