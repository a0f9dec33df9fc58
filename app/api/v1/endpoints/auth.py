"""
Authentication endpoints.

Lets a client check a username / password pair before using it.
"""

from fastapi import APIRouter, Depends
from fastapi.security import HTTPBasicCredentials
from sqlmodel import Session

from app.api.dependencies import basic_scheme, unauthorized
from app.db.session import get_db
from app.schemas.user import UserResponse
from app.services.auth_service import AuthenticationService

router = APIRouter()


@router.post("/login",
             summary="Check credentials and return the account.",
             response_model=UserResponse)
def login(credentials: HTTPBasicCredentials = Depends(basic_scheme), db: Session = Depends(get_db)):
    """
    Verify HTTP Basic credentials.

    Raises:
        HTTPException 401: Unknown user, inactive account or wrong password
    """
    user = AuthenticationService(db).get_authenticated_user(credentials.username, credentials.password)
    if user is None:
        raise unauthorized()
    return user
