"""
Shared API dependencies.

Callers authenticate every request with HTTP Basic credentials; the
dependencies below reject bad credentials with 401 before the endpoint
runs.
"""

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from sqlmodel import Session

from app.db.session import get_db
from app.services.auth_service import AuthenticationService

basic_scheme = HTTPBasic()


def unauthorized() -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Incorrect username or password",
                         headers={ "WWW-Authenticate": "Basic" }, )


def require_trainee(credentials: HTTPBasicCredentials = Depends(basic_scheme),
                    db: Session = Depends(get_db), ) -> HTTPBasicCredentials:
    """Credentials of an active trainee."""
    if not AuthenticationService(db).authenticate_trainee(credentials.username, credentials.password):
        raise unauthorized()
    return credentials


def require_trainer(credentials: HTTPBasicCredentials = Depends(basic_scheme),
                    db: Session = Depends(get_db), ) -> HTTPBasicCredentials:
    """Credentials of an active trainer."""
    if not AuthenticationService(db).authenticate_trainer(credentials.username, credentials.password):
        raise unauthorized()
    return credentials
