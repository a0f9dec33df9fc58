"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import auth, trainees, trainers, training_types, trainings

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    auth.router, prefix="/auth", tags=["Authentication"]
)
api_router.include_router(
    trainees.router, prefix="/trainees", tags=["Trainees"]
)
api_router.include_router(
    trainers.router, prefix="/trainers", tags=["Trainers"]
)
api_router.include_router(
    trainings.router, prefix="/trainings", tags=["Trainings"]
)
api_router.include_router(
    training_types.router, prefix="/training-types", tags=["Training types"]
)
