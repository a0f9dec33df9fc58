"""
Training type API schemas.
"""

from pydantic import BaseModel


class TrainingTypeResponse(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True
