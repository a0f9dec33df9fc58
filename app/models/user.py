"""
User database model.

Defines the User table holding credentials shared by trainees and trainers.
"""

import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime
from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from app.models.trainee import Trainee
    from app.models.trainer import Trainer


def utc_now() -> datetime.datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.datetime.now(datetime.timezone.utc)


class User(SQLModel, table=True):
    """
    User model for authentication.

    Every trainee and trainer owns exactly one User.  Deleting the User
    deletes the profile attached to it.
    """
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    first_name: str = Field(max_length=100, nullable=False)
    last_name: str = Field(max_length=100, nullable=False)
    username: str = Field(unique=True, index=True, max_length=255, nullable=False)
    hashed_password: str = Field(nullable=False)
    is_active: bool = Field(default=True, nullable=False)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
    updated_at: datetime.datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))

    trainee: Optional["Trainee"] = Relationship(
        back_populates="user", sa_relationship_kwargs={"uselist": False, "cascade": "all, delete-orphan"})
    trainer: Optional["Trainer"] = Relationship(
        back_populates="user", sa_relationship_kwargs={"uselist": False, "cascade": "all, delete-orphan"})

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
