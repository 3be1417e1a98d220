"""SQLModel data models.

This module defines the application's database tables using SQLModel.
A `Role` owns an ordered list of learning `Resource`s; a role cannot be
deleted while resources still reference it.
"""

from enum import Enum
from typing import List, Optional

from sqlalchemy import JSON, CheckConstraint, Column
from sqlmodel import SQLModel, Field, Relationship


# ids stay within a 32-bit INTEGER so they fit every supported backend
MAX_ID = 2**31 - 1


class ResourceType(str, Enum):
    VIDEO = "Video"
    ARTICLE = "Article"
    COURSE = "Course"


class DifficultyLevel(str, Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


def _in_clause(column: str, enum_cls) -> str:
    values = ", ".join(f"'{member.value}'" for member in enum_cls)
    return f"{column} IN ({values})"


class Role(SQLModel, table=True):
    """A technology career role.

    Fields:
    - `name`: display name, at most 255 characters
    - `short_description`: one-line summary shown on the role card
    - `long_description`: optional longer text for the detail page
    - `responsibilities` / `skills`: ordered lists of strings (JSON columns)
    """
    __tablename__ = "roles"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255, nullable=False)
    short_description: str = Field(nullable=False)
    long_description: Optional[str] = None
    responsibilities: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    skills: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    resources: List["Resource"] = Relationship(
        back_populates="role",
        sa_relationship_kwargs={"order_by": "Resource.id", "passive_deletes": "all"},
    )


class Resource(SQLModel, table=True):
    """A learning resource attached to a `Role`."""
    __tablename__ = "resources"
    __table_args__ = (
        CheckConstraint(_in_clause("resource_type", ResourceType), name="ck_resources_resource_type"),
        CheckConstraint(_in_clause("difficulty", DifficultyLevel), name="ck_resources_difficulty"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    role_id: int = Field(foreign_key="roles.id", ondelete="RESTRICT", index=True, nullable=False)
    title: str = Field(max_length=255, nullable=False)
    url: str = Field(nullable=False)
    resource_type: str = Field(max_length=50, nullable=False)
    difficulty: str = Field(max_length=50, index=True, nullable=False)
    role: Optional[Role] = Relationship(back_populates="resources")
