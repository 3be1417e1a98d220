"""Pydantic request/response schemas used by the API.

Schemas keep API input/output shapes stable and provide validation for
controller handlers and tests. Validators raise `ValueError`s carrying the
human-readable message that ends up in the `details` field of a
400 response; `FIELD_MESSAGES` covers the errors pydantic raises itself
(missing fields, wrong types, unknown enum members).
"""

import re
from typing import List, Optional

from pydantic import AnyUrl, BaseModel, ConfigDict, Field, StrictInt, TypeAdapter, ValidationError, field_validator

from .models import DifficultyLevel, ResourceType

MAX_TEXT_LENGTH = 255
ROLE_ID_PATTERN = re.compile(r"[0-9]+")

FIELD_MESSAGES = {
    "name": "Name is required",
    "short_description": "Short description is required",
    "long_description": "Long description must be a string",
    "responsibilities": "Responsibilities must be a list of strings",
    "skills": "Skills must be a list of strings",
    "role_id": "Role ID must be a positive integer",
    "title": "Title is required",
    "url": "URL must be a valid URL",
    "resource_type": "Resource type must be one of: " + ", ".join(t.value for t in ResourceType),
    "difficulty": "Difficulty must be one of: " + ", ".join(d.value for d in DifficultyLevel),
}

TEXT_LABELS = {
    "name": "Name",
    "short_description": "Short description",
    "long_description": "Long description",
    "title": "Title",
}

_url_adapter = TypeAdapter(AnyUrl)


def _required_text(value: str, label: str, max_length: Optional[int] = None) -> str:
    problems = []
    if value == "":
        problems.append(f"{label} is required")
    if max_length is not None and len(value) > max_length:
        problems.append(f"{label} must be {max_length} characters or less")
    if not value.strip():
        problems.append(f"{label} cannot be only whitespace")
    if problems:
        raise ValueError(", ".join(problems))
    return value


class RoleCreate(BaseModel):
    """Payload for `POST /api/roles`."""
    name: str
    short_description: str
    long_description: Optional[str] = None
    responsibilities: Optional[List[str]] = None
    skills: Optional[List[str]] = None

    @field_validator("name")
    @classmethod
    def _check_name(cls, v: str) -> str:
        return _required_text(v, "Name", MAX_TEXT_LENGTH)

    @field_validator("short_description")
    @classmethod
    def _check_short_description(cls, v: str) -> str:
        return _required_text(v, "Short description")


class ResourceCreate(BaseModel):
    """Payload for `POST /api/resources`.

    `role_id` must be a JSON integer; numeric strings are rejected. The
    URL is checked for syntax only and stored exactly as submitted.
    """
    role_id: StrictInt
    title: str
    url: str
    resource_type: ResourceType
    difficulty: DifficultyLevel

    @field_validator("role_id")
    @classmethod
    def _check_role_id(cls, v: int) -> int:
        if v <= 0:
            raise ValueError(FIELD_MESSAGES["role_id"])
        return v

    @field_validator("title")
    @classmethod
    def _check_title(cls, v: str) -> str:
        return _required_text(v, "Title", MAX_TEXT_LENGTH)

    @field_validator("url")
    @classmethod
    def _check_url(cls, v: str) -> str:
        try:
            _url_adapter.validate_python(v)
        except ValidationError:
            raise ValueError(FIELD_MESSAGES["url"])
        return v


class ResourceOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    role_id: int
    title: str
    url: str
    resource_type: ResourceType
    difficulty: DifficultyLevel


class RoleSummaryOut(BaseModel):
    """Role fields shown on the landing page cards."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    short_description: str


class RoleOut(RoleSummaryOut):
    long_description: Optional[str] = None
    responsibilities: List[str] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)


class RoleWithResourcesOut(RoleOut):
    resources: List[ResourceOut] = Field(default_factory=list)


class RoleListResponse(BaseModel):
    roles: List[RoleSummaryOut]


class RoleResponse(BaseModel):
    role: RoleOut


class RoleDetailResponse(BaseModel):
    role: RoleWithResourcesOut


class ResourceResponse(BaseModel):
    resource: ResourceOut


class ResourceListResponse(BaseModel):
    resources: List[ResourceOut]


class ErrorOut(BaseModel):
    """Body of every 4xx/5xx JSON response."""
    error: str
    details: Optional[str] = None


def format_validation_errors(errors) -> str:
    """Collapse pydantic error dicts into one comma-separated message.

    Messages from our own validators are used verbatim; anything pydantic
    reports itself is replaced by the per-field message.
    """
    messages = []
    for err in errors:
        loc = [part for part in err.get("loc", ()) if part != "body"]
        field = next((str(part) for part in loc if isinstance(part, str)), None)
        if err.get("type") == "value_error" and "error" in err.get("ctx", {}):
            msg = str(err["ctx"]["error"])
        elif err.get("type") == "json_invalid":
            msg = "Request body must be valid JSON"
        elif err.get("type") == "model_attributes_type" or not loc:
            msg = "Request body must be a JSON object"
        elif err.get("type") == "string_type" and field in TEXT_LABELS:
            msg = f"{TEXT_LABELS[field]} must be a string"
        elif field in FIELD_MESSAGES:
            msg = FIELD_MESSAGES[field]
        else:
            msg = err.get("msg", "Invalid value")
        if msg not in messages:
            messages.append(msg)
    return ", ".join(messages)
