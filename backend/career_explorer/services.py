"""Business logic services used by HTTP controllers and pages.

Services are intentionally thin: they validate identifiers, check that
referenced rows exist and persist aggregates via repositories. Errors are
raised as `ValueError` (bad input) or `RoleNotFoundError` and translated
to HTTP responses by the controllers.
"""

import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from . import models, repositories, schemas
from .schemas import ROLE_ID_PATTERN
from .utils.sample_catalog import SAMPLE_RESOURCES, SAMPLE_ROLES

logger = logging.getLogger("career_explorer.services")


class RoleNotFoundError(LookupError):
    """Raised when a role id does not match any stored role."""
    def __init__(self, role_id: int):
        super().__init__(f"No role found with ID {role_id}")
        self.role_id = role_id


def parse_role_id(raw: str) -> int:
    """Convert a path segment into a role id.

    Only plain digit strings are accepted; signs, whitespace and decimals
    raise `ValueError`.
    """
    if not isinstance(raw, str) or not ROLE_ID_PATTERN.fullmatch(raw):
        raise ValueError("ID must be a valid number")
    return int(raw)


def parse_difficulty(raw: Optional[str]) -> Optional[models.DifficultyLevel]:
    """Map a `difficulty` filter value to the enum; `None`/`All` mean no filter."""
    if raw is None or raw == "" or raw == "All":
        return None
    try:
        return models.DifficultyLevel(raw)
    except ValueError:
        raise ValueError(schemas.FIELD_MESSAGES["difficulty"])


class CatalogService:
    """Read and create operations for roles and their resources."""
    def __init__(self, session: Session):
        self.session = session
        self.role_repo = repositories.RoleRepository(session)
        self.resource_repo = repositories.ResourceRepository(session)

    def list_roles(self) -> List[models.Role]:
        return self.role_repo.list_all()

    def get_role(self, role_id: int) -> models.Role:
        """Return the role with `role_id`; its resources load in id order."""
        role = self.role_repo.get(role_id)
        if role is None:
            raise RoleNotFoundError(role_id)
        return role

    def list_resources(self, role_id: int, difficulty: Optional[models.DifficultyLevel] = None) -> List[models.Resource]:
        """Return the resources of an existing role.

        Raises `RoleNotFoundError` rather than returning an empty list when
        the role itself does not exist.
        """
        if not self.role_repo.exists(role_id):
            raise RoleNotFoundError(role_id)
        value = difficulty.value if difficulty is not None else None
        return self.resource_repo.list_for_role(role_id, difficulty=value)

    def create_role(self, payload: schemas.RoleCreate) -> models.Role:
        role = models.Role(
            name=payload.name,
            short_description=payload.short_description,
            long_description=payload.long_description or None,
            responsibilities=list(payload.responsibilities or []),
            skills=list(payload.skills or []),
        )
        role = self.role_repo.create(role)
        logger.info("Created role id=%s name=%r", role.id, role.name)
        return role

    def create_resource(self, payload: schemas.ResourceCreate) -> models.Resource:
        """Create a resource for an existing role.

        The existence check gives a clean 404; the foreign key still guards
        against a role vanishing before the insert commits.
        """
        if not self.role_repo.exists(payload.role_id):
            raise RoleNotFoundError(payload.role_id)
        resource = models.Resource(
            role_id=payload.role_id,
            title=payload.title,
            url=payload.url,
            resource_type=payload.resource_type.value,
            difficulty=payload.difficulty.value,
        )
        try:
            resource = self.resource_repo.create(resource)
        except IntegrityError as e:
            if not self.role_repo.exists(payload.role_id):
                raise RoleNotFoundError(payload.role_id) from e
            raise
        logger.info("Created resource id=%s for role id=%s", resource.id, resource.role_id)
        return resource


class SeedService:
    """Load the sample catalog into the database."""
    def __init__(self, session: Session):
        self.session = session
        self.role_repo = repositories.RoleRepository(session)
        self.resource_repo = repositories.ResourceRepository(session)

    def is_empty(self) -> bool:
        return not self.role_repo.list_all()

    def seed(self, reset: bool = True) -> dict:
        """Insert the sample roles and resources.

        With `reset` the existing catalog is cleared first; resources are
        deleted before roles so the delete-restrict foreign key holds.
        Returns a summary with the number of inserted rows.
        """
        if reset:
            removed_resources = self.resource_repo.delete_all()
            removed_roles = self.role_repo.delete_all()
            logger.info("Cleared %s resources and %s roles", removed_resources, removed_roles)
        role_ids = {}
        for data in SAMPLE_ROLES:
            role = self.role_repo.create(models.Role(**data))
            role_ids[role.name] = role.id
            logger.info("Seeded role %s (ID: %s)", role.name, role.id)
        count = 0
        for role_name, title, url, resource_type, difficulty in SAMPLE_RESOURCES:
            self.resource_repo.create(models.Resource(
                role_id=role_ids[role_name],
                title=title,
                url=url,
                resource_type=resource_type,
                difficulty=difficulty,
            ))
            count += 1
        logger.info("Seeded %s roles and %s resources", len(role_ids), count)
        return {"roles": len(role_ids), "resources": count}
