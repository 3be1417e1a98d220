"""Repository classes encapsulating database operations.

Each repository is small and focused on a single table. Repositories
return SQLModel objects, always order by primary key and perform
commits/refreshes where appropriate.
"""

from typing import List, Optional
from sqlalchemy import delete
from sqlmodel import Session, select
from . import models


class RoleRepository:
    """Create/read operations for `Role` objects."""
    def __init__(self, session: Session):
        self.session = session

    def create(self, role: models.Role) -> models.Role:
        """Persist a new role and return the managed instance."""
        self.session.add(role)
        self.session.commit()
        self.session.refresh(role)
        return role

    def list_all(self) -> List[models.Role]:
        """Return every role ordered by id."""
        stmt = select(models.Role).order_by(models.Role.id)
        return self.session.exec(stmt).all()

    def get(self, role_id: int) -> Optional[models.Role]:
        """Get a `Role` by primary key."""
        if role_id > models.MAX_ID:
            return None
        return self.session.get(models.Role, role_id)

    def exists(self, role_id: int) -> bool:
        if role_id > models.MAX_ID:
            return False
        stmt = select(models.Role.id).where(models.Role.id == role_id)
        return self.session.exec(stmt).first() is not None

    def delete_all(self) -> int:
        """Remove every role. Fails while resources still reference one."""
        try:
            result = self.session.execute(delete(models.Role))
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        return result.rowcount


class ResourceRepository:
    """Create/read operations for `Resource` objects."""
    def __init__(self, session: Session):
        self.session = session

    def create(self, resource: models.Resource) -> models.Resource:
        """Persist a new resource and return the managed instance.

        The session is rolled back if the insert fails so it stays usable
        for the caller (e.g. after a foreign key violation).
        """
        self.session.add(resource)
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        self.session.refresh(resource)
        return resource

    def list_for_role(self, role_id: int, difficulty: Optional[str] = None) -> List[models.Resource]:
        """List resources of `role_id` ordered by id, optionally by difficulty."""
        stmt = select(models.Resource).where(models.Resource.role_id == role_id)
        if difficulty is not None:
            stmt = stmt.where(models.Resource.difficulty == difficulty)
        return self.session.exec(stmt.order_by(models.Resource.id)).all()

    def delete_all(self) -> int:
        """Remove every resource, rolling back if the delete fails."""
        try:
            result = self.session.execute(delete(models.Resource))
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        return result.rowcount
