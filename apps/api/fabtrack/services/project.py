"""
Project service.
"""

from typing import Optional

from fabtrack.models.project import Project
from fabtrack.repositories.base import BaseRepository

from .base import CrudService


class ProjectRepository(BaseRepository[Project]):
    model = Project


class ProjectService(CrudService[Project]):
    """Project management service."""

    repository_class = ProjectRepository

    async def list(
        self,
        status: Optional[str] = None,
        search: Optional[str] = None,
    ) -> list[Project]:
        """
        List projects.

        At most one filter applies: status, then search (name, case-insensitive).
        """
        if status:
            return await self.repo.all(status=status)
        if search:
            return await self.repo.all(
                Project.name.ilike(f"%{search}%"),
                order_by="name",
                descending=False,
            )
        return await self.repo.all()
