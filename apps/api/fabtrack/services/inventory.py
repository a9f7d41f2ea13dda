"""
Inventory service.
"""

from typing import Any, Optional

from sqlalchemy import or_

from fabtrack.core.auth.interfaces import Caller
from fabtrack.models.inventory import InventoryItem
from fabtrack.repositories.base import BaseRepository
from fabtrack.utils.timezone import utc_now

from .base import CrudService


class InventoryRepository(BaseRepository[InventoryItem]):
    model = InventoryItem

    async def low_stock(self) -> list[InventoryItem]:
        """Items at or below their minimum stock, scarcest first."""
        return await self.all(
            InventoryItem.quantity <= InventoryItem.min_stock,
            order_by="quantity",
            descending=False,
        )

    async def search(self, term: str) -> list[InventoryItem]:
        """Case-insensitive substring match on name, code or category."""
        pattern = f"%{term}%"
        return await self.all(
            or_(
                InventoryItem.name.ilike(pattern),
                InventoryItem.code.ilike(pattern),
                InventoryItem.category.ilike(pattern),
            ),
            order_by="name",
            descending=False,
        )


class InventoryService(CrudService[InventoryItem]):
    """Inventory management service."""

    repository_class = InventoryRepository
    repo: InventoryRepository

    async def list(
        self,
        low_stock: bool = False,
        category: Optional[str] = None,
        search: Optional[str] = None,
    ) -> list[InventoryItem]:
        """
        List inventory items.

        Only one filter is honored, in this order: low stock, category,
        search. Without a filter every item is returned, newest first.
        """
        if low_stock:
            return await self.repo.low_stock()
        if category:
            return await self.repo.all(
                category=category,
                order_by="name",
                descending=False,
            )
        if search:
            return await self.repo.search(search)
        return await self.repo.all()

    async def create(
        self,
        data: dict[str, Any],
        actor: Optional[Caller] = None,
    ) -> InventoryItem:
        return await super().create({**data, "last_updated": utc_now()}, actor=actor)

    async def update(
        self,
        record_id: str,
        data: dict[str, Any],
        actor: Optional[Caller] = None,
    ) -> Optional[InventoryItem]:
        return await super().update(
            record_id,
            {**data, "last_updated": utc_now()},
            actor=actor,
        )

    async def update_stock(
        self,
        item_id: str,
        quantity: float,
        actor: Optional[Caller] = None,
    ) -> Optional[InventoryItem]:
        """Set the stock level of an item."""
        return await self.update(item_id, {"quantity": quantity}, actor=actor)
