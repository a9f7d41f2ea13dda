"""
Inventory item schemas.
"""

from datetime import datetime

from .base import RecordResponse, RequestSchema, partial
from .fields import non_empty, non_negative, one_of, optional_text

ITEM_TYPES = ("raw_material", "finished_product", "semi_finished", "consumable")
ITEM_STATUSES = ("active", "inactive", "discontinued")

QUANTITY_MESSAGE = "Miktar 0 veya daha fazla olmalıdır"


class InventoryItemCreate(RequestSchema):
    """Inventory item creation schema."""
    name: non_empty("Malzeme adı gereklidir")
    code: non_empty("Malzeme kodu gereklidir")
    category: non_empty("Kategori gereklidir")
    type: one_of(ITEM_TYPES, "Tür gereklidir")
    quantity: non_negative(QUANTITY_MESSAGE)
    unit: non_empty("Birim gereklidir")
    min_stock: non_negative("Minimum stok 0 veya daha fazla olmalıdır")
    max_stock: non_negative("Maksimum stok 0 veya daha fazla olmalıdır")
    location: non_empty("Konum gereklidir")
    supplier: non_empty("Tedarikçi gereklidir")
    cost: non_negative("Maliyet 0 veya daha fazla olmalıdır")
    status: one_of(ITEM_STATUSES, "Durum gereklidir") = "active"
    project_id: optional_text() = None
    description: optional_text() = None
    specifications: optional_text() = None


InventoryItemUpdate = partial(InventoryItemCreate)


class InventoryStockUpdate(RequestSchema):
    """Body of the stock endpoint."""
    quantity: non_negative(QUANTITY_MESSAGE)


class InventoryItemResponse(RecordResponse):
    """Inventory item response schema."""
    name: str
    code: str
    category: str
    type: str
    quantity: float
    unit: str
    min_stock: float
    max_stock: float
    location: str
    supplier: str
    project_id: str | None = None
    description: str | None = None
    specifications: str | None = None
    cost: float
    status: str
    last_updated: datetime
