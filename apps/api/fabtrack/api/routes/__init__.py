"""
API routes aggregation.
"""

from fastapi import APIRouter

from .auth import router as auth_router
from .projects import router as projects_router
from .work_orders import router as work_orders_router
from .personnel import router as personnel_router
from .shipments import router as shipments_router
from .spools import router as spools_router
from .inventory import router as inventory_router
from .audit_logs import router as audit_logs_router

router = APIRouter()

router.include_router(auth_router, prefix="/auth", tags=["auth"])
router.include_router(projects_router, prefix="/projects", tags=["projects"])
router.include_router(work_orders_router, prefix="/work-orders", tags=["work-orders"])
router.include_router(personnel_router, prefix="/personnel", tags=["personnel"])
router.include_router(shipments_router, prefix="/shipments", tags=["shipments"])
router.include_router(spools_router, prefix="/spools", tags=["spools"])
router.include_router(inventory_router, prefix="/inventory", tags=["inventory"])
router.include_router(audit_logs_router, prefix="/audit-logs", tags=["audit-logs"])
