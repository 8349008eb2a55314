"""
Top‑level router for version 1 of the API.

Public routers are included as they are; every ``admin_router`` is
mounted under ``/admin`` and guarded by ``require_admin``.  When a new
domain is added, include its routers here.
"""

from fastapi import APIRouter, Depends

from rasya_api.app.core.security import require_admin

from .endpoints import (
    agreement,
    analitik,
    audit,
    auth,
    donations,
    orders,
    porto,
    previews,
    revisi,
    services,
    taper,
)

router = APIRouter()

router.include_router(auth.router, tags=["auth"])
router.include_router(donations.router, tags=["donations"])
router.include_router(services.router, tags=["services"])
router.include_router(porto.router, tags=["porto"])
router.include_router(orders.router, tags=["orders"])
router.include_router(revisi.router, tags=["revisi"])
router.include_router(analitik.router, tags=["analitik"])
router.include_router(taper.router, tags=["taper"])
router.include_router(previews.router, tags=["previews"])

admin = APIRouter(prefix="/admin", dependencies=[Depends(require_admin)])
admin.include_router(donations.admin_router, tags=["admin"])
admin.include_router(services.admin_router, tags=["admin"])
admin.include_router(porto.admin_router, tags=["admin"])
admin.include_router(orders.admin_router, tags=["admin"])
admin.include_router(analitik.admin_router, tags=["admin"])
admin.include_router(taper.admin_router, tags=["admin"])
admin.include_router(agreement.admin_router, tags=["admin"])
admin.include_router(audit.admin_router, tags=["admin"])

router.include_router(admin)
