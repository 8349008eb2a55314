"""
Audit log endpoint.

Lists the admin actions recorded by ``AuditService`` (newest first),
optionally limited to one object type such as ``order`` or
``taper_otp``.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from rasya_api.app.core.security import require_admin
from rasya_api.app.services.audit_service import AuditService

admin_router = APIRouter()


@admin_router.get("/audit", summary="Audit log")
async def list_audit_logs(
    object_type: Optional[str] = Query(None, description="Filter by object type (service, order, porto, ...)"),
    limit: int = Query(100, ge=1, le=500, description="Maximum number of records"),
    admin: dict = Depends(require_admin),
) -> Dict[str, Any]:
    logs: List[dict] = await AuditService.list_logs(object_type=object_type, limit=limit)
    return {"ok": True, "logs": logs}
