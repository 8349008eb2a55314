"""Admin sign‑in: exchange a Google ID token for an admin JWT."""

from fastapi import APIRouter, HTTPException

from rasya_api.app.schemas.auth import AdminLoginRequest, AdminLoginResponse
from rasya_api.app.services.auth_service import AdminLoginError, AuthService

router = APIRouter()


@router.post("/auth/admin", response_model=AdminLoginResponse, summary="Admin login with Google")
async def admin_login(data: AdminLoginRequest) -> AdminLoginResponse:
    try:
        token = await AuthService.login(data.id_token)
    except AdminLoginError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
    return AdminLoginResponse(token=token)
