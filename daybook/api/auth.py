"""
Authentication API
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Header, HTTPException

from daybook.api.dependencies import bearer_token, get_auth_service
from daybook.models.schemas import LoginRequest, RegisterRequest
from daybook.models.user import Session
from daybook.services.auth_service import AuthService

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=Session)
async def register(body: RegisterRequest, auth: AuthService = Depends(get_auth_service)) -> Session:
    session = await auth.register(body.email, body.password, body.name)
    if session is None:
        raise HTTPException(status_code=409, detail="Email already registered or store unavailable")
    return session


@router.post("/login", response_model=Session)
async def login(body: LoginRequest, auth: AuthService = Depends(get_auth_service)) -> Session:
    session = await auth.login(body.email, body.password)
    if session is None:
        raise HTTPException(status_code=401, detail="Invalid email or password")
    return session


@router.post("/guest", response_model=Session)
async def guest(auth: AuthService = Depends(get_auth_service)) -> Session:
    return auth.guest()


@router.post("/logout")
async def logout(authorization: Optional[str] = Header(default=None),
                 auth: AuthService = Depends(get_auth_service)) -> Dict[str, Any]:
    return {"signed_out": auth.logout(bearer_token(authorization))}
