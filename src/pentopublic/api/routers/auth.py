"""Login and registration endpoints."""
from fastapi import APIRouter, Depends
from pentopublic.api.deps import get_auth_service
from pentopublic.api.schemas.auth import AuthSession, LoginRequest, RegisterRequest, RegisterResponse
from pentopublic.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=AuthSession)
def login(payload: LoginRequest, svc: AuthService = Depends(get_auth_service)) -> AuthSession:
    return svc.login(payload)


@router.post("/register", response_model=RegisterResponse, status_code=201)
def register(payload: RegisterRequest, svc: AuthService = Depends(get_auth_service)) -> RegisterResponse:
    return svc.register(payload)
