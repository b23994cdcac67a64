from fastapi import APIRouter, Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from core.database import DocumentStore, get_store
from core.errors import storage_failure
from core.security import decode_token
from schemas.auth import LoginIn, RegisterIn, TokenPayload
from services.auth_services import AuthService

router = APIRouter(prefix="/api", tags=["auth"])

_bearer = HTTPBearer(auto_error=False)


async def access_token_required(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
) -> TokenPayload:
    """Resolve the bearer token to the caller; ``payload.sub`` is the username."""
    token = credentials.credentials if credentials else None
    return TokenPayload.model_validate(decode_token(token))


@router.post("/register")
async def post_reg(data: RegisterIn, store: DocumentStore = Depends(get_store)):
    svc = AuthService(store)
    with storage_failure("Failed to register user"):
        _, token = svc.register(username=data.username, password=data.password)
    return {"success": True, "message": "User registered successfully", "token": token}


@router.post("/login")
async def post_login(data: LoginIn, store: DocumentStore = Depends(get_store)):
    svc = AuthService(store)
    with storage_failure("Failed to login"):
        user, token = svc.login(username=data.username, password=data.password)
    return {
        "success": True,
        "message": "Login successful",
        "token": token,
        "user": {"username": user.username},
    }


@router.get("/health", dependencies=[Depends(access_token_required)])
async def health():
    return {"success": True, "message": "API is running"}
