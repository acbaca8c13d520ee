from typing import Optional
from fastapi import APIRouter, Depends, Header
from sqlmodel import Session
from pydantic import BaseModel

from storefront.core.config import Settings
from storefront.core.deps import get_settings
from storefront.core.errors import InvalidToken, Unauthorized
from storefront.core.logging import get_logger
from storefront.db.session import get_session
from storefront.services.auth import AuthService
from storefront.services.credentials import CredentialStore
from storefront.services.passwords import PasswordPolicy
from storefront.services.tokens import TokenService

router = APIRouter()
logger = get_logger(__name__)


class SignupRequest(BaseModel):
    username: Optional[str] = None
    email: str
    password: str

class LoginRequest(BaseModel):
    email: str
    password: str

class TokenResponse(BaseModel):
    success: bool
    token: str


def get_token_service(settings: Settings = Depends(get_settings)) -> TokenService:
    return TokenService(settings.SECRET_KEY, settings.ALGORITHM)

def get_password_policy(settings: Settings = Depends(get_settings)) -> PasswordPolicy:
    return PasswordPolicy(hashing=settings.HASH_PASSWORDS)

def get_credential_store(session: Session = Depends(get_session)) -> CredentialStore:
    return CredentialStore(session)

def get_auth_service(
    store: CredentialStore = Depends(get_credential_store),
    tokens: TokenService = Depends(get_token_service),
    passwords: PasswordPolicy = Depends(get_password_policy),
    settings: Settings = Depends(get_settings),
) -> AuthService:
    return AuthService(store, tokens, passwords, cart_seed_size=settings.CART_SEED_SIZE)


def get_current_user_id(
    auth_token: Optional[str] = Header(default=None, alias="auth-token"),
    tokens: TokenService = Depends(get_token_service),
) -> str:
    """Resolve the ``auth-token`` header to a user id or reject with 401.

    Only the signature is checked; whether the user still exists is up to
    the service that uses the id.
    """
    if not auth_token:
        raise Unauthorized("Please authenticate using valid token")
    try:
        return tokens.verify(auth_token)
    except InvalidToken as exc:
        logger.info("auth.token_rejected", reason=exc.message)
        raise Unauthorized("Please authenticate using a valid token") from exc


@router.post("/signup", response_model=TokenResponse)
def signup(payload: SignupRequest, service: AuthService = Depends(get_auth_service)):
    token = service.signup(payload.username, payload.email, payload.password)
    return {"success": True, "token": token}

@router.post("/login", response_model=TokenResponse)
def login(payload: LoginRequest, service: AuthService = Depends(get_auth_service)):
    token = service.login(payload.email, payload.password)
    return {"success": True, "token": token}
