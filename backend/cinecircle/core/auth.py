import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from cinecircle.core.config import get_settings
from cinecircle.core.exceptions import UnauthenticatedException, handle_exception
from cinecircle.db import get_db

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)

@dataclass
class Identity:
    """Caller as resolved from the identity provider's token"""
    user_id: str
    display_name: Optional[str] = None
    avatar_url: Optional[str] = None

def _display_name_from_claims(payload: dict) -> Optional[str]:
    if payload.get("name"):
        return payload["name"]
    full_name = f"{payload.get('given_name') or ''} {payload.get('family_name') or ''}".strip()
    if full_name:
        return full_name
    if payload.get("preferred_username"):
        return payload["preferred_username"]
    email = payload.get("email")
    if email:
        return email.split("@")[0]
    return None

def decode_identity(token: str) -> Identity:
    """Decode a bearer token into an Identity"""
    settings = get_settings()
    options = {"verify_aud": settings.TOKEN_AUDIENCE is not None}
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM],
            audience=settings.TOKEN_AUDIENCE,
            options=options,
        )
    except JWTError as e:
        logger.warning(f"Rejected token: {str(e)}")
        raise UnauthenticatedException("Invalid token")

    user_id = payload.get("sub")
    if not user_id:
        raise UnauthenticatedException("Invalid token")
    return Identity(
        user_id=str(user_id),
        display_name=_display_name_from_claims(payload),
        avatar_url=payload.get("picture"),
    )

def create_access_token(data: dict, secret_key: Optional[str] = None) -> str:
    """Mint a token the way the identity provider does (used by tests and local tooling)"""
    settings = get_settings()
    return jwt.encode(data, secret_key or settings.SECRET_KEY, algorithm=settings.ALGORITHM)

def _bootstrap(identity: Identity, db: Session) -> None:
    from cinecircle.services.profile_service import ProfileService
    ProfileService(db).ensure_profile(identity)

def get_token_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Identity:
    """Resolve the caller from the bearer token or reject with 401"""
    try:
        if credentials is None or not credentials.credentials:
            raise UnauthenticatedException()
        return decode_identity(credentials.credentials)
    except Exception as e:
        raise handle_exception(e)

def get_current_identity(
    identity: Identity = Depends(get_token_identity),
    db: Session = Depends(get_db),
) -> Identity:
    """Resolve the caller, bootstrapping the profile on first sight"""
    try:
        _bootstrap(identity, db)
        return identity
    except Exception as e:
        raise handle_exception(e)

def get_current_user(identity: Identity = Depends(get_current_identity)) -> str:
    """Get current user id"""
    return identity.user_id

def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> Optional[str]:
    """Current user id when a valid token is present, otherwise None"""
    if credentials is None or not credentials.credentials:
        return None
    try:
        identity = decode_identity(credentials.credentials)
    except UnauthenticatedException:
        return None
    try:
        _bootstrap(identity, db)
    except Exception as e:
        raise handle_exception(e)
    return identity.user_id
