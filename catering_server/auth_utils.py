"""
Authentication utilities: JWT handling and security dependencies.

Tokens are issued by the accounts service; this API only decodes them.
"""
import logging
from datetime import datetime, timedelta
from typing import Optional
from jose import jwt, JWTError
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from .config import settings
from .db import get_db
from .models.user import User, UserType

logger = logging.getLogger(__name__)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/login")
optional_oauth2_scheme = OAuth2PasswordBearer(
    tokenUrl="auth/login", auto_error=False)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """
    Create JWT access token

    Args:
        data: Dictionary containing user data (must include 'sub' for user_id
              and 'type' for the account type)
        expires_delta: Optional custom expiration time

    Returns:
        Encoded JWT token as string
    """
    to_encode = data.copy()
    expire = datetime.utcnow() + (expires_delta or timedelta(
        minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({"exp": expire, "iat": datetime.utcnow()})

    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def token_for(user: User) -> str:
    return create_access_token({"sub": str(user.id), "type": user.type.value})


def _user_from_token(db: Session, token: str) -> User:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    try:
        payload = jwt.decode(token, settings.SECRET_KEY,
                             algorithms=[settings.ALGORITHM])
        user_id = payload.get("sub")
        if user_id is None:
            raise credentials_exception
        user_id = int(user_id)
    except (JWTError, ValueError, TypeError) as e:
        logger.debug(f"Rejected token: {e}")
        raise credentials_exception

    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


def get_current_user(
    db: Session = Depends(get_db),
    token: str = Depends(oauth2_scheme)
) -> User:
    """
    Get current user from JWT token

    Raises:
        HTTPException: If token is invalid or user not found
    """
    return _user_from_token(db, token)


def get_optional_user(
    db: Session = Depends(get_db),
    token: Optional[str] = Depends(optional_oauth2_scheme)
) -> Optional[User]:
    """Current user when a token is sent, None for anonymous requests"""
    if not token:
        return None
    return _user_from_token(db, token)


def require_type(*required_types):
    """
    Dependency factory for account-type access control

    Example:
        @router.get("/caterer/dishes")
        def list_dishes(current = Depends(require_type(UserType.CATERER))):
            ...
    """
    def _require_type(current_user: User = Depends(get_current_user)) -> User:
        if current_user.type not in required_types:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Insufficient permissions. Required account types: "
                       f"{[t.value for t in required_types]}"
            )
        return current_user

    return _require_type


caterer_required = require_type(UserType.CATERER)
buyer_required = require_type(UserType.USER)
