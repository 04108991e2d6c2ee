import logging
import time
from collections import defaultdict

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from inventory.database import get_db
from inventory.models.user import User
from inventory.schemas.user import UserCreate, UserResponse, LoginRequest, LoginResponse
from inventory.security import create_access_token, get_current_user
import inventory.services.user_service as svc

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])

# ── Rate limiting (in-memory, per IP) ──────────────────────────────────────
_login_attempts: dict[str, list[float]] = defaultdict(list)
_RATE_LIMIT_WINDOW = 60   # seconds
_RATE_LIMIT_MAX = 10      # max attempts per window


def _prune_stale(now: float) -> None:
    stale = [ip for ip, ts in _login_attempts.items() if not ts or now - ts[-1] >= _RATE_LIMIT_WINDOW]
    for ip in stale:
        del _login_attempts[ip]


def _check_rate_limit(ip: str) -> bool:
    now = time.time()
    _prune_stale(now)
    _login_attempts[ip] = [t for t in _login_attempts[ip] if now - t < _RATE_LIMIT_WINDOW]
    if len(_login_attempts[ip]) >= _RATE_LIMIT_MAX:
        return False
    _login_attempts[ip].append(now)
    return True


def _reset_rate_limit(ip: str) -> None:
    """Clear failed attempts after successful login."""
    _login_attempts.pop(ip, None)


@router.post("/signup", response_model=UserResponse, status_code=201)
def signup(data: UserCreate, db: Session = Depends(get_db)):
    user = svc.create_user(db, data)
    logger.info("AUDIT: account '%s' created (role=%s)", user.username, user.role.value)
    return user


@router.post("/login", response_model=LoginResponse)
def login(data: LoginRequest, request: Request, db: Session = Depends(get_db)):
    ip = request.client.host if request.client else "unknown"
    if not _check_rate_limit(ip):
        logger.warning("AUDIT: login rate limit hit for '%s' from IP %s", data.username, ip)
        raise HTTPException(status_code=429, detail="Too many login attempts. Try again later.")

    user = svc.authenticate(db, data.username, data.password)
    if not user:
        logger.warning("AUDIT: failed login for '%s' from IP %s", data.username, ip)
        raise HTTPException(status_code=401, detail="Invalid username or password")

    _reset_rate_limit(ip)
    logger.info("AUDIT: login '%s' (role=%s) from IP %s", user.username, user.role.value, ip)
    return {"token": create_access_token(user), "user": user}


@router.get("/me", response_model=UserResponse)
def me(user: User = Depends(get_current_user)):
    return user
