import datetime as dt
import logging
from functools import wraps
from typing import Any, Dict

import jwt
from flask import current_app, request
from werkzeug.security import check_password_hash, generate_password_hash

from healthstack.errors import AuthenticationError, InvalidToken

logger = logging.getLogger(__name__)

# Fixed cost: scrypt N=2**15, r=8, p=1
PASSWORD_HASH_METHOD = "scrypt:32768:8:1"
TOKEN_ALGORITHM = "HS256"


def hash_password(plain: str) -> str:
    return generate_password_hash(plain, method=PASSWORD_HASH_METHOD)


def verify_password(plain: str, password_hash: str) -> bool:
    return check_password_hash(password_hash, plain)


def create_token(user_id: int, email: str) -> str:
    now = dt.datetime.now(dt.timezone.utc)
    payload = {
        "sub": str(user_id),
        "email": email,
        "iat": int(now.timestamp()),
        "exp": int((now + dt.timedelta(days=current_app.config["JWT_EXPIRES_DAYS"])).timestamp()),
    }
    return jwt.encode(payload, current_app.config["JWT_SECRET"], algorithm=TOKEN_ALGORITHM)


def verify_token(token: str) -> Dict[str, Any]:
    """Decode a bearer token into ``{"userId", "email"}`` or raise InvalidToken."""
    try:
        payload = jwt.decode(token, current_app.config["JWT_SECRET"], algorithms=[TOKEN_ALGORITHM])
    except jwt.ExpiredSignatureError as exc:
        raise InvalidToken("Token expired") from exc
    except jwt.InvalidTokenError as exc:
        raise InvalidToken("Invalid token") from exc
    try:
        user_id = int(payload["sub"])
    except (KeyError, TypeError, ValueError) as exc:
        raise InvalidToken("Invalid token") from exc
    return {"userId": user_id, "email": payload.get("email")}


def require_auth(f):
    @wraps(f)
    def wrapper(*args, **kwargs):
        auth_header = request.headers.get("Authorization", "")
        if not auth_header.startswith("Bearer "):
            raise AuthenticationError("Missing Bearer token")
        token = auth_header.split(" ", 1)[1].strip()
        try:
            identity = verify_token(token)
        except InvalidToken as exc:
            logger.warning("Rejected bearer token on %s: %s", request.path, exc.message)
            raise
        request.user_id = identity["userId"]  # type: ignore
        return f(*args, **kwargs)
    return wrapper

__all__ = ["hash_password", "verify_password", "create_token", "verify_token", "require_auth"]
