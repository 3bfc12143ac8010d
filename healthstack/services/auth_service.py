import logging
from functools import lru_cache
from typing import Optional

from sqlalchemy.exc import IntegrityError

from healthstack.extensions import db
from healthstack.models.user import User
from healthstack.utils.auth import hash_password, verify_password

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _dummy_password_hash() -> str:
    return hash_password("healthstack-unknown-user")


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def register_user(email: str, password: str, name: str) -> Optional[User]:
    """Create a user, or return None when the email is already registered."""
    email = normalize_email(email)
    if User.query.filter_by(email=email).first():
        return None
    user = User(email=email, name=name.strip(), password_hash=hash_password(password))
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration of the same email
        db.session.rollback()
        return None
    logger.info("registered user id=%s", user.id)
    return user


def authenticate(email: str, password: str) -> Optional[User]:
    user = User.query.filter_by(email=normalize_email(email)).first()
    # Unknown emails are checked against a dummy hash as well
    password_hash = user.password_hash if user is not None else _dummy_password_hash()
    if not verify_password(password, password_hash) or user is None:
        logger.warning("failed login attempt")
        return None
    return user


def get_user(user_id: int) -> Optional[User]:
    return db.session.get(User, user_id)
