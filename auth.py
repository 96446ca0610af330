"""
Mock identity check. Admin access hinges on one fixed email/password pair;
anyone else may log in or sign up as a regular user.
"""
import logging
import uuid

from ledger import MoveoError, ValidationError
from models import Role, User

logger = logging.getLogger(__name__)


class AuthError(MoveoError):
    def __init__(self, message: str, status: int = 401):
        super().__init__(message)
        self.status = status


def _new_user(email: str, role: Role) -> User:
    return User(uid=f"user-{uuid.uuid4().hex[:12]}", email=email, role=role)


def _require(email: str, password: str):
    missing = [name for name, value in (("email", email), ("password", password)) if not value]
    if missing:
        raise ValidationError(f"Missing fields: {', '.join(missing)}")


def login(email: str, password: str, role, admin_email: str, admin_password: str) -> User:
    email = (email or "").strip()
    _require(email, password)
    try:
        role = Role(role or Role.USER.value)
    except ValueError:
        raise ValidationError(f"Unknown role: {role}") from None

    if role is Role.ADMIN:
        if email != admin_email:
            logger.warning("Rejected admin login for %s", email)
            raise AuthError(f"Invalid admin credentials. Use '{admin_email}'.")
        if password != admin_password:
            logger.warning("Rejected admin password for %s", email)
            raise AuthError(f"Invalid admin password. Use '{admin_password}'.")

    user = _new_user(email, role)
    logger.info("Logged in %s as %s", email, role.value)
    return user


def signup(email: str, password: str) -> User:
    email = (email or "").strip()
    _require(email, password)
    user = _new_user(email, Role.USER)
    logger.info("Created account for %s", email)
    return user
