import pytest

from auth import AuthError, login, signup
from ledger import ValidationError
from models import Role

ADMIN = ("admin@moveo.com", "admin123")


def test_user_login_accepts_any_credentials():
    user = login("rider@example.com", "whatever", "user", *ADMIN)
    assert user.role is Role.USER
    assert user.uid.startswith("user-")
    assert not user.is_admin


def test_admin_login_with_fixed_credentials():
    user = login("admin@moveo.com", "admin123", "admin", *ADMIN)
    assert user.is_admin


@pytest.mark.parametrize("email, password, message", [
    ("boss@moveo.com", "admin123", "Invalid admin credentials. Use 'admin@moveo.com'."),
    ("admin@moveo.com", "letmein", "Invalid admin password. Use 'admin123'."),
])
def test_admin_login_rejected(email, password, message):
    with pytest.raises(AuthError) as exc:
        login(email, password, "admin", *ADMIN)
    assert exc.value.message == message
    assert exc.value.status == 401


def test_login_requires_email_and_password():
    with pytest.raises(ValidationError):
        login("", "", "user", *ADMIN)


def test_unknown_role():
    with pytest.raises(ValidationError):
        login("a@b.c", "pw", "root", *ADMIN)


def test_signup_is_always_a_user():
    first, second = signup("new@example.com", "pw"), signup("new@example.com", "pw")
    assert first.role is Role.USER
    assert first.uid != second.uid
