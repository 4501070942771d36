"""Demo sign-in stub.

There is no user store. Login accepts one hardcoded account and sign-up
only validates the form.
"""

from pydantic import BaseModel

DEMO_EMAIL = "test@example.com"
DEMO_PASSWORD = "password"
DEMO_NAME = "Test User"
MIN_PASSWORD_LENGTH = 6


class User(BaseModel):
    email: str
    name: str


class AuthError(Exception):
    """Raised when credentials or sign-up fields are rejected."""


def authenticate(email: str, password: str) -> User:
    """Log in with the demo account.

    Raises:
        AuthError: For any other credentials.
    """
    if email.strip() == DEMO_EMAIL and password == DEMO_PASSWORD:
        return User(email=DEMO_EMAIL, name=DEMO_NAME)
    raise AuthError("Invalid credentials")


def register(name: str, email: str, password: str) -> User:
    """Sign up a user for this browser session only.

    Raises:
        AuthError: If a field is missing or the password is too short.
    """
    if not name.strip() or not email.strip() or not password:
        raise AuthError("All fields are required")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise AuthError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    return User(email=email.strip(), name=name.strip())
