"""Unit tests for the demo sign-in stub."""

import pytest

from nexchat.auth import AuthError, authenticate, register


class TestAuthenticate:
    def test_demo_account_accepted(self) -> None:
        user = authenticate("test@example.com", "password")

        assert user.name == "Test User"

    @pytest.mark.parametrize(
        ("email", "password"),
        [("test@example.com", "wrong"), ("other@example.com", "password"), ("", "")],
    )
    def test_other_credentials_rejected(self, email: str, password: str) -> None:
        with pytest.raises(AuthError, match="Invalid credentials"):
            authenticate(email, password)


class TestRegister:
    def test_valid_signup(self) -> None:
        user = register(" Ada ", "ada@example.com", "secret1")

        assert (user.name, user.email) == ("Ada", "ada@example.com")

    def test_missing_field_rejected(self) -> None:
        with pytest.raises(AuthError, match="All fields"):
            register("", "ada@example.com", "secret1")

    def test_short_password_rejected(self) -> None:
        with pytest.raises(AuthError, match="at least 6"):
            register("Ada", "ada@example.com", "12345")
