"""Authentication service - registration, login and bearer tokens.

Passwords are hashed with Django's configured password hashers. Tokens are
signed payloads (``django.core.signing``) carrying the user id; they expire
after ``token_max_age`` seconds.
"""

import logging

from django.contrib.auth.hashers import check_password, make_password
from django.core import signing

from bookings.domain import Identity, NewUser, Role, User, UserId
from bookings.domain.errors import (
    EmailTakenError,
    InvalidCredentialsError,
    InvalidUserDataError,
    MissingFieldsError,
    UnauthenticatedError,
)
from bookings.stores.interfaces import UserStore

logger = logging.getLogger(__name__)

TOKEN_SALT = "bookings.auth.token"
MIN_PASSWORD_LENGTH = 6
SELF_SERVICE_ROLES = (Role.STUDENT, Role.FACULTY)


class AuthService:
    """Issues and resolves bearer tokens for users."""

    def __init__(self, users: UserStore, token_max_age: int) -> None:
        self._users = users
        self._token_max_age = token_max_age

    def register(
        self,
        name: str | None,
        email: str | None,
        password: str | None,
        role: str | None = None,
    ) -> tuple[Identity, str]:
        """Create a student or faculty account and return it with a token.

        Raises:
            MissingFieldsError: If name, email or password is blank.
            InvalidUserDataError: If the email, password or role is invalid.
            EmailTakenError: If the email is already registered.
        """
        parsed_role = Role.STUDENT
        if role:
            try:
                parsed_role = Role(role.strip().lower())
            except ValueError:
                parsed_role = None
            if parsed_role not in SELF_SERVICE_ROLES:
                allowed = ", ".join(r.value for r in SELF_SERVICE_ROLES)
                raise InvalidUserDataError(f"Role must be one of: {allowed}")
        user = self._create(name, email, password, parsed_role)
        return user.identity, self.issue_token(user.identity)

    def create_admin(self, name: str, email: str, password: str) -> Identity:
        """Create an administrator account. Not reachable over HTTP."""
        return self._create(name, email, password, Role.ADMIN).identity

    def login(self, email: str | None, password: str | None) -> tuple[Identity, str]:
        """Verify credentials and return the identity with a fresh token.

        Raises:
            MissingFieldsError: If email or password is blank.
            InvalidCredentialsError: If the email is unknown or the password wrong.
        """
        missing = [
            field for field, value in (("email", email), ("password", password))
            if not value or not value.strip()
        ]
        if missing:
            raise MissingFieldsError(missing)

        user = self._users.get_user_by_email(email)
        if user is None or not check_password(password, user.password_hash):
            logger.info("Failed login for %s", email.strip().lower())
            raise InvalidCredentialsError()
        return user.identity, self.issue_token(user.identity)

    def issue_token(self, identity: Identity) -> str:
        return signing.dumps({"id": str(identity.id)}, salt=TOKEN_SALT)

    def resolve(self, token: str) -> Identity:
        """Return the identity embedded in token.

        Raises:
            UnauthenticatedError: If the token is malformed, tampered with,
                expired, or names a user that no longer exists.
        """
        try:
            payload = signing.loads(token, salt=TOKEN_SALT, max_age=self._token_max_age)
            user_id = UserId.from_string(payload["id"])
        except signing.SignatureExpired:
            raise UnauthenticatedError("Not authorized, token expired") from None
        except (signing.BadSignature, KeyError, TypeError, ValueError):
            raise UnauthenticatedError() from None

        user = self._users.get_user(user_id)
        if user is None:
            raise UnauthenticatedError("User not found")
        return user.identity

    def _create(
        self, name: str | None, email: str | None, password: str | None, role: Role
    ) -> User:
        missing = [
            field for field, value in (("name", name), ("email", email), ("password", password))
            if not value or not value.strip()
        ]
        if missing:
            raise MissingFieldsError(missing)

        normalized_email = email.strip().lower()
        if "@" not in normalized_email:
            raise InvalidUserDataError("Please provide a valid email")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise InvalidUserDataError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )
        if self._users.get_user_by_email(normalized_email) is not None:
            raise EmailTakenError()

        user = self._users.create_user(
            NewUser(
                name=name.strip(),
                email=normalized_email,
                password_hash=make_password(password),
                role=role,
            )
        )
        logger.info("Registered user %s with role %s", user.id, user.role.value)
        return user
