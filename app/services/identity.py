"""Sign-up, sign-in and session lifecycle."""

from __future__ import annotations

import json
import re
import secrets
import time
from dataclasses import asdict, dataclass
from datetime import UTC, datetime

import structlog
from werkzeug.security import check_password_hash, generate_password_hash

from app.core.exceptions import AuthenticationError, ValidationError
from app.repositories.interfaces import AccountRepository, AccountRow, KeyValueStore

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_PASSWORD_LENGTH = 6

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Identity:
    id: str
    email: str
    name: str | None = None


@dataclass(frozen=True)
class Session:
    token: str
    identity: Identity


class SessionStore:
    """Bearer tokens mapped to identities in the key-value store."""

    prefix = "session:"

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    def open(self, identity: Identity) -> Session:
        token = secrets.token_urlsafe(32)
        self._store.set(self.prefix + token, json.dumps(asdict(identity)))
        return Session(token=token, identity=identity)

    def load(self, token: str | None) -> Identity | None:
        if not token:
            return None
        raw = self._store.get(self.prefix + token)
        if raw is None:
            return None
        data = json.loads(raw)
        return Identity(id=data["id"], email=data["email"], name=data.get("name"))

    def close(self, token: str | None) -> None:
        if token:
            self._store.delete(self.prefix + token)


def _normalize_email(email: str | None) -> str:
    return (email or "").strip().lower()


def _new_identity_id() -> str:
    return f"user_{time.time_ns() // 1_000_000}_{secrets.token_hex(3)}"


class IdentityService:
    def __init__(self, accounts: AccountRepository, sessions: SessionStore) -> None:
        self._accounts = accounts
        self._sessions = sessions

    async def sign_up(
        self,
        *,
        email: str | None,
        password: str | None,
        name: str | None,
        confirm_password: str | None = None,
    ) -> Session:
        email_n = _normalize_email(email)
        name_n = (name or "").strip()
        if not email_n or not name_n:
            raise ValidationError("Please fill in all fields")
        if not EMAIL_PATTERN.match(email_n):
            raise ValidationError("Please enter a valid email address")
        if not password or (confirm_password is not None and not confirm_password):
            raise ValidationError("Please fill in all password fields")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
            )
        if confirm_password is not None and password != confirm_password:
            raise ValidationError("Passwords do not match")

        account = AccountRow(
            id=_new_identity_id(),
            email=email_n,
            name=name_n,
            password_hash=generate_password_hash(password),
            created_at=datetime.now(UTC),
        )
        await self._accounts.add(account)
        session = self._sessions.open(Identity(id=account.id, email=email_n, name=name_n))
        logger.info("user_signed_up", user_id=account.id)
        return session

    async def sign_in(self, *, email: str | None, password: str | None) -> Session:
        email_n = _normalize_email(email)
        if not email_n or not password:
            raise ValidationError("Please enter both email and password")

        account = await self._accounts.get_by_email(email_n)
        if account is None or not check_password_hash(account.password_hash, password):
            logger.info("user_sign_in_rejected", reason="invalid_credentials")
            raise AuthenticationError(
                "Failed to log in. Please check your credentials and try again."
            )
        session = self._sessions.open(
            Identity(id=account.id, email=account.email, name=account.name)
        )
        logger.info("user_signed_in", user_id=account.id)
        return session

    def sign_out(self, token: str | None) -> None:
        identity = self._sessions.load(token)
        self._sessions.close(token)
        if identity is not None:
            logger.info("user_signed_out", user_id=identity.id)

    def current_identity(self, token: str | None) -> Identity | None:
        return self._sessions.load(token)

    async def forgot_password(self, email: str | None) -> None:
        email_n = _normalize_email(email)
        if not email_n or not EMAIL_PATTERN.match(email_n):
            raise ValidationError("Please enter a valid email address")
        # No mail transport: the request is only recorded.
        account = await self._accounts.get_by_email(email_n)
        logger.info("password_reset_requested", known_account=account is not None)
