"""
Authentication and account recovery flows.

AuthService ties together the credential store, the password hasher, the
recovery code ledger, the token issuer and the SMS notifier. It holds no
per-request state; each call takes the request's database session.
"""
from dataclasses import dataclass

from fastapi import BackgroundTasks
from sqlalchemy.orm import Session

from messagely.core import accounts, codes
from messagely.core.config import Settings
from messagely.core.errors import UnauthorizedError
from messagely.core.logger import get_logger
from messagely.core.notifier import Notifier, build_notifier, deliver_code
from messagely.core.security import PasswordHasher
from messagely.core.tokens import TokenIssuer

logger = get_logger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"
INVALID_CODE = "Invalid code or user"


@dataclass
class RecoveryIssued:
    username: str
    code: str


class AuthService:
    def __init__(self, hasher: PasswordHasher, tokens: TokenIssuer, notifier: Notifier):
        self.hasher = hasher
        self.tokens = tokens
        self.notifier = notifier

    @classmethod
    def from_settings(cls, settings: Settings, notifier: Notifier | None = None) -> "AuthService":
        return cls(
            hasher=PasswordHasher(settings.bcrypt_work_factor),
            tokens=TokenIssuer(
                settings.secret_key,
                algorithm=settings.algorithm,
                expire_minutes=settings.token_expire_minutes,
            ),
            notifier=notifier or build_notifier(settings),
        )

    def register(
        self,
        session: Session,
        username: str,
        password: str,
        first_name: str,
        last_name: str,
        phone: str,
    ) -> str:
        """Create the account and return a token for it."""
        password_hash = self.hasher.hash(password)
        account = accounts.register(
            session, username, password_hash, first_name, last_name, phone
        )
        logger.info(f"User registered: {account.username}")
        return self.tokens.issue(account.username)

    def login(self, session: Session, username: str, password: str) -> str:
        account = accounts.find_by_username(session, username)
        # Same error for unknown user and wrong password
        if account is None or not self.hasher.verify(password, account.password_hash):
            logger.warning(f"Login failed for username: {username}")
            raise UnauthorizedError(INVALID_CREDENTIALS)

        accounts.touch_login(session, username)
        logger.info(f"Login succeeded for user: {username}")
        return self.tokens.issue(username)

    def forgot_password(
        self,
        session: Session,
        username: str,
        background_tasks: BackgroundTasks,
    ) -> RecoveryIssued:
        """
        Issue a recovery code and queue its SMS delivery.

        The caller must already be authenticated as ``username``. Delivery
        runs after the response; its failure is logged, not raised.
        """
        account = accounts.get_account(session, username)
        code = codes.issue(session, username)
        background_tasks.add_task(
            deliver_code,
            self.notifier,
            username,
            account.phone,
            f"Your 6-digit code is {code}.",
        )
        logger.info(f"Recovery code issued for user: {username}")
        return RecoveryIssued(username=username, code=code)

    def reset_password(
        self,
        session: Session,
        username: str,
        code: str,
        new_password: str,
    ) -> str:
        if not codes.claim(session, username, code):
            logger.warning(f"Password reset rejected for username: {username}")
            raise UnauthorizedError(INVALID_CODE)

        accounts.set_password_hash(session, username, self.hasher.hash(new_password))
        logger.info(f"Password reset for user: {username}")
        return username
