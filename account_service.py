from __future__ import annotations

import structlog

from models import UserAccount

logger = structlog.get_logger(__name__)


class AccountHolder:
    """Hold the single signed-in profile for this process.

    Credentials are stored as given and never checked. ``sign_in`` accepts
    any email/password pair; it is a placeholder until real authentication
    is decided on.
    """

    def __init__(self) -> None:
        self.current: UserAccount | None = None

    @property
    def is_signed_in(self) -> bool:
        return self.current is not None

    def sign_up(self, username: str, email: str, password: str) -> UserAccount:
        self.current = UserAccount(username=username, email=email, password=password)
        logger.info("signed_up", email=email)
        return self.current

    def sign_in(self, email: str, password: str) -> UserAccount:
        self.current = UserAccount(username="", email=email, password=password)
        logger.warning("sign_in_unverified", email=email)
        return self.current

    def sign_out(self) -> None:
        self.current = None
        logger.info("signed_out")
