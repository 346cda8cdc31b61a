"""
Outbound SMS notifications.

A notifier exposes ``send(to_phone, body) -> delivery_id``, which may raise,
and ``close()``, called when the application shuts down.
Recovery codes are delivered from a background task through deliver_code(),
which logs delivery failures instead of propagating them.
"""
import uuid
from typing import Protocol

import httpx

from messagely.core.config import Settings
from messagely.core.errors import NotificationError
from messagely.core.logger import get_logger

logger = get_logger(__name__)

TWILIO_API_BASE = "https://api.twilio.com/2010-04-01"


class Notifier(Protocol):
    def send(self, to_phone: str, body: str) -> str: ...

    def close(self) -> None: ...


class TwilioNotifier:
    """Sends SMS through the Twilio Messages REST API."""

    def __init__(
        self,
        account_sid: str,
        auth_token: str,
        from_number: str,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self.account_sid = account_sid
        self.from_number = from_number
        self._client = httpx.Client(
            base_url=TWILIO_API_BASE,
            auth=(account_sid, auth_token),
            timeout=timeout,
            transport=transport,
        )

    def send(self, to_phone: str, body: str) -> str:
        try:
            response = self._client.post(
                f"/Accounts/{self.account_sid}/Messages.json",
                data={"To": to_phone, "From": self.from_number, "Body": body},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise NotificationError(
                f"Twilio returned {exc.response.status_code} for {to_phone}"
            ) from exc
        except httpx.HTTPError as exc:
            raise NotificationError(f"Twilio request failed: {exc}") from exc

        return response.json()["sid"]

    def close(self) -> None:
        self._client.close()


class LoggingNotifier:
    """Stand-in used when no SMS provider is configured."""

    def send(self, to_phone: str, body: str) -> str:
        delivery_id = f"log-{uuid.uuid4().hex[:16]}"
        logger.info(f"SMS to {to_phone} not sent (no provider configured): {delivery_id}")
        return delivery_id

    def close(self) -> None:
        pass


def build_notifier(settings: Settings) -> Notifier:
    if settings.sms_enabled:
        return TwilioNotifier(
            settings.twilio_account_sid,
            settings.twilio_auth_token,
            settings.twilio_from_number,
        )
    logger.warning("Twilio credentials not configured; SMS delivery disabled")
    return LoggingNotifier()


def deliver_code(notifier: Notifier, username: str, to_phone: str, body: str) -> None:
    """Background task: send a recovery code, logging the outcome."""
    try:
        delivery_id = notifier.send(to_phone, body)
    except Exception:
        logger.exception(f"Recovery code delivery failed for user: {username}")
        return
    logger.info(f"Recovery code delivered for user: {username} ({delivery_id})")
