"""
Email Notifier

Best-effort outbound email. Providers turn delivery problems into a
``DeliveryResult`` instead of raising, and ``EmailDispatcher`` runs them on
a background thread pool so callers never wait for the SMTP round trip.
"""

import logging
import smtplib
import ssl
import uuid
from abc import ABC, abstractmethod
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import datetime
from email.mime.text import MIMEText
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class DeliveryStatus(str, Enum):
    """Email delivery status."""
    SENT = "sent"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass
class EmailMessage:
    """Plain text email to be sent."""
    to: str
    subject: str
    body_text: str

    def validate(self) -> bool:
        if not self.to:
            raise ValueError("Recipient email (to) is required")
        if not self.subject:
            raise ValueError("Subject is required")
        if not self.body_text:
            raise ValueError("Body is required")
        return True


@dataclass
class DeliveryResult:
    """Result of an email delivery attempt."""
    success: bool
    status: DeliveryStatus
    provider: Optional[str] = None
    message_id: Optional[str] = None
    error_message: Optional[str] = None
    error_code: Optional[str] = None
    timestamp: datetime = field(default_factory=datetime.utcnow)


class EmailProvider(ABC):
    """Interface every outbound email transport implements."""

    @property
    @abstractmethod
    def provider_name(self) -> str: ...

    @abstractmethod
    def is_configured(self) -> bool: ...

    @abstractmethod
    def send(self, message: EmailMessage) -> DeliveryResult: ...


class NullEmailProvider(EmailProvider):
    """Used when no SMTP server is configured; drops every message."""

    @property
    def provider_name(self) -> str:
        return "null"

    def is_configured(self) -> bool:
        return False

    def send(self, message: EmailMessage) -> DeliveryResult:
        logger.info(f"Email disabled, not sending '{message.subject}' to {message.to}")
        return DeliveryResult(
            success=False,
            status=DeliveryStatus.SKIPPED,
            provider=self.provider_name,
            error_code="NOT_CONFIGURED",
        )


class SMTPEmailProvider(EmailProvider):
    """SMTP provider using STARTTLS and optional login."""

    def __init__(
        self,
        host: Optional[str],
        port: int = 587,
        username: Optional[str] = None,
        password: Optional[str] = None,
        use_tls: bool = True,
        from_email: str = "noreply@ewaste.local",
        timeout: int = 10,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.use_tls = use_tls
        self.from_email = from_email
        self.timeout = timeout

    @property
    def provider_name(self) -> str:
        return "smtp"

    def is_configured(self) -> bool:
        return bool(self.host)

    def _failure(self, code: str, message: str) -> DeliveryResult:
        return DeliveryResult(
            success=False,
            status=DeliveryStatus.FAILED,
            provider=self.provider_name,
            error_message=message,
            error_code=code,
        )

    def send(self, message: EmailMessage) -> DeliveryResult:
        if not self.is_configured():
            return self._failure("NOT_CONFIGURED", "SMTP not configured (missing SMTP_HOST)")

        try:
            message.validate()
        except ValueError as e:
            return self._failure("INVALID_MESSAGE", str(e))

        msg = MIMEText(message.body_text, "plain", "utf-8")
        msg["From"] = self.from_email
        msg["To"] = message.to
        msg["Subject"] = message.subject

        try:
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
                if self.use_tls:
                    server.starttls(context=ssl.create_default_context())
                if self.username and self.password:
                    server.login(self.username, self.password)
                server.sendmail(self.from_email, [message.to], msg.as_string())
        except smtplib.SMTPAuthenticationError as e:
            logger.error(f"SMTP auth error: {e}")
            return self._failure("AUTH_ERROR", f"SMTP authentication failed: {e}")
        except smtplib.SMTPRecipientsRefused as e:
            logger.error(f"SMTP recipients refused: {e}")
            return self._failure("RECIPIENT_REFUSED", f"Recipient refused: {e}")
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"SMTP error sending to {message.to}: {e}")
            return self._failure("SMTP_ERROR", str(e))

        return DeliveryResult(
            success=True,
            status=DeliveryStatus.SENT,
            provider=self.provider_name,
            message_id=f"smtp-{uuid.uuid4()}",
        )


class EmailDispatcher:
    """Fire-and-forget email sending on a small thread pool."""

    def __init__(self, provider: EmailProvider, max_workers: int = 2):
        self.provider = provider
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="email"
        )

    def dispatch(self, message: EmailMessage) -> Future:
        """Queue a message and return immediately."""
        future = self._executor.submit(self.provider.send, message)
        future.add_done_callback(lambda f: self._log_outcome(message, f))
        return future

    def _log_outcome(self, message: EmailMessage, future: Future) -> None:
        error = future.exception()
        if error is not None:
            logger.error(
                f"Email to {message.to} crashed in {self.provider.provider_name}: {error}",
                exc_info=error,
            )
            return

        result = future.result()
        if result.success:
            logger.info(f"Email sent to {message.to} ({result.message_id})")
        elif result.status == DeliveryStatus.SKIPPED:
            logger.debug(f"Email to {message.to} skipped: {result.error_code}")
        else:
            logger.warning(
                f"Email to {message.to} failed [{result.error_code}]: {result.error_message}"
            )

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)


def build_email_provider(settings) -> EmailProvider:
    """Pick the provider for the given settings."""
    if not settings.smtp_host:
        return NullEmailProvider()
    return SMTPEmailProvider(
        host=settings.smtp_host,
        port=settings.smtp_port,
        username=settings.smtp_username,
        password=settings.smtp_password,
        use_tls=settings.smtp_use_tls,
        from_email=settings.email_from,
        timeout=settings.smtp_timeout,
    )
