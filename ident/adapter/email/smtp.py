"""SMTP invite notifier."""

import asyncio
import smtplib
import ssl
from email.message import EmailMessage
from email.utils import formatdate, make_msgid

import logfire

from ident.adapter.email.template import InviteEmailRenderer, RenderedEmail
from ident.adapter.error import NotifierError
from ident.config import EmailSettings, InvitesSettings
from ident.domain.service import InviteNotification, InviteNotifier
from ident.domain.value import Medium, redact_email


class EmailInviteNotifier(InviteNotifier):
    """Base class for email invite notifiers.

    Provides type distinction for dependency injection.
    """

    pass


class SmtpInviteNotifier(EmailInviteNotifier):
    """Sends invite emails over SMTP with implicit TLS.

    ``smtplib`` is blocking, so each delivery runs in a worker thread.
    """

    def __init__(
        self, email_settings: EmailSettings, invites_settings: InvitesSettings
    ) -> None:
        """Initialize SMTP notifier.

        Args:
            email_settings: Sender address and SMTP server configuration
            invites_settings: Subject and body templates

        Raises:
            NotifierError: If a configured template file cannot be read
        """
        self.settings = email_settings
        self.renderer = InviteEmailRenderer(invites_settings)

    async def deliver(self, notification: InviteNotification) -> None:
        """Send the invite email.

        Raises:
            NotifierError: If the medium is not email or sending failed
        """
        if notification.medium != Medium.EMAIL.value:
            raise NotifierError(f"Can't email an invite to medium {notification.medium}")

        recipient = redact_email(notification.address)
        with logfire.span("send_invite_email", to=recipient, room_id=notification.room_id):
            message = self.build_message(notification.address, self.renderer.render(notification))
            try:
                await asyncio.to_thread(self._send, message)
            except (smtplib.SMTPException, OSError) as e:
                logfire.error(
                    "Couldn't send 3PID invite email",
                    to=recipient,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise NotifierError(f"Couldn't send invite email: {e}") from e

            logfire.info("Invite email sent", to=recipient)

    def build_message(self, to: str, rendered: RenderedEmail) -> EmailMessage:
        """Build a multipart/alternative message from rendered content."""
        message = EmailMessage()
        message["Date"] = formatdate(localtime=False)
        message["From"] = self.settings.from_address
        message["To"] = to
        message["Subject"] = rendered.subject
        message["Message-ID"] = make_msgid()

        message.set_content(rendered.text)
        if rendered.html is not None:
            message.add_alternative(rendered.html, subtype="html")
        return message

    def _send(self, message: EmailMessage) -> None:
        smtp = self.settings.smtp
        if smtp.enable_tls:
            client: smtplib.SMTP = smtplib.SMTP_SSL(
                smtp.hostname,
                smtp.port,
                timeout=smtp.timeout,
                context=ssl.create_default_context(),
            )
        else:
            client = smtplib.SMTP(smtp.hostname, smtp.port, timeout=smtp.timeout)

        with client:
            if smtp.username and smtp.password:
                client.login(smtp.username, smtp.password)
            client.send_message(message)


class MockInviteNotifier(EmailInviteNotifier):
    """Records deliveries in memory instead of sending them.

    Set ``fail`` to make every delivery raise ``NotifierError``.
    """

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.delivered: list[InviteNotification] = []

    async def deliver(self, notification: InviteNotification) -> None:
        if self.fail:
            raise NotifierError("Mock notifier failure")
        self.delivered.append(notification)
