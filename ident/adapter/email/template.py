"""Invite email rendering.

Templates use ``string.Template`` placeholders (``$token``, ``${room_name}``).
Available names are the fields of ``InviteNotification``; a missing
``sender_display_name`` falls back to ``sender`` and a missing ``room_name``
to ``room_id``. Unknown placeholders are left as they are.
"""

import html
from dataclasses import dataclass
from pathlib import Path
from string import Template

from ident.adapter.error import NotifierError
from ident.config import InvitesSettings
from ident.domain.service import InviteNotification

DEFAULT_TEXT_TEMPLATE = """\
Hi,

$sender_display_name has invited you to join the room $room_name on Matrix.

To accept the invite, register on a Matrix homeserver using this email
address, then join the room. Your client will need the following:

    Token: $token
    Private key: $ephemeral_private_key
    Identity server: $base_url
"""


@dataclass(frozen=True)
class RenderedEmail:
    """Subject and bodies of an invite email."""

    subject: str
    text: str
    html: str | None = None


def _load(path: str | None) -> str | None:
    if not path:
        return None
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise NotifierError(f"Couldn't read email template {path}: {e}") from e


class InviteEmailRenderer:
    """Renders invite notifications into email content.

    Template files are read once, when the renderer is built.
    """

    def __init__(self, settings: InvitesSettings) -> None:
        self.subject_template = Template(settings.subject_template)
        self.text_template = Template(
            _load(settings.email_template.text) or DEFAULT_TEXT_TEMPLATE
        )
        html_source = _load(settings.email_template.html)
        self.html_template = Template(html_source) if html_source else None

    def render(self, notification: InviteNotification) -> RenderedEmail:
        """Render subject, plain text and optional HTML body.

        Values substituted into the HTML body are escaped.
        """
        context = self._context(notification)

        # Header values must stay on one line
        subject = " ".join(self.subject_template.safe_substitute(context).split())
        text = self.text_template.safe_substitute(context)

        body_html = None
        if self.html_template is not None:
            escaped = {key: html.escape(value) for key, value in context.items()}
            body_html = self.html_template.safe_substitute(escaped)

        return RenderedEmail(subject=subject, text=text, html=body_html)

    @staticmethod
    def _context(notification: InviteNotification) -> dict[str, str]:
        context = {
            key: "" if value is None else str(value)
            for key, value in notification.model_dump().items()
        }
        context["sender_display_name"] = (
            notification.sender_display_name or notification.sender
        )
        context["room_name"] = notification.room_name or notification.room_id
        return context
