"""Email infrastructure providers."""

from dishka import Scope, provide

from ident.adapter.email import SmtpInviteNotifier
from ident.config import Settings
from ident.domain.service import InviteNotifier
from ident.util.di.base import ProviderBase


class EmailProvider(ProviderBase):
    """Email component base."""

    __mock_component__ = "email"


class ProdEmailProvider(EmailProvider):
    """Production email provider sending invites over SMTP."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_invite_notifier(self, settings: Settings) -> InviteNotifier:
        """Provide SMTP invite notifier.

        Raises:
            NotifierError: If a configured template file cannot be read
        """
        return SmtpInviteNotifier(
            email_settings=settings.email,
            invites_settings=settings.ident.invites,
        )
