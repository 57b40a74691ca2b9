import logging

from auth_service.app.services.reset_notifier import IResetNotifier

logger = logging.getLogger(__name__)


class LogResetNotifier(IResetNotifier):
    """
    Development notifier: writes reset tokens to the application log.

    Replace with a mail or message-queue backed notifier in production.
    """

    async def send_reset_token(self, email: str, username: str, token: str) -> None:
        logger.info("Password reset token for %s <%s>: %s", username, email, token)
