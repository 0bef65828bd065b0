import logging

from account_management.app.services.email_client import EmailClient

logger = logging.getLogger(__name__)


class LoggingEmailClient(EmailClient):
    """Email client that writes outgoing messages to the log instead of sending them"""

    async def send(self, recipient: str, subject: str, body: str) -> None:
        logger.info(f"Email to {recipient}: {subject}")
        logger.debug(body)
