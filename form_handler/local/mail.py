"""LogMailer: a delivery collaborator that logs instead of sending."""

import logging

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class SentMessage(BaseModel):
    to: str
    subject: str
    html_body: str
    headers: list[str] = Field(default_factory=list)


class LogMailer:
    """Records messages and writes a log line for each one."""

    def __init__(self) -> None:
        self.sent: list[SentMessage] = []

    def send(self, to: str, subject: str, html_body: str, headers: list[str]) -> None:
        self.sent.append(SentMessage(to=to, subject=subject, html_body=html_body, headers=list(headers)))
        logger.info("Mail to %s: %s (%d bytes)", to, subject, len(html_body))
