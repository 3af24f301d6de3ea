"""
SMTP mail transport.

A single ``SmtpMailer`` is created at startup with the shop mailbox
credentials. Each ``send`` opens its own connection (STARTTLS + login),
so the instance holds no socket and is safe to share between threads.
"""

import smtplib
from email.message import EmailMessage
from typing import Optional

from checkout_service.logging_config import get_logger

log = get_logger(__name__)


class SmtpMailer:
    def __init__(self, host: str, port: int, user: str, password: str, timeout: Optional[float] = None):
        self.host = host
        self.port = port
        self.user = user
        self.password = password
        self.timeout = timeout

    def _connect(self) -> smtplib.SMTP:
        if self.timeout is None:
            return smtplib.SMTP(self.host, self.port)
        return smtplib.SMTP(self.host, self.port, timeout=self.timeout)

    def send(self, from_addr: str, to: str, subject: str, body: str) -> dict:
        """
        Sends a plain-text email.

        Returns:
            dict: {"to", "subject", "refused"} where ``refused`` maps any rejected
            recipients to the server's reply.
        Raises:
            smtplib.SMTPException / OSError: on connection, auth or delivery failure.
        """
        message = EmailMessage()
        message["From"] = from_addr
        message["To"] = to
        message["Subject"] = subject
        message.set_content(body)

        with self._connect() as server:
            server.starttls()
            if self.user:
                server.login(self.user, self.password)
            refused = server.send_message(message)

        log.debug(f"Mail '{subject}' handed to {self.host}:{self.port} for {to}.")
        return {"to": to, "subject": subject, "refused": refused}
