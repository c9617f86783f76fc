"""
Email notifications over SMTP.

`EmailService` renders the reaction notification as a multipart
(plain text + HTML) message and delivers it with `smtplib`.

Environment contract (from `settings`)
--------------------------------------
MAIL_HOST : str | None
    SMTP host. When unset the service runs in development mode: the message
    is written to the log instead of being delivered.
MAIL_PORT, MAIL_SECURE, MAIL_STARTTLS : int, bool, bool
    `MAIL_SECURE` selects implicit TLS (`SMTP_SSL`); otherwise a plain
    connection is opened and upgraded with STARTTLS when `MAIL_STARTTLS`.
MAIL_USER, MAIL_PASSWORD : str
    SMTP credentials. Login is skipped when `MAIL_USER` is empty.
MAIL_FROM : str
    Sender address, shown as ``"XConfess" <MAIL_FROM>``.
FRONTEND_URL : str
    Base URL for links in the message body.
"""

import html
import logging
import smtplib
from datetime import datetime
from email.errors import MessageError
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formataddr

from xconfess.database.config.config import Settings, settings
from xconfess.notifications.base import ReactionNotifier

logger = logging.getLogger(__name__)

SENDER_NAME = "XConfess"


class EmailDeliveryError(Exception):
    """Raised when an email could not be handed over to the SMTP server."""


class EmailService(ReactionNotifier):
    """
    SMTP-backed `ReactionNotifier`.

    Parameters
    ----------
    config : Settings, optional
        Settings to read mail configuration from. Defaults to the application settings.
    """

    def __init__(self, config: Settings = settings):
        self.config = config

    def send_reaction_notification(
        self,
        to_email: str,
        username: str,
        reactor_name: str,
        content_preview: str,
        emoji: str,
    ) -> None:
        """
        Notify a confession's author about a new reaction.

        Parameters
        ----------
        to_email : str
            Recipient address.
        username : str
            Recipient display name.
        reactor_name : str
            Display name of whoever reacted ("Anonymous" for anonymous reactions).
        content_preview : str
            Already-truncated excerpt of the confession.
        emoji : str
            The reaction symbol.

        Raises
        ------
        EmailDeliveryError
            If the message cannot be built (e.g. a header value spans lines)
            or the SMTP exchange fails.
        """
        subject = f"Someone reacted with {emoji} to your confession!"
        html_body = self._reaction_html(username, reactor_name, content_preview, emoji)
        text_body = self._reaction_text(username, reactor_name, content_preview, emoji)
        self._send_email(to_email, subject, html_body, text_body)

    def _send_email(self, to: str, subject: str, html_body: str, text_body: str) -> None:
        cfg = self.config
        if not cfg.MAIL_HOST:
            logger.warning("No mail configuration found. Email to %s was not delivered.", to)
            logger.info("Undelivered email to %s: %s\n%s", to, subject, text_body)
            return

        smtp_class = smtplib.SMTP_SSL if cfg.MAIL_SECURE else smtplib.SMTP
        try:
            msg = MIMEMultipart("alternative")
            msg["Subject"] = subject
            msg["From"] = formataddr((SENDER_NAME, cfg.MAIL_FROM))
            msg["To"] = to
            msg.attach(MIMEText(text_body, "plain", "utf-8"))
            msg.attach(MIMEText(html_body, "html", "utf-8"))
            raw = msg.as_string()

            with smtp_class(cfg.MAIL_HOST, cfg.MAIL_PORT, timeout=cfg.MAIL_TIMEOUT_SECONDS) as server:
                if not cfg.MAIL_SECURE and cfg.MAIL_STARTTLS:
                    server.starttls()
                if cfg.MAIL_USER:
                    server.login(cfg.MAIL_USER, cfg.MAIL_PASSWORD)
                server.sendmail(cfg.MAIL_FROM, [to], raw)
        except (MessageError, smtplib.SMTPException, OSError) as e:
            logger.error("Failed to send email to %s: %s", to, e)
            raise EmailDeliveryError(f"Failed to send email: {e}") from e

        logger.info("Email sent to %s", to)

    def _reaction_html(self, username: str, reactor_name: str, content_preview: str, emoji: str) -> str:
        base_url = self.config.FRONTEND_URL.rstrip("/")
        username = html.escape(username)
        reactor_name = html.escape(reactor_name or "Someone")
        content_preview = html.escape(content_preview)
        emoji = html.escape(emoji)
        year = datetime.now().year
        return f"""<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>New Reaction to Your Confession</title>
  <style>
    body {{ font-family: Arial, sans-serif; line-height: 1.6; color: #333; max-width: 600px; margin: 0 auto; padding: 20px; }}
    .content {{ background-color: #f9f9f9; padding: 30px; border-radius: 8px; }}
    .confession {{ background-color: #fff; border-left: 4px solid #4CAF50; padding: 15px; margin: 20px 0; font-style: italic; }}
    .reaction {{ font-size: 24px; text-align: center; margin: 20px 0; }}
    .button {{ display: inline-block; padding: 12px 24px; background-color: #4CAF50; color: white; text-decoration: none; border-radius: 4px; }}
    .footer {{ margin-top: 30px; font-size: 12px; color: #777; text-align: center; }}
  </style>
</head>
<body>
  <h1 style="text-align: center;">New Reaction to Your Confession! {emoji}</h1>
  <div class="content">
    <p>Hello {username},</p>
    <p>Someone reacted to your confession:</p>
    <div class="confession">"{content_preview}"</div>
    <div class="reaction">{emoji} {reactor_name} reacted with {emoji}</div>
    <div style="text-align: center;">
      <a href="{base_url}/confessions" class="button">View All Reactions</a>
    </div>
    <p>Best regards,<br>The XConfess Team</p>
  </div>
  <div class="footer">
    <p>&copy; {year} XConfess. All rights reserved.</p>
    <p><a href="{base_url}/settings/notifications">Manage your notification preferences</a></p>
  </div>
</body>
</html>
"""

    def _reaction_text(self, username: str, reactor_name: str, content_preview: str, emoji: str) -> str:
        base_url = self.config.FRONTEND_URL.rstrip("/")
        year = datetime.now().year
        return (
            f"New Reaction to Your Confession! {emoji}\n\n"
            f"Hello {username},\n\n"
            f"{reactor_name or 'Someone'} reacted with {emoji} to your confession:\n\n"
            f'"{content_preview}"\n\n'
            f"View all reactions: {base_url}/confessions\n\n"
            "Best regards,\n"
            "The XConfess Team\n\n"
            "---\n"
            f"{year} XConfess. All rights reserved.\n"
            f"Manage your notification preferences: {base_url}/settings/notifications\n"
        )
