# taskapi/services/mailer.py
from __future__ import annotations

import logging
import smtplib
from email.message import EmailMessage
from typing import Optional, Tuple

from jinja2 import BaseLoader, Environment, select_autoescape

from taskapi.core.config import settings

logger = logging.getLogger(__name__)

_text_env = Environment(loader=BaseLoader(), autoescape=False)
_html_env = Environment(loader=BaseLoader(), autoescape=select_autoescape(default_for_string=True))

VERIFICATION_TEXT = """Hello,

Confirm your email address by opening the link below.
It is valid for {{ ttl }} minutes.

{{ url }}
"""

VERIFICATION_HTML = """<!doctype html>
<html>
  <body>
    <p>Hello,</p>
    <p>Confirm your email address by clicking the link below. It is valid for {{ ttl }} minutes.</p>
    <p><a href="{{ url }}">Verify email</a></p>
  </body>
</html>
"""


def render_verification_mail(url: str) -> Tuple[str, str]:
    ctx = {"url": url, "ttl": settings.VERIFICATION_LINK_TTL_MINUTES}
    text = _text_env.from_string(VERIFICATION_TEXT).render(**ctx)
    html = _html_env.from_string(VERIFICATION_HTML).render(**ctx)
    return text, html


def build_message(to: str, subject: str, text: str, html: Optional[str] = None) -> EmailMessage:
    msg = EmailMessage()
    msg["From"] = settings.MAIL_FROM_ADDRESS
    msg["To"] = to
    msg["Subject"] = subject
    msg.set_content(text)
    if html:
        msg.add_alternative(html, subtype="html")
    return msg


def send_mail(to: str, subject: str, text: str, html: Optional[str] = None) -> bool:
    """Deliver one message over SMTP. Failures are logged and never raised."""
    msg = build_message(to, subject, text, html)
    try:
        with smtplib.SMTP(settings.SMTP_HOST, settings.SMTP_PORT, timeout=settings.SMTP_TIMEOUT_SECONDS) as server:
            if settings.SMTP_STARTTLS:
                server.starttls()
            if settings.SMTP_USER:
                server.login(settings.SMTP_USER, settings.SMTP_PASS)
            server.send_message(msg)
    except Exception:
        logger.exception("failed to send mail to %s", to)
        return False
    logger.info("mail sent to %s (%s)", to, subject)
    return True
