import hashlib
import hmac
import time
from datetime import datetime
from typing import Optional
from urllib.parse import urlencode

from taskapi.core.config import settings
from taskapi.core.errors import InvalidSignature, LinkExpired


def _now_ms(now: Optional[datetime] = None) -> int:
    if now is None:
        return int(time.time() * 1000)
    return int(now.timestamp() * 1000)


def sign(email: str, request_at: str, secret: Optional[str] = None) -> str:
    key = secret if secret is not None else settings.JWT_SECRET
    msg = f"{email}#{request_at}".encode()
    return hmac.new(key=key.encode(), msg=msg, digestmod=hashlib.sha256).hexdigest()


def build_verification_link(email: str, now: Optional[datetime] = None, secret: Optional[str] = None) -> str:
    request_at = str(_now_ms(now))
    query = urlencode({
        "email": email,
        "request_at": request_at,
        "signature": sign(email, request_at, secret),
    })
    return f"{settings.APP_URL.rstrip('/')}/auth/verify?{query}"


def validate_verification_link(
    email: str,
    request_at: str,
    signature: str,
    now: Optional[datetime] = None,
    secret: Optional[str] = None,
) -> None:
    # assinatura antes da validade: link forjado não revela a janela de tempo
    expected = sign(email or "", request_at or "", secret)
    if not signature or not hmac.compare_digest(expected.encode(), signature.encode()):
        raise InvalidSignature()

    try:
        requested_ms = int(request_at)
    except (TypeError, ValueError):
        raise LinkExpired()

    ttl_ms = settings.VERIFICATION_LINK_TTL_MINUTES * 60 * 1000
    if _now_ms(now) - requested_ms > ttl_ms:
        raise LinkExpired()
