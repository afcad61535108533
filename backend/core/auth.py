"""
Session and nonce helpers.

Identity is owned by the CMS; it hands us a signed session cookie. This module
only verifies that cookie and mints/validates form nonces.

Provides:
- sign_session(): Encode a Viewer into a signed cookie value
- verify_session(): HMAC signature verification, returns Viewer or None
- get_viewer(): FastAPI dependency, optional Viewer
- create_nonce() / verify_nonce(): Time-ticked form nonces
"""
import base64
import hashlib
import hmac
import json
import math
import time
from typing import Optional
from fastapi import Request

from config import settings
from core.models.user import Viewer


def _signature(payload: str, secret: Optional[str] = None) -> str:
    key = (secret or settings.session_secret).encode()
    return hmac.new(key=key, msg=payload.encode(), digestmod=hashlib.sha256).hexdigest()


def sign_session(viewer: Viewer, secret: Optional[str] = None) -> str:
    """Encode a viewer as `<base64 json>.<hex hmac>`."""
    payload = base64.urlsafe_b64encode(viewer.model_dump_json().encode()).decode()
    return f"{payload}.{_signature(payload, secret)}"


def verify_session(cookie_value: str, secret: Optional[str] = None) -> Optional[Viewer]:
    """
    Verify a signed session cookie.
    Returns None when missing, tampered or malformed.
    """
    if not cookie_value or "." not in cookie_value:
        return None

    payload, received = cookie_value.rsplit(".", 1)

    # Constant-time comparison
    if not hmac.compare_digest(received, _signature(payload, secret)):
        return None

    try:
        data = json.loads(base64.urlsafe_b64decode(payload.encode()))
        return Viewer(**data)
    except (json.JSONDecodeError, ValueError) as e:
        print(f"[Auth] Invalid session payload: {e}")
        return None


def get_viewer(request: Request) -> Optional[Viewer]:
    """Dependency: the signed-in viewer, or None for anonymous requests."""
    return verify_session(request.cookies.get(settings.session_cookie, ""))


# ─────────────────────────────────────────────────────────────────────────────
# FORM NONCES
# ─────────────────────────────────────────────────────────────────────────────

def _nonce_tick(now: Optional[float] = None) -> int:
    """Nonces rotate every half lifetime; the previous tick is still accepted."""
    now = time.time() if now is None else now
    return math.ceil(now / (settings.nonce_lifetime / 2))


def _nonce_for_tick(action: str, user_id: int, tick: int) -> str:
    return _signature(f"{tick}|{action}|{user_id}")[-12:-2]


def create_nonce(action: str, user_id: int, now: Optional[float] = None) -> str:
    return _nonce_for_tick(action, user_id, _nonce_tick(now))


def verify_nonce(nonce: str, action: str, user_id: int, now: Optional[float] = None) -> bool:
    if not nonce:
        return False
    tick = _nonce_tick(now)
    for candidate_tick in (tick, tick - 1):
        if hmac.compare_digest(nonce, _nonce_for_tick(action, user_id, candidate_tick)):
            return True
    return False
