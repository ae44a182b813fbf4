from typing import Optional, Tuple

from fastapi import Request


def client_origin(request: Request) -> Tuple[Optional[str], Optional[str]]:
    """
    (ip_address, user_agent) of the caller, for audit entries.

    X-Forwarded-For is used only when the app is configured with
    TRUST_PROXY_HEADERS; otherwise the socket peer address is recorded.
    """
    ip_address = request.client.host if request.client else None

    config = getattr(request.app.state, "config", None)
    if getattr(config, "TRUST_PROXY_HEADERS", False):
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            ip_address = forwarded.split(",")[0].strip()

    return ip_address, request.headers.get("user-agent")
