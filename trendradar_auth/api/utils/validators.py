from typing import Optional

from trendradar_auth.app.services.password_hasher import MAX_PASSWORD_BYTES, password_fits


def check_password_length(value: Optional[str]) -> Optional[str]:
    """Pydantic field validator: reject passwords bcrypt cannot hash"""
    if value is not None and not password_fits(value):
        raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    return value
