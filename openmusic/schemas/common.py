# ============================================================================
# FILE: openmusic/schemas/common.py
# ============================================================================
from datetime import datetime

MIN_YEAR = 1900

def check_year(value: int) -> int:
    """Release years run from 1900 up to the current year"""
    current_year = datetime.now().year
    if value < MIN_YEAR or value > current_year:
        raise ValueError(f"year must be between {MIN_YEAR} and {current_year}")
    return value

# bcrypt only accepts secrets up to this many bytes
MAX_PASSWORD_BYTES = 72

def check_password_length(value: str) -> str:
    if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"password must not exceed {MAX_PASSWORD_BYTES} bytes")
    return value
