# ============================================================================
# FILE: openmusic/db/base.py
# ============================================================================
import secrets
from sqlalchemy.orm import declarative_base

Base = declarative_base()

ID_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_-"

def generate_id(prefix: str, size: int = 16) -> str:
    """Opaque primary key such as ``playlist-Qbax5Oy7L8WKf74l``"""
    return f"{prefix}-" + "".join(secrets.choice(ID_ALPHABET) for _ in range(size))
