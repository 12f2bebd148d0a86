# backend/withapp/core/security.py
"""
Hash des mots de passe (bcrypt) et jetons JWT (python-jose).

Deux types de jetons, distingués par le claim "type" :
    access  → courte durée, envoyé en Bearer
    refresh → longue durée, échangé contre un nouvel access
"""
from datetime import datetime, timedelta, timezone
from typing import Dict

import bcrypt
from jose import jwt

from withapp.core.config import settings


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))


def _encode(data: Dict, expires: timedelta, token_type: str) -> str:
    to_encode = dict(data)
    to_encode.update({
        "exp": datetime.now(timezone.utc) + expires,
        "type": token_type,
    })
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def create_access_token(data: Dict) -> str:
    return _encode(data, timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES), "access")


def create_refresh_token(data: Dict) -> str:
    return _encode(data, timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS), "refresh")


def decode_token(token: str) -> Dict:
    """Lève jose.JWTError si la signature ou l'expiration est invalide."""
    return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
