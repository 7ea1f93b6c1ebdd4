# blog_api/auth/security.py
"""
Servicio de credenciales: hash de contraseñas y tokens JWT.

El secreto de firma se carga una sola vez al crear la app (``init_credentials``)
y se inyecta en ``CredentialService``; no hay secreto global mutable.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt
from flask import Flask, current_app
from passlib.context import CryptContext

from blog_api.errors import UnauthorizedError
from blog_api.models.user import UserType

_JWT_ALG = "HS256"

TOKEN_EXPIRED = "TOKEN_EXPIRED"
TOKEN_INVALID = "TOKEN_INVALID"


@dataclass(frozen=True)
class TokenData:
    id: int
    type: UserType


@dataclass(frozen=True)
class DecodeResult:
    """Payload validado o el motivo por el que el token no sirve."""

    data: Optional[TokenData] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.data is not None


class CredentialService:
    def __init__(self, secret: str, expires_in: timedelta = timedelta(hours=12)):
        if not secret:
            raise ValueError("jwt_secret_blank")
        self._secret = secret
        self._expires_in = expires_in
        self._pwd = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

    # 🔐 Contraseñas
    def hash(self, password: str) -> str:
        if not password:
            raise ValueError("password_blank")
        return self._pwd.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        if not password or not password_hash:
            return False
        try:
            return self._pwd.verify(password, password_hash)
        except (ValueError, TypeError):
            # hash corrupto o con formato desconocido
            return False

    # 🛡️ Tokens
    def issue_token(self, data: Dict[str, Any]) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "sub": str(data["id"]),
            "type": UserType(data["type"]).value,
            "iat": int(now.timestamp()),
            "exp": int((now + self._expires_in).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=_JWT_ALG)

    def try_decode(self, token: str) -> DecodeResult:
        if not token:
            return DecodeResult(error=TOKEN_INVALID)
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[_JWT_ALG],
                options={"require": ["sub", "type", "iat", "exp"]},
            )
        except jwt.ExpiredSignatureError:
            return DecodeResult(error=TOKEN_EXPIRED)
        except jwt.InvalidTokenError:
            return DecodeResult(error=TOKEN_INVALID)

        try:
            data = TokenData(id=int(payload["sub"]), type=UserType(payload["type"]))
        except (TypeError, ValueError):
            return DecodeResult(error=TOKEN_INVALID)
        return DecodeResult(data=data)

    def is_valid(self, token: str) -> bool:
        return self.try_decode(token).ok

    def decode(self, token: str) -> TokenData:
        result = self.try_decode(token)
        if not result.ok:
            raise UnauthorizedError("AUTH_TOKEN_INVALID")
        return result.data


def init_credentials(app: Flask) -> CredentialService:
    service = CredentialService(
        secret=app.config["JWT_SECRET_KEY"],
        expires_in=timedelta(hours=app.config.get("JWT_EXPIRES_HOURS", 12)),
    )
    app.extensions["credentials"] = service
    return service


def get_credentials() -> CredentialService:
    return current_app.extensions["credentials"]
