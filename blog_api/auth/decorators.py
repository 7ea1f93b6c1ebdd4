# blog_api/auth/decorators.py
from dataclasses import dataclass
from functools import wraps

from flask import request

from blog_api.errors import UnauthorizedError
from blog_api.extensions import db
from blog_api.models.user import User

from .security import get_credentials


@dataclass(frozen=True)
class RequestAuth:
    """Identidad autenticada de un request; solo vive lo que dura el request."""

    token: str
    user: User


def authenticate(auth_header):
    """Resuelve el header Authorization a un ``RequestAuth`` o lanza 401."""
    if not auth_header:
        raise UnauthorizedError("AUTH_MISSING")

    parts = auth_header.split(" ")
    scheme = parts[0]
    token = parts[1] if len(parts) > 1 else ""

    if scheme.lower() != "bearer":
        raise UnauthorizedError("AUTH_WRONG_TYPE")

    if not token:
        raise UnauthorizedError("AUTH_TOKEN_MISSING")

    result = get_credentials().try_decode(token)
    if not result.ok:
        raise UnauthorizedError("AUTH_TOKEN_INVALID")

    user = db.session.get(User, result.data.id)
    if user is None:
        raise UnauthorizedError("AUTH_TOKEN_INVALID")

    return RequestAuth(token=token, user=user)


def token_required(f):
    """La vista recibe la identidad como ``auth=RequestAuth(...)``."""

    @wraps(f)
    def decorated(*args, **kwargs):
        auth = authenticate(request.headers.get("Authorization", ""))
        return f(*args, auth=auth, **kwargs)

    return decorated


def admin_required(f):
    # Va siempre debajo de @token_required: usa la identidad ya validada
    @wraps(f)
    def decorated(*args, auth=None, **kwargs):
        if auth is None:
            raise UnauthorizedError("AUTH_MISSING")
        if not auth.user.is_admin:
            raise UnauthorizedError("NOT ADMIN")
        return f(*args, auth=auth, **kwargs)

    return decorated
