"""Autenticación: servicio de credenciales y decoradores de las rutas."""
from .decorators import RequestAuth, admin_required, token_required
from .security import CredentialService, get_credentials, init_credentials

__all__ = [
    "RequestAuth",
    "admin_required",
    "token_required",
    "CredentialService",
    "get_credentials",
    "init_credentials",
]
