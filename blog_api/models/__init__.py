# blog_api/models/__init__.py
"""
Paquete de modelos de la aplicación.
Importa aquí los modelos para que puedan ser referenciados como:
from blog_api.models import Post, User
"""
from .post import Post
from .user import User, UserType

__all__ = ["Post", "User", "UserType"]
