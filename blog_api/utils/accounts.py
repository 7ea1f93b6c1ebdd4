# blog_api/utils/accounts.py
from flask import current_app
from sqlalchemy.exc import IntegrityError

from blog_api.auth.security import get_credentials
from blog_api.errors import BadRequestError
from blog_api.extensions import db
from blog_api.models.user import User, UserType
from blog_api.utils.validation import require_email, require_name, require_password


def parse_user_type(value):
    try:
        return UserType(value)
    except ValueError:
        raise BadRequestError("INVALID_TYPE")


def create_user(*, name, email, password, user_type=UserType.BLOGGER):
    """Valida y crea un usuario. Nombre y email son únicos (se chequea primero el nombre)."""
    require_name(name)
    require_email(email)
    require_password(password)

    if User.query.filter_by(name=name).first() is not None:
        raise BadRequestError("NAME_ALREADY_USED")
    if User.query.filter_by(email=email).first() is not None:
        raise BadRequestError("EMAIL_ALREADY_USED")

    user = User(
        name=name,
        email=email,
        password_hash=get_credentials().hash(password),
        type=user_type,
    )
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        # otro request registró el mismo nombre/email entre el chequeo y el insert
        db.session.rollback()
        raise BadRequestError("USER_ALREADY_EXISTS")

    current_app.logger.info("👤 Usuario creado: %s (%s)", user.name, user.type.value)
    return user


def authenticate_user(email, password):
    """Devuelve el usuario si email y contraseña coinciden, si no ``None``."""
    user = User.query.filter_by(email=email).first()
    if user is None or not get_credentials().verify(password, user.password_hash):
        return None
    return user
