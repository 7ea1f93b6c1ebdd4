# blog_api/utils/validation.py
from email_validator import EmailNotValidError, validate_email
from flask import request

from blog_api.errors import BadRequestError

MIN_NAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 8


def _is_text(value):
    return isinstance(value, str)


def require_name(value):
    if not _is_text(value) or len(value) < MIN_NAME_LENGTH:
        raise BadRequestError("INVALID_NAME")
    return value


def require_email(value):
    if not _is_text(value):
        raise BadRequestError("INVALID_EMAIL")
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        raise BadRequestError("INVALID_EMAIL")
    return value


def require_password(value, min_length=MIN_PASSWORD_LENGTH):
    if not _is_text(value) or len(value) < min_length:
        raise BadRequestError("INVALID_PASSWORD")
    return value


def require_text(data, field, reason):
    """Campo obligatorio de texto no vacío."""
    value = data.get(field)
    if not _is_text(value) or not value.strip():
        raise BadRequestError(reason)
    return value


def require_bool(data, field, reason):
    value = data.get(field)
    if not isinstance(value, bool):
        raise BadRequestError(reason)
    return value


def json_body():
    """Body JSON como dict; cualquier otra cosa cuenta como body vacío."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}
