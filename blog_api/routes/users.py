# blog_api/routes/users.py
from flask import Blueprint, current_app, jsonify

from blog_api.auth.decorators import admin_required, token_required
from blog_api.auth.security import get_credentials
from blog_api.errors import BadRequestError, UnauthorizedError
from blog_api.models.user import User, UserType
from blog_api.utils.accounts import authenticate_user, create_user, parse_user_type
from blog_api.utils.validation import json_body

user_bp = Blueprint("users", __name__)


# 🟢 Registro público (siempre como blogger)
@user_bp.route("/register", methods=["POST"])
def register():
    data = json_body()
    create_user(
        name=data.get("name"),
        email=data.get("email"),
        password=data.get("password"),
        user_type=UserType.BLOGGER,
    )
    return "", 204


# 🔐 Login: mismo error si el email no existe o la contraseña no coincide
@user_bp.route("/login", methods=["POST"])
def login():
    data = json_body()
    email = data.get("email")
    password = data.get("password")

    if not isinstance(email, str) or not isinstance(password, str) or not email or not password:
        raise BadRequestError("EMAIL_AND_PASSWORD_REQUIRED")

    user = authenticate_user(email, password)
    if user is None:
        raise UnauthorizedError("EMAIL_OR_PASSWORD_INCORRECT")

    token = get_credentials().issue_token({"id": user.id, "type": user.type})
    current_app.logger.info("✅ Login exitoso: %s", user.name)
    return jsonify({"token": token}), 200


# 🟣 Listado: el admin ve ids y a todos; el resto no ve admins
@user_bp.route("", methods=["GET"])
@token_required
def list_users(auth):
    if auth.user.is_admin:
        users = User.query.order_by(User.id).all()
        return jsonify([{"id": u.id, "name": u.name, "email": u.email} for u in users]), 200

    users = User.query.filter(User.type != UserType.ADMIN).order_by(User.id).all()
    return jsonify([{"name": u.name, "email": u.email} for u in users]), 200


# 🛠️ Alta de usuarios con rol explícito (solo admin)
@user_bp.route("", methods=["POST"])
@token_required
@admin_required
def create_user_as_admin(auth):
    data = json_body()
    create_user(
        name=data.get("name"),
        email=data.get("email"),
        password=data.get("password"),
        user_type=parse_user_type(data.get("type")),
    )
    return "", 204
