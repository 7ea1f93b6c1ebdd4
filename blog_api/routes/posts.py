# blog_api/routes/posts.py
from flask import Blueprint, current_app, jsonify

from blog_api.auth.decorators import admin_required, token_required
from blog_api.errors import BadRequestError
from blog_api.extensions import db
from blog_api.models.post import Post
from blog_api.utils.validation import json_body, require_bool, require_text

post_bp = Blueprint("posts", __name__)


def _apply_update(query, values):
    """Update en una sola query; devuelve ``[filas afectadas]``."""
    count = query.update(values, synchronize_session=False)
    db.session.commit()
    return [count]


def _apply_delete(query):
    count = query.delete(synchronize_session=False)
    db.session.commit()
    return [count]


# 🟢 Crear un nuevo post
@post_bp.route("/create", methods=["POST"])
@token_required
def create_post(auth):
    data = json_body()

    new_post = Post(
        title=require_text(data, "title", "INVALID_TITLE"),
        content=require_text(data, "content", "INVALID_CONTENT"),
        is_hidden=require_bool(data, "isHidden", "INVALID_IS_HIDDEN"),
        author_id=auth.user.id,
    )
    db.session.add(new_post)
    db.session.commit()

    current_app.logger.info("📝 Post %s creado por %s", new_post.id, auth.user.name)
    return "", 204


# 🟣 Posts propios (públicos y ocultos)
@post_bp.route("", methods=["GET"])
@token_required
def get_my_posts(auth):
    posts = Post.query.filter_by(author_id=auth.user.id).order_by(Post.created_at).all()
    return jsonify([p.to_dict() for p in posts]), 200


# 🔵 Todos los posts públicos, de cualquier autor
@post_bp.route("/getall", methods=["GET"])
@token_required
def get_public_posts(auth):
    posts = Post.query.filter_by(is_hidden=False).order_by(Post.created_at).all()
    return jsonify([p.to_dict() for p in posts]), 200


# 🟡 Editar título y/o contenido (solo el autor; si no es suyo no cambia nada)
@post_bp.route("/<uuid:post_id>", methods=["PUT"])
@token_required
def edit_post(post_id, auth):
    data = json_body()

    values = {}
    if "title" in data:
        values["title"] = require_text(data, "title", "INVALID_TITLE")
    if "content" in data:
        values["content"] = require_text(data, "content", "INVALID_CONTENT")
    if not values:
        raise BadRequestError("NOTHING_TO_UPDATE")

    query = Post.query.filter_by(id=str(post_id), author_id=auth.user.id)
    result = _apply_update(query, values)
    current_app.logger.info("🟡 Post %s editado: %s fila(s)", post_id, result[0])
    return jsonify(result), 200


# 👁️ Cambiar visibilidad (solo el autor)
@post_bp.route("/visibility/<uuid:post_id>", methods=["PUT"])
@token_required
def update_visibility(post_id, auth):
    data = json_body()
    is_hidden = require_bool(data, "isHidden", "INVALID_IS_HIDDEN")

    query = Post.query.filter_by(id=str(post_id), author_id=auth.user.id)
    result = _apply_update(query, {"is_hidden": is_hidden})
    current_app.logger.info("👁️ Post %s visibilidad=%s: %s fila(s)", post_id, is_hidden, result[0])
    return jsonify(result), 200


# 🔴 Borrar post propio
@post_bp.route("/<uuid:post_id>", methods=["DELETE"])
@token_required
def delete_post(post_id, auth):
    query = Post.query.filter_by(id=str(post_id), author_id=auth.user.id)
    result = _apply_delete(query)
    current_app.logger.info("🔴 Post %s borrado por su autor: %s fila(s)", post_id, result[0])
    return jsonify(result), 200


# 🔴 Borrar cualquier post (admin)
@post_bp.route("/deleteAdmin/<uuid:post_id>", methods=["DELETE"])
@token_required
@admin_required
def delete_post_as_admin(post_id, auth):
    result = _apply_delete(Post.query.filter_by(id=str(post_id)))
    current_app.logger.info("🔴 Post %s borrado por admin %s: %s fila(s)", post_id, auth.user.name, result[0])
    return jsonify(result), 200
