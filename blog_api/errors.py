# blog_api/errors.py
"""
Errores de la API y su traducción a respuestas JSON.

Los handlers lanzan alguna subclase de ``ApiError`` y el handler
centralizado la convierte en ``{"error": <reason>}`` con su status.
"""
from flask import Flask, current_app, jsonify
from werkzeug.exceptions import HTTPException

from blog_api.extensions import db


class ApiError(Exception):
    status_code = 500

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class BadRequestError(ApiError):
    status_code = 400


class UnauthorizedError(ApiError):
    status_code = 401


class NotFoundError(ApiError):
    status_code = 404


def register_error_handlers(app: Flask):
    @app.errorhandler(ApiError)
    def handle_api_error(error):
        if isinstance(error, UnauthorizedError):
            current_app.logger.debug("🔒 Acceso rechazado: %s", error.reason)
        return jsonify({"error": error.reason}), error.status_code

    # Rutas que no existen (o método no soportado) -> 404
    @app.errorhandler(404)
    @app.errorhandler(405)
    def handle_not_found(error):
        return jsonify({"error": "NOT_FOUND"}), 404

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({"error": error.name}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected(error):
        db.session.rollback()
        current_app.logger.exception("❌ Error inesperado: %s", error)
        return jsonify({"error": "INTERNAL_SERVER_ERROR"}), 500
