"""
Error taxonomy and the Flask handlers that render it.

Every failure leaves the API as JSON ``{"error": message, "code": CODE}``;
validation failures also carry ``details``, a list of field/message pairs.
"""

import logging
from typing import Dict, List, Optional

from flask import Flask
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from healthstack.extensions import db
from healthstack.utils.http import error

logger = logging.getLogger(__name__)


class ApiError(Exception):
    status_code = 500
    code = "INTERNAL_ERROR"
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None, details: Optional[List[Dict[str, str]]] = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def to_response(self):
        return error(self.code, self.message, self.status_code, details=self.details)


class ValidationError(ApiError):
    status_code = 400
    code = "VALIDATION_ERROR"
    default_message = "Validation failed"


class AuthenticationError(ApiError):
    status_code = 401
    code = "UNAUTHORIZED"
    default_message = "Authentication required"


class InvalidToken(AuthenticationError):
    code = "INVALID_TOKEN"
    default_message = "Invalid token"


class NotFoundError(ApiError):
    status_code = 404
    code = "NOT_FOUND"
    default_message = "Not found"


class ConflictError(ApiError):
    status_code = 409
    code = "CONFLICT"
    default_message = "Resource already exists"


class UnhandledError(ApiError):
    pass


HTTP_ERROR_CODES = {
    404: ("ROUTE_NOT_FOUND", "Route not found"),
    405: ("METHOD_NOT_ALLOWED", "Method not allowed"),
    429: ("RATE_LIMITED", "Too many requests from this IP, please try again later."),
}


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ApiError)
    def handle_api_error(exc: ApiError):
        if exc.status_code >= 500:
            logger.error("API error: %s", exc.message)
        return exc.to_response()

    @app.errorhandler(SQLAlchemyError)
    def handle_database_error(exc: SQLAlchemyError):
        db.session.rollback()
        logger.exception("Database error")
        return error("DATABASE_ERROR", "Database error", 500)

    @app.errorhandler(HTTPException)
    def handle_http_error(exc: HTTPException):
        code, message = HTTP_ERROR_CODES.get(exc.code, ("HTTP_ERROR", exc.description))
        return error(code, message, exc.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected_error(exc: Exception):
        logger.exception("Unhandled exception")
        return UnhandledError().to_response()
