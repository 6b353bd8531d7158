"""
app/errors.py

Structured application errors and their HTTP rendering.

AppError carries:
- kind: short machine-readable category ("database", ...)
- message: user-facing text, fixed at construction
- status: HTTP status used when the error reaches the handler

Handlers raise AppError (chained with `from`) instead of decorating the
original exception; register_error_handlers() turns it into an HTML page or a
JSON body depending on the Accept header.
"""

from __future__ import annotations

from flask import Flask, jsonify, render_template, request


HTML = "text/html"
JSON = "application/json"


class AppError(Exception):
    """Error surfaced to the user with a friendly message."""

    def __init__(self, kind: str, message: str, status: int = 500) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.status = status

    def to_dict(self) -> dict:
        return {"error": self.kind, "message": self.message}


def negotiate() -> str | None:
    """
    Pick the response type from the Accept header.

    - No Accept header, */* or a tie: HTML.
    - Returns None when the client accepts neither HTML nor JSON.
    """
    if not request.accept_mimetypes:
        return HTML
    return request.accept_mimetypes.best_match([HTML, JSON])


def wants_json() -> bool:
    return negotiate() == JSON


def register_error_handlers(app: Flask) -> None:
    """Wire AppError rendering into the app."""

    @app.errorhandler(AppError)
    def handle_app_error(error: AppError):
        if wants_json():
            return jsonify(error.to_dict()), error.status
        return render_template("errors/error.html", app_error=error), error.status
