"""
app/feedback.py

Per-request user feedback (success / error message pair).

A route builds one Feedback, sets at most one success and at most one error
message, and returns feedback.redirect(...). Only then are the messages pushed
into the session flash store, so the next rendered page can show them.

Reading side: pending_messages() pops everything waiting in the session and
groups it by category for the templates.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from flask import flash, get_flashed_messages, redirect
from werkzeug.wrappers import Response

SUCCESS = "success"
ERROR = "error"


class FeedbackAlreadySet(RuntimeError):
    """Raised when a success/error slot is written twice in the same request."""


class Feedback:
    """Write-once success/error messages for a single request."""

    def __init__(self) -> None:
        self.success: Optional[str] = None
        self.error: Optional[str] = None

    def succeed(self, message: str) -> "Feedback":
        if self.success is not None:
            raise FeedbackAlreadySet(SUCCESS)
        self.success = message
        return self

    def fail(self, message: str) -> "Feedback":
        if self.error is not None:
            raise FeedbackAlreadySet(ERROR)
        self.error = message
        return self

    def redirect(self, location: str) -> Response:
        """Flash whatever was set and redirect (302) to location."""
        if self.success is not None:
            flash(self.success, SUCCESS)
        if self.error is not None:
            flash(self.error, ERROR)
        return redirect(location)

    def __repr__(self) -> str:
        return f"<Feedback success={self.success!r} error={self.error!r}>"


def pending_messages() -> Dict[str, List[str]]:
    """Read-and-clear pending flash messages, grouped as {"success": [...], "error": [...]}."""
    return {
        SUCCESS: get_flashed_messages(category_filter=[SUCCESS]),
        ERROR: get_flashed_messages(category_filter=[ERROR]),
    }
