"""
app/middleware.py

HTTP method override for HTML forms.

Browsers only submit GET/POST, so the list page posts its forms as:

    <form method="post" action="/people/eaten/?_method=PUT">

A POST carrying `_method` in the query string (or an X-HTTP-Method-Override
header) is rewritten to that method before Flask routes it. Only PUT, PATCH
and DELETE can be requested this way.
"""

from __future__ import annotations

from urllib.parse import parse_qs


class MethodOverrideMiddleware:
    """WSGI middleware rewriting POST into PUT/PATCH/DELETE on request."""

    allowed_methods = frozenset(["PUT", "PATCH", "DELETE"])
    query_param = "_method"

    def __init__(self, app):
        self.app = app

    def __call__(self, environ, start_response):
        if environ.get("REQUEST_METHOD", "").upper() == "POST":
            method = environ.get("HTTP_X_HTTP_METHOD_OVERRIDE")
            if not method:
                query = parse_qs(environ.get("QUERY_STRING", ""))
                method = (query.get(self.query_param) or [""])[0]
            method = method.upper()
            if method in self.allowed_methods:
                environ["REQUEST_METHOD"] = method
        return self.app(environ, start_response)
