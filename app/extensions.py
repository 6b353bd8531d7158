"""
Central place for Flask extensions.

This avoids circular imports and keeps create_app clean.
Extensions are initialized in create_app() in __init__.py, where the app context is available.
"""


from flask_sqlalchemy import SQLAlchemy
from flask_wtf import CSRFProtect

# Global extension instances - imported everywhere, bound to the app in create_app().
db = SQLAlchemy()
csrf = CSRFProtect()
