"""Mini README: Browser and JSON interfaces for PubliFinance.

Exports the FastAPI application factory. Form validation, per-request
session state and display formatting live in sibling modules.
"""

from .web_app import create_application

__all__ = ["create_application"]
