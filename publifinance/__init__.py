"""Mini README: Core package initializer for the PubliFinance dashboard.

This module exposes convenience imports that allow other parts of the
application to reach shared helpers without knowing the module layout. The
ledger itself lives in :mod:`publifinance.ledger` and the browser-facing
layer in :mod:`publifinance.interface`.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
