"""HTTP surface shared helpers."""

from .errors import app_error_handler, install_error_handlers

__all__ = ["app_error_handler", "install_error_handlers"]
