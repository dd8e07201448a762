"""
Middleware modules for the sitecms backend.
"""

from .logfire_middleware import LogfireMiddleware

__all__ = ["LogfireMiddleware"]
