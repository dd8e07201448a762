"""
Service layer for the backend API.

One service per entity; services raise the error taxonomy from
``sitecms.server.exception_handlers.errors`` and never build HTTP responses.
"""
