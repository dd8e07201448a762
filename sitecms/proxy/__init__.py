"""
Frontend request proxy.

A small FastAPI app that sits in front of the backend API and forwards
``/api/*`` calls to ``BACKEND_API_URL``. Request bodies other than JSON,
multipart uploads in particular, are passed through as opaque bytes.
"""
