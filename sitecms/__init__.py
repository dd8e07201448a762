"""sitecms.

Content-management backend for a small business website.

High-level architecture
-----------------------

- ``sitecms.core``:

  - Logging and monitoring setup.
  - SQLModel entities, repositories and the async session factory.
  - Pydantic I/O schemas shared by the API and the scripts.

- ``sitecms.server``:

  - The FastAPI backend: public and admin REST routes, the upload manager,
    the auth service and the response envelope.

- ``sitecms.proxy``:

  - A small FastAPI app that forwards ``/api/*`` calls from the storefront
    process to the backend, passing multipart bodies through as opaque bytes.

- ``sitecms.scripts``:

  - One-shot admin bootstrap and demo-content seed commands.
"""
