"""
Version 1 REST routers.

Every router is mounted under ``/api``; admin endpoints live under
``/api/admin/...`` (settings under ``/api/settings/admin/...``) and depend on
``AdminDep``.
"""
