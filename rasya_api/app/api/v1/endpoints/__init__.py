"""
Endpoint modules for API v1.

Each module defines a public ``router`` and, where the domain has admin
operations, an ``admin_router``.  Both are aggregated in ``router.py``;
admin routers end up under ``/admin`` behind ``require_admin``.
"""
