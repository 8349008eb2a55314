"""
Application package initializer.

Holds the FastAPI entrypoint and its submodules.  Each domain
(donations, services, portfolio, orders, analytics, e-signature,
agreements) has a service class in ``services`` and a router in
``api/v1/endpoints``.
"""

from .main import app  # noqa: F401
