"""
Pydantic schema definitions for API payloads.

Each domain (donations, services, portfolio, orders, analytics, taper,
agreements) defines its own request and response models.  Responses
share the ``{"ok": true, ...}`` envelope defined in ``common``.
"""
