"""
Top‑level package for the Rasya Production API.

Makes ``rasya_api`` importable so that modules under ``app`` can be
referenced with fully qualified names such as ``rasya_api.app.main``.
All functionality lives in the ``app`` subpackage.
"""

__all__ = []
