"""
API package containing versioned routes.

A version subpackage exposes a top‑level ``router`` that includes all
of its domain routers; ``main`` mounts it under ``settings.api_prefix``.
"""
