"""
Service layer.

Each service class encapsulates the business rules of one domain and
talks to SQLite through ``core.db``.  API handlers stay thin: they
validate required fields, call a service and translate exceptions into
HTTP responses.
"""
