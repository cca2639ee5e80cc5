"""
API/Presentation Layer
======================

HTTP API layer using FastAPI.
This layer handles HTTP requests and responses.

Contains:
- v1: Route controllers and dependencies
- middleware: Request logging
- error_handlers: Exception to HTTP response mapping
"""
