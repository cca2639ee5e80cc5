"""
Application Layer
=================

Use cases, services and request/response contracts.
Depends on the domain layer; never on FastAPI.
"""
