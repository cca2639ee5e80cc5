"""
Infrastructure Layer
====================

Concrete adapters for the domain interfaces.

Contains:
- db: MongoDB repositories and the shared connection manager
- memory: In-process repositories for tests and STORAGE_BACKEND=memory
- security: bcrypt password hashing and JWT bearer tokens
"""
