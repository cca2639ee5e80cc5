"""
Domain Layer
============

Core business concepts of the catalog.
This layer has no dependencies on external frameworks or infrastructure.

Contains:
- Entities: Users, movies, beers and breweries
- Repository Interfaces: Abstract contracts for data access
- Exceptions: Error taxonomy shared by every layer
"""
