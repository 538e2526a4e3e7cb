"""
Domain Layer - Core Business Logic

This layer contains the login entities, value objects, repository contracts
and domain services. It is independent of transport, UI and configuration.
"""
