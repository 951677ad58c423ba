"""
Infrastructure layer: persistence adapters and port implementations.

Supports multiple storage providers via factory pattern:
- memory: process-local storage for development and tests
- sql: relational database (PostgreSQL, SQLite) via SQLAlchemy async
"""

from webinar_scheduler.infrastructure.factory import InfrastructureFactory

__all__ = ["InfrastructureFactory"]
