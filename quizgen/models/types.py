"""
Column types that work on both SQLite (local runs, tests) and PostgreSQL.
"""
import uuid

from sqlalchemy import String, TypeDecorator


class UuidType(TypeDecorator):
    """UUID stored as string(36); quiz ids are returned to callers as uuid.UUID."""
    impl = String(36)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return str(value if isinstance(value, uuid.UUID) else uuid.UUID(str(value)))

    def process_result_value(self, value, dialect):
        if value is None or isinstance(value, uuid.UUID):
            return value
        return uuid.UUID(value)
