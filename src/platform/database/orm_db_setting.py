"""
SQLAlchemy declarative base

Engines are owned by ConnectionManager. The schema is created by the Alembic
revisions under src/platform/alembic.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass
