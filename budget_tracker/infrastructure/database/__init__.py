"""
Database infrastructure - ORM models, repositories, and connection management.
"""
from .connection import (
    DatabaseManager,
    get_db_session,
    get_unit_of_work,
    init_db,
    drop_db,
    health_check,
    enable_sqlite_savepoints,
)
from .unit_of_work import SQLAlchemyUnitOfWork

__all__ = [
    'DatabaseManager',
    'get_db_session',
    'get_unit_of_work',
    'init_db',
    'drop_db',
    'health_check',
    'enable_sqlite_savepoints',
    'SQLAlchemyUnitOfWork',
]
