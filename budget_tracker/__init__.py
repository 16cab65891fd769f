"""
Budget tracker domain core.

Entities, validation rules, audit fields and async SQLAlchemy
repositories for budgets, expenses, suppliers and teams.
"""
__version__ = "1.0.0"
