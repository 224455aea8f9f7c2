"""Database Package - SQLAlchemy declarative Base.

Design Decisions:
    - Engine and sessions live in infrastructure/database.py; this package only
      holds table metadata
"""
