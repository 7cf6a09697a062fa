"""
Database Package
--------------
SQLAlchemy models, session handling and the campground repository.
"""
