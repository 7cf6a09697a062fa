"""
API Dependencies

Provides dependency injection for the repository used by the campground routes.
Tests swap the database by overriding get_db.
"""
from fastapi import Depends
from sqlalchemy.orm import Session

from src.db.database import get_db
from src.db.repository import CampgroundRepository


def get_repository(db: Session = Depends(get_db)) -> CampgroundRepository:
    return CampgroundRepository(db)
