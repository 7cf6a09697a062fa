"""
Campground Repository
-------------------
All reads and writes against the campgrounds table go through here.
Every SQLAlchemy failure is rolled back, logged and re-raised as PersistenceError
so the web layer only has to know about one kind of backend failure.
"""
from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload
from typing import List, Optional
import logging

from src.db.database import CampgroundDB
from src.exceptions import PersistenceError
from src.models.campground import CurrentUser
from src.utils.slug import slugify, unique_slug

logger = logging.getLogger(__name__)


class CampgroundRepository:
    def __init__(self, db: Session):
        self.db = db

    def _fail(self, action, error):
        self.db.rollback()
        logger.error(f"Error {action}: {str(error)}")
        raise PersistenceError(f"Error {action}") from error

    def find_all(self, **criteria) -> List[CampgroundDB]:
        try:
            query = self.db.query(CampgroundDB)
            if criteria:
                query = query.filter_by(**criteria)
            return query.order_by(CampgroundDB.created_at).all()
        except SQLAlchemyError as e:
            self._fail("retrieving campgrounds", e)

    def find_one(self, **criteria) -> Optional[CampgroundDB]:
        try:
            return self.db.query(CampgroundDB).filter_by(**criteria).first()
        except SQLAlchemyError as e:
            self._fail(f"retrieving campground {criteria}", e)

    def find_one_with_comments(self, **criteria) -> Optional[CampgroundDB]:
        """Same as find_one, with the comments collection loaded in the same call"""
        try:
            return (
                self.db.query(CampgroundDB)
                .options(selectinload(CampgroundDB.comments))
                .filter_by(**criteria)
                .first()
            )
        except SQLAlchemyError as e:
            self._fail(f"retrieving campground {criteria} with comments", e)

    def taken_slugs(self, base):
        rows = (
            self.db.query(CampgroundDB.slug)
            .filter(or_(CampgroundDB.slug == base, CampgroundDB.slug.like(f"{base}-%")))
            .all()
        )
        return {row[0] for row in rows}

    def create(self, fields, author: CurrentUser) -> CampgroundDB:
        """
        Persist a new campground.

        Args:
            fields: name, image and description of the new campground
            author: the caller, copied onto the record as its author

        The slug is derived from the name; a name already in use gets the
        first free numeric suffix ("tent-valley-2").
        """
        try:
            base = slugify(fields["name"])
            campground = CampgroundDB(
                slug=unique_slug(base, self.taken_slugs(base)),
                name=fields["name"],
                image=fields["image"],
                description=fields.get("description", ""),
                author_id=author.id,
                author_username=author.username,
            )
            self.db.add(campground)
            self.db.commit()
            self.db.refresh(campground)
            return campground
        except SQLAlchemyError as e:
            self._fail("creating campground", e)

    def save(self, campground: CampgroundDB) -> CampgroundDB:
        try:
            self.db.add(campground)
            self.db.commit()
            self.db.refresh(campground)
            return campground
        except SQLAlchemyError as e:
            self._fail(f"saving campground {campground.slug}", e)

    def find_one_and_remove(self, **criteria) -> bool:
        """Delete the first matching campground. Returns False if none matched."""
        try:
            campground = self.db.query(CampgroundDB).filter_by(**criteria).first()
            if campground is None:
                return False
            # Comments are left behind with a NULL campground_id
            self.db.delete(campground)
            self.db.commit()
            return True
        except SQLAlchemyError as e:
            self._fail(f"removing campground {criteria}", e)
