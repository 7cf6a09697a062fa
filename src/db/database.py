"""
Database Module
-------------
Handles database connections, ORM models, and database sessions.
Uses SQLAlchemy and defines the database schema for campgrounds and the
comments attached to them.
"""
from sqlalchemy import create_engine, Column, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import declarative_base, relationship, sessionmaker
from datetime import datetime
import os
import uuid
import logging

from src.models.campground import Author

# Get logger
logger = logging.getLogger(__name__)

DATABASE_URL = os.getenv("DB_URL", "sqlite:///./campgrounds.db")
Base = declarative_base()


def generate_id():
    return uuid.uuid4().hex


# Define the Campground table structure
class CampgroundDB(Base):
    __tablename__ = "campgrounds"
    id = Column(String, primary_key=True, index=True, default=generate_id)
    slug = Column(String, unique=True, index=True, nullable=False)
    name = Column(String, nullable=False)
    image = Column(String, nullable=False)
    description = Column(Text, default="")
    # Author is a snapshot taken at creation time, not a join
    author_id = Column(String, nullable=False)
    author_username = Column(String, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    comments = relationship(
        "CommentDB",
        back_populates="campground",
        order_by="CommentDB.created_at",
    )

    @property
    def author(self):
        return Author(id=self.author_id, username=self.author_username)

    def __repr__(self):
        return f"<CampgroundDB slug={self.slug!r} name={self.name!r}>"


# Comments are written by another part of the site; declared here so a
# campground page can resolve them
class CommentDB(Base):
    __tablename__ = "comments"
    id = Column(String, primary_key=True, index=True, default=generate_id)
    campground_id = Column(
        String,
        ForeignKey("campgrounds.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    text = Column(Text, nullable=False)
    author_id = Column(String, nullable=False)
    author_username = Column(String, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    campground = relationship("CampgroundDB", back_populates="comments")

    @property
    def author(self):
        return Author(id=self.author_id, username=self.author_username)


def make_engine(url):
    connect_args = {}
    if url.startswith("sqlite"):
        # Request handlers run in a threadpool
        connect_args["check_same_thread"] = False
    return create_engine(url, connect_args=connect_args)


engine = make_engine(DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def create_tables(bind=None):
    try:
        Base.metadata.create_all(bind=bind or engine)
        logger.info("Database tables created (if they didn't exist previously).")
    except Exception as e:
        logger.error(f"Error creating database tables: {e}")
        raise


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
