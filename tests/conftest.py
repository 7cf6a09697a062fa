import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from src.api.app import app
from src.api.auth import get_current_user
from src.db.database import Base, CommentDB, get_db
from src.db.repository import CampgroundRepository
from src.models.campground import CurrentUser

ALICE = CurrentUser(id="user-alice", username="alice")
BOB = CurrentUser(id="user-bob", username="bob")


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def repo(db_session):
    return CampgroundRepository(db_session)


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def login():
    """Make every following request come from the given user"""
    def _login(user=ALICE):
        app.dependency_overrides[get_current_user] = lambda: user
        return user
    return _login


@pytest.fixture
def make_campground(repo):
    def _make(name="Tent Valley", author=ALICE,
              image="http://example.com/tent.jpg", description="quiet"):
        return repo.create(
            {"name": name, "image": image, "description": description},
            author=author,
        )
    return _make


@pytest.fixture
def add_comment(db_session):
    def _add(campground, text, author=BOB):
        comment = CommentDB(
            campground_id=campground.id,
            text=text,
            author_id=author.id,
            author_username=author.username,
        )
        db_session.add(comment)
        db_session.commit()
        return comment
    return _add
