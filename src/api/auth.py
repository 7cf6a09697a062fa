"""
Authorization guards for the campground routes.

Logging in happens elsewhere; whatever does it stores the caller as
request.session["user"] = {"id": ..., "username": ...}. The guards below are
FastAPI dependencies: each returns a value to let the request through or
raises AuthorizationFailure, which the app turns into a redirect before the
route body runs.
"""
from fastapi import Depends, Request
from pydantic import ValidationError
from typing import Optional
import logging

from src.api.dependencies import get_repository
from src.api.views import flash
from src.db.database import CampgroundDB
from src.db.repository import CampgroundRepository
from src.exceptions import AuthorizationFailure
from src.models.campground import CurrentUser

logger = logging.getLogger(__name__)

LOGIN_URL = "/login"


def get_current_user(request: Request) -> Optional[CurrentUser]:
    data = request.session.get("user")
    if not data:
        return None
    try:
        return CurrentUser(**data)
    except (TypeError, ValidationError) as e:
        logger.warning(f"Ignoring malformed session user: {str(e)}")
        return None


def is_logged_in(
    request: Request,
    user: Optional[CurrentUser] = Depends(get_current_user),
) -> CurrentUser:
    if user is None:
        logger.info(f"Anonymous {request.method} {request.url.path} rejected")
        flash(request, "You need to be logged in to do that", "error")
        raise AuthorizationFailure(LOGIN_URL, "login required")
    return user


def check_campground_ownership(
    slug: str,
    request: Request,
    user: CurrentUser = Depends(is_logged_in),
    repo: CampgroundRepository = Depends(get_repository),
) -> CampgroundDB:
    """
    Let the request through only when the caller wrote the campground.

    Returns the loaded campground so the route does not look it up again.
    """
    campground = repo.find_one(slug=slug)
    if campground is None:
        flash(request, "Campground not found", "error")
        raise AuthorizationFailure("/campgrounds", f"no campground {slug}")
    if campground.author_id != user.id:
        logger.info(f"User {user.username} is not the author of {slug}")
        flash(request, "You don't have permission to do that", "error")
        raise AuthorizationFailure(f"/campgrounds/{slug}", "not the author")
    return campground
