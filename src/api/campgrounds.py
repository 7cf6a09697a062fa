"""
Campground routes
---------------
Server-rendered pages for the /campgrounds resource. Reads render a template,
mutations redirect with 303 so the browser follows up with a GET.
"""
from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import RedirectResponse
from pydantic import ValidationError
from typing import Optional
import logging

from src.api.auth import check_campground_ownership, get_current_user, is_logged_in
from src.api.dependencies import get_repository
from src.api.views import ViewRenderer, flash, get_renderer
from src.db.database import CampgroundDB
from src.db.repository import CampgroundRepository
from src.exceptions import NotFoundError, PersistenceError
from src.models.campground import (
    CampgroundCreate,
    CampgroundUpdate,
    CurrentUser,
    validation_messages,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/campgrounds", tags=["campgrounds"])


def redirect(url):
    return RedirectResponse(url, status_code=303)


# INDEX - show all campgrounds
@router.get("")
def list_campgrounds(
    request: Request,
    repo: CampgroundRepository = Depends(get_repository),
    views: ViewRenderer = Depends(get_renderer),
    user: Optional[CurrentUser] = Depends(get_current_user),
):
    campgrounds = repo.find_all()
    return views.render(request, "campgrounds/index.html", {
        "campgrounds": campgrounds,
        "current_user": user,
    })


# CREATE - add new campground
@router.post("")
def create_campground(
    request: Request,
    name: str = Form(""),
    image: str = Form(""),
    description: str = Form(""),
    user: CurrentUser = Depends(is_logged_in),
    repo: CampgroundRepository = Depends(get_repository),
    views: ViewRenderer = Depends(get_renderer),
):
    form = {"name": name, "image": image, "description": description}
    try:
        data = CampgroundCreate(**form)
    except ValidationError as e:
        return views.render(request, "campgrounds/new.html", {
            "form": form,
            "errors": validation_messages(e),
            "current_user": user,
        }, status_code=422)

    try:
        campground = repo.create(data.to_fields(), author=user)
    except PersistenceError:
        flash(request, "Something went wrong, the campground was not created", "error")
        return redirect("/campgrounds")

    logger.info(f"Created campground {campground.slug} for {user.username}")
    flash(request, f"Created {campground.name}")
    return redirect("/campgrounds")


# NEW - show form to create new campground
@router.get("/new")
def new_campground(
    request: Request,
    user: CurrentUser = Depends(is_logged_in),
    views: ViewRenderer = Depends(get_renderer),
):
    return views.render(request, "campgrounds/new.html", {
        "form": {},
        "errors": {},
        "current_user": user,
    })


# SHOW - one campground with its comments
@router.get("/{slug}")
def show_campground(
    slug: str,
    request: Request,
    repo: CampgroundRepository = Depends(get_repository),
    views: ViewRenderer = Depends(get_renderer),
    user: Optional[CurrentUser] = Depends(get_current_user),
):
    campground = repo.find_one_with_comments(slug=slug)
    if campground is None:
        raise NotFoundError(slug)
    return views.render(request, "campgrounds/show.html", {
        "campground": campground,
        "current_user": user,
    })


# EDIT - form pre-filled with the campground
@router.get("/{slug}/edit")
def edit_campground(
    request: Request,
    campground: CampgroundDB = Depends(check_campground_ownership),
    user: CurrentUser = Depends(is_logged_in),
    views: ViewRenderer = Depends(get_renderer),
):
    return views.render(request, "campgrounds/edit.html", {
        "campground": campground,
        "form": {
            "name": campground.name,
            "image": campground.image,
            "description": campground.description,
        },
        "errors": {},
        "current_user": user,
    })


# UPDATE - rewrite name, description and image
@router.put("/{slug}")
def update_campground(
    request: Request,
    name: str = Form("", alias="campground[name]"),
    image: str = Form("", alias="campground[image]"),
    description: str = Form("", alias="campground[description]"),
    campground: CampgroundDB = Depends(check_campground_ownership),
    user: CurrentUser = Depends(is_logged_in),
    repo: CampgroundRepository = Depends(get_repository),
    views: ViewRenderer = Depends(get_renderer),
):
    form = {"name": name, "image": image, "description": description}
    try:
        data = CampgroundUpdate(**form)
    except ValidationError as e:
        return views.render(request, "campgrounds/edit.html", {
            "campground": campground,
            "form": form,
            "errors": validation_messages(e),
            "current_user": user,
        }, status_code=422)

    fields = data.to_fields()
    campground.name = fields["name"]
    campground.description = fields["description"]
    campground.image = fields["image"]
    try:
        repo.save(campground)
    except PersistenceError:
        flash(request, "Something went wrong, the campground was not updated", "error")
        return redirect("/campgrounds")

    logger.info(f"Updated campground {campground.slug}")
    flash(request, "Campground updated")
    return redirect(f"/campgrounds/{campground.slug}")


# DESTROY - remove the campground
@router.delete("/{slug}")
def destroy_campground(
    slug: str,
    request: Request,
    campground: CampgroundDB = Depends(check_campground_ownership),
    repo: CampgroundRepository = Depends(get_repository),
):
    name = campground.name
    try:
        removed = repo.find_one_and_remove(slug=slug)
    except PersistenceError:
        flash(request, "Something went wrong, the campground was not deleted", "error")
        return redirect("/campgrounds")

    if removed:
        logger.info(f"Deleted campground {slug}")
        flash(request, f"Deleted {name}")
    return redirect("/campgrounds")
