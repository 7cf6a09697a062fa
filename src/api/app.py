from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse
from starlette.middleware.sessions import SessionMiddleware
import logging
import os

from src.api.campgrounds import router as campgrounds_router
from src.api.auth import get_current_user
from src.api.method_override import MethodOverrideMiddleware
from src.api.views import flash, renderer
from src.exceptions import AuthorizationFailure, NotFoundError, PersistenceError

# Configure logging - Adjust format to remove INFO/WARNING prefixes
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(message)s",
    handlers=[logging.StreamHandler()]
)
logger = logging.getLogger(__name__)

SESSION_SECRET = os.getenv("SESSION_SECRET", "campgrounds-dev-secret")

app = FastAPI(
    title="Campgrounds",
    description="Browse, add and manage campgrounds",
    version="1.0.0"
)

app.add_middleware(SessionMiddleware, secret_key=SESSION_SECRET)
# Added last so it wraps the session middleware and sees the raw request first
app.add_middleware(MethodOverrideMiddleware)

app.include_router(campgrounds_router)


@app.exception_handler(AuthorizationFailure)
async def authorization_failure_handler(request: Request, exc: AuthorizationFailure):
    return RedirectResponse(exc.redirect_to, status_code=303)


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    logger.info(f"Not found: {request.url.path}")
    return renderer.render(request, "not_found.html", {
        "slug": exc.slug,
        "current_user": get_current_user(request),
    }, status_code=404)


@app.exception_handler(PersistenceError)
async def persistence_error_handler(request: Request, exc: PersistenceError):
    logger.error(f"Error handling {request.method} {request.url.path}: {str(exc)}")
    if request.method != "GET":
        flash(request, "Something went wrong, please try again", "error")
        return RedirectResponse("/campgrounds", status_code=303)
    return renderer.render(request, "error.html", {
        "current_user": get_current_user(request),
    }, status_code=500)


# LANDING
@app.get("/")
def read_root(request: Request):
    return renderer.render(request, "landing.html", {
        "current_user": get_current_user(request),
    })
