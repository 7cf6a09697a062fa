"""
Custom exceptions for the campgrounds application.
"""


class CampgroundError(Exception):
    """Base class for exceptions raised by the campgrounds application."""
    pass


class PersistenceError(CampgroundError):
    """Raised when the data layer fails to execute a query or a write."""
    pass


class NotFoundError(CampgroundError):
    """Raised when no campground matches the requested slug."""

    def __init__(self, slug):
        self.slug = slug
        super().__init__(f"Campground '{slug}' not found")


class AuthorizationFailure(CampgroundError):
    """Raised by a guard to stop the request and redirect the caller."""

    def __init__(self, redirect_to, reason=""):
        self.redirect_to = redirect_to
        self.reason = reason
        super().__init__(reason or f"Redirecting to {redirect_to}")
