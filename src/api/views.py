"""
View rendering and flash messages.

Templates live in src/templates. Flash messages are kept in the session
under "flashes" and shown once on the next rendered page.
"""
from fastapi import Request
from fastapi.templating import Jinja2Templates
import os

TEMPLATES_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "templates")


def flash(request: Request, message: str, category: str = "success"):
    flashes = request.session.get("flashes", [])
    flashes.append({"category": category, "message": message})
    request.session["flashes"] = flashes


def pop_flashes(request: Request):
    return request.session.pop("flashes", [])


class ViewRenderer:
    def __init__(self, directory=TEMPLATES_DIR):
        self.templates = Jinja2Templates(directory=directory)

    def render(self, request: Request, template_name: str, context=None, status_code=200):
        context = dict(context or {})
        context.setdefault("flashes", pop_flashes(request))
        context.setdefault("current_user", None)
        return self.templates.TemplateResponse(
            request, template_name, context, status_code=status_code
        )


renderer = ViewRenderer()


def get_renderer() -> ViewRenderer:
    return renderer
