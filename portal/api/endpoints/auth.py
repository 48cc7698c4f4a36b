"""Authentication forms (rendering only; no credential handling)."""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

router = APIRouter()


@router.get("/login", response_class=HTMLResponse)
def login_form(request: Request) -> HTMLResponse:
    """Render the login form."""
    return request.app.state.templates.TemplateResponse(
        request, "auth/login.html", {"title": "Log in"}
    )


@router.get("/register", response_class=HTMLResponse)
def register_form(request: Request) -> HTMLResponse:
    """Render the registration form."""
    return request.app.state.templates.TemplateResponse(
        request, "auth/register.html", {"title": "Register"}
    )
