"""Site navigation pages: home, about, contact, support."""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

router = APIRouter()


def _render(request: Request, template: str, title: str) -> HTMLResponse:
    return request.app.state.templates.TemplateResponse(request, template, {"title": title})


@router.get("/", response_class=HTMLResponse)
def home_page(request: Request) -> HTMLResponse:
    return _render(request, "home.html", "Home")


@router.get("/about", response_class=HTMLResponse)
def about_page(request: Request) -> HTMLResponse:
    return _render(request, "about.html", "About")


@router.get("/contact", response_class=HTMLResponse)
def contact_form(request: Request) -> HTMLResponse:
    return _render(request, "contact.html", "Contact")


@router.get("/support", response_class=HTMLResponse)
def support_form(request: Request) -> HTMLResponse:
    return _render(request, "support.html", "Support")
