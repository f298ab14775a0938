"""HTML pages: landing, sign-in, sign-up and the dashboard.

Access to these paths is decided by ``AccessGateMiddleware`` before they run.
The forms post JSON to the auth API and navigate on success.
"""

from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from authdemo.api.dependencies import get_auth_service, get_session_token
from authdemo.errors import AuthRequiredError
from authdemo.services.auth import AuthService
from authdemo.services.gate import SIGN_IN_URL

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["pages"], default_response_class=HTMLResponse)


def _render(request: Request, template_name: str, ctx: dict | None = None):
    """TemplateResponse wrapper."""
    return templates.TemplateResponse(request, template_name, ctx or {})


@router.get("/")
def home(request: Request):
    """Landing page."""
    return _render(request, "home.html")


@router.get("/sign-in")
def sign_in_page(request: Request):
    return _render(
        request,
        "auth_form.html",
        {
            "title": "Sign In",
            "action": "/api/auth/sign-in",
            "submit_label": "Sign In",
            "with_name": False,
            "alternate_prompt": "No account?",
            "alternate_url": "/sign-up",
            "alternate_label": "Sign up",
        },
    )


@router.get("/sign-up")
def sign_up_page(request: Request):
    return _render(
        request,
        "auth_form.html",
        {
            "title": "Create Account",
            "action": "/api/auth/sign-up",
            "submit_label": "Sign Up",
            "with_name": True,
            "alternate_prompt": "Already registered?",
            "alternate_url": "/sign-in",
            "alternate_label": "Sign in",
        },
    )


@router.get("/dashboard")
def dashboard(
    request: Request,
    token: Annotated[str | None, Depends(get_session_token)],
    auth: Annotated[AuthService, Depends(get_auth_service)],
):
    """Protected page with the signed-in user's details.

    A valid token whose account no longer exists is sent back to sign-in.
    """
    try:
        user = auth.current_user(token)
    except AuthRequiredError:
        return RedirectResponse(url=SIGN_IN_URL, status_code=307)
    return _render(request, "dashboard.html", {"user": user})
