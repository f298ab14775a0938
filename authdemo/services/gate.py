"""Access decisions for page requests."""

from enum import StrEnum

PROTECTED_PREFIX = "/dashboard"
AUTH_PAGES = frozenset({"/sign-in", "/sign-up"})

SIGN_IN_URL = "/sign-in"
APP_URL = "/dashboard"


class GateDecision(StrEnum):
    """Outcome of checking a request path against the session state."""

    ALLOW = "allow"
    REDIRECT_SIGN_IN = "redirect_sign_in"
    REDIRECT_APP = "redirect_app"


def is_protected(path: str) -> bool:
    return path == PROTECTED_PREFIX or path.startswith(PROTECTED_PREFIX + "/")


def is_auth_page(path: str) -> bool:
    return path in AUTH_PAGES


def decide(path: str, authenticated: bool) -> GateDecision:
    """Decide what to do with a request.

    ``authenticated`` is False both when no token was sent and when the token
    failed verification.
    """
    if is_protected(path):
        return GateDecision.ALLOW if authenticated else GateDecision.REDIRECT_SIGN_IN
    if is_auth_page(path):
        return GateDecision.REDIRECT_APP if authenticated else GateDecision.ALLOW
    return GateDecision.ALLOW


def redirect_target(decision: GateDecision) -> str | None:
    """URL to send the client to, or None when the request may proceed."""
    if decision == GateDecision.REDIRECT_SIGN_IN:
        return SIGN_IN_URL
    if decision == GateDecision.REDIRECT_APP:
        return APP_URL
    return None
