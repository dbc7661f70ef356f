from functools import wraps

from flask import current_app, redirect, request
from itsdangerous import BadSignature, URLSafeTimedSerializer
from werkzeug.exceptions import Unauthorized

SESSION_COOKIE = "session"
SESSION_VALUE = "authenticated"

DAY = 60 * 60 * 24
STANDARD_MAX_AGE = DAY
EXTENDED_MAX_AGE = 30 * DAY

PROTECTED_PREFIXES = ("/dashboard", "/add")
LOGIN_PATH = "/login"

# ---------------- SESSION TOKEN ----------------

def _serializer():
    return URLSafeTimedSerializer(current_app.config["SECRET_KEY"], salt="subscription-session")

def issue_session(response, extended=False):
    """Attach the session cookie; extended sessions last 30 days, others 1 day."""
    max_age = EXTENDED_MAX_AGE if extended else STANDARD_MAX_AGE
    response.set_cookie(
        SESSION_COOKIE,
        _serializer().dumps(SESSION_VALUE),
        max_age=max_age,
        httponly=True,
        secure=current_app.config["SESSION_COOKIE_SECURE"],
        samesite="Lax",
        path="/",
    )
    return response

def clear_session(response):
    response.delete_cookie(SESSION_COOKIE, path="/")
    return response

def is_authenticated(req=None):
    req = req or request
    token = req.cookies.get(SESSION_COOKIE)
    if not token:
        return False
    try:
        value = _serializer().loads(token, max_age=EXTENDED_MAX_AGE)
    except BadSignature:
        return False
    return value == SESSION_VALUE

# ---------------- GUARDS ----------------

def api_login_required(view):
    @wraps(view)
    def wrapped(*args, **kwargs):
        if not is_authenticated():
            raise Unauthorized("Unauthorized")
        return view(*args, **kwargs)
    return wrapped

def guard_pages():
    path = request.path
    logged_in = is_authenticated()

    if path.startswith(PROTECTED_PREFIXES) and not logged_in:
        return redirect(LOGIN_PATH)

    if path == LOGIN_PATH and logged_in:
        return redirect("/dashboard")

    return None
