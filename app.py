from flask import Blueprint, Flask, current_app, jsonify, redirect, render_template_string, request
from werkzeug.exceptions import BadRequest, HTTPException, InternalServerError, NotFound, Unauthorized
from werkzeug.security import check_password_hash
from logging.handlers import RotatingFileHandler
from datetime import datetime
import logging, os

import click
from flask.cli import with_appcontext

import db
from auth import api_login_required, clear_session, guard_pages, issue_session
from entries import DEFAULT_TERM_DAYS, SHARE_TEMPLATE, clean_update, derive_end_date, validate_new_entry
from pages import ADD_ENTRY_PAGE, BASE_STYLE, DASHBOARD_PAGE, LOGIN_TEMPLATE

bp = Blueprint("subscriptions", __name__)

# ---------------- APP SETUP ----------------

def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_mapping(
        SECRET_KEY=os.environ.get("SECRET_KEY", "supersecretkey123!@#"),
        DATABASE=os.environ.get("DATABASE", "subscriptions.db"),
        DEFAULT_USER_EMAIL=os.environ.get("DEFAULT_USER_EMAIL", "admin@example.com"),
        DEFAULT_USER_PASSWORD=os.environ.get("DEFAULT_USER_PASSWORD", "admin123"),
        SESSION_COOKIE_SECURE=os.environ.get("FLASK_ENV") == "production",
        SESSION_COOKIE_NAME="flask_session",
        LOG_DIR=os.environ.get("LOG_DIR", "logs"),
    )
    if test_config:
        app.config.update(test_config)

    setup_logging(app)

    app.teardown_appcontext(db.close_db)
    app.before_request(guard_pages)
    app.register_error_handler(HTTPException, handle_http_error)
    app.register_blueprint(bp)
    app.cli.add_command(init_db_command)
    app.cli.add_command(check_db_command)

    app.logger.info("Subscription manager startup")
    return app

def setup_logging(app):
    if app.debug or app.testing:
        return
    os.makedirs(app.config["LOG_DIR"], exist_ok=True)
    file_handler = RotatingFileHandler(os.path.join(app.config["LOG_DIR"], "subscriptions.log"),
                                       maxBytes=10240, backupCount=10)
    file_handler.setFormatter(logging.Formatter(
        '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
    ))
    file_handler.setLevel(logging.INFO)
    app.logger.addHandler(file_handler)
    app.logger.setLevel(logging.INFO)

def handle_http_error(e):
    # API callers get JSON; pages keep werkzeug's HTML error
    if request.path.startswith("/api/"):
        return jsonify(error=e.description), e.code
    return e

def json_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise BadRequest("Invalid JSON body")
    return data

# ---------------- CLI ----------------

@click.command("init-db")
@with_appcontext
def init_db_command():
    """Create the tables and the default user."""
    db.init_db()
    click.echo("Initialized the database.")

@click.command("check-db")
@with_appcontext
def check_db_command():
    """Open the configured database and run a trivial query."""
    click.echo(f"Connecting to {current_app.config['DATABASE']}...")
    try:
        db.check_connection()
    except Exception as e:
        raise click.ClickException(f"Connection FAILED: {e}")
    click.echo("Connection SUCCESSFUL!")

# ---------------- PAGES ----------------

@bp.route("/")
def home():
    return redirect("/dashboard")

@bp.route("/login")
def login_page():
    return render_template_string(LOGIN_TEMPLATE)

@bp.route("/dashboard")
def dashboard():
    return render_template_string(DASHBOARD_PAGE,
                                  base_style=BASE_STYLE,
                                  share_template=SHARE_TEMPLATE,
                                  fields=db.ENTRY_FIELDS)

@bp.route("/add")
def add_entry_page():
    today = datetime.now().strftime("%Y-%m-%d")
    return render_template_string(ADD_ENTRY_PAGE,
                                  base_style=BASE_STYLE,
                                  start_date=today,
                                  end_date=derive_end_date(today),
                                  term_days=DEFAULT_TERM_DAYS,
                                  fields=db.ENTRY_FIELDS)

# ---------------- AUTH API ----------------

@bp.route("/api/login", methods=["POST"])
def login():
    data = json_body()
    email = data.get("email")
    password = data.get("password")

    if not email or not password:
        raise BadRequest("Email and password are required")

    try:
        user = db.get_user_by_email(str(email))
    except Exception:
        current_app.logger.exception("Login lookup failed")
        raise InternalServerError("An error occurred during login")

    if user is None or not check_password_hash(user["password"], str(password)):
        current_app.logger.warning("Failed login for %s", email)
        raise Unauthorized("Invalid email or password")

    current_app.logger.info("Login for %s (remember me: %s)", email, bool(data.get("rememberMe")))
    response = jsonify(success=True, message="Login successful")
    return issue_session(response, extended=bool(data.get("rememberMe")))

@bp.route("/api/logout", methods=["POST"])
def logout():
    return clear_session(jsonify(success=True))

# ---------------- ENTRIES API ----------------

@bp.route("/api/entries", methods=["GET"])
@api_login_required
def list_entries():
    try:
        entries = db.list_entries()
    except Exception:
        current_app.logger.exception("Failed to fetch entries")
        raise InternalServerError("Failed to fetch entries")
    return jsonify(entries=entries)

@bp.route("/api/entries", methods=["POST"])
@api_login_required
def create_entry():
    fields = validate_new_entry(json_body())

    try:
        entry = db.create_entry(fields)
    except Exception:
        current_app.logger.exception("Failed to create entry")
        raise InternalServerError("Failed to create entry")

    current_app.logger.info("Entry %s created", entry["id"])
    return jsonify(entry=entry), 201

@bp.route("/api/entries", methods=["PATCH"])
@api_login_required
def update_entry():
    data = json_body()
    entry_id = data.get("id")

    if not entry_id:
        raise BadRequest("Entry ID is required")

    updates = clean_update(data)

    try:
        entry = db.update_entry(str(entry_id), updates)
    except Exception:
        current_app.logger.exception("Failed to update entry %s", entry_id)
        raise InternalServerError("Failed to update entry")

    if entry is None:
        raise NotFound("Entry not found")

    current_app.logger.info("Entry %s updated", entry_id)
    return jsonify(entry=entry)

@bp.route("/api/entries", methods=["DELETE"])
@api_login_required
def delete_entry():
    entry_id = request.args.get("id")

    if not entry_id:
        raise BadRequest("Entry ID is required")

    try:
        deleted = db.delete_entry(entry_id)
    except Exception:
        current_app.logger.exception("Failed to delete entry %s", entry_id)
        raise InternalServerError("Failed to delete entry")

    if not deleted:
        raise NotFound("Entry not found")

    current_app.logger.info("Entry %s deleted", entry_id)
    return jsonify(success=True)

if __name__ == "__main__":
    port = int(os.environ.get("PORT", 5000))
    create_app().run(host="0.0.0.0", port=port)
