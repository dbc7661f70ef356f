import sqlite3
import uuid
from datetime import datetime, timezone

from flask import current_app, g
from werkzeug.security import generate_password_hash

ENTRY_FIELDS = ("gmail", "password", "startDate", "endDate", "accountNo", "mobileNumber")

# wire name -> column name
COLUMNS = {
    "gmail": "gmail",
    "password": "password",
    "startDate": "start_date",
    "endDate": "end_date",
    "accountNo": "account_no",
    "mobileNumber": "mobile_number",
}

SCHEMA = """
CREATE TABLE IF NOT EXISTS users(
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    email TEXT UNIQUE NOT NULL,
    password TEXT NOT NULL,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

CREATE TABLE IF NOT EXISTS entries(
    seq INTEGER PRIMARY KEY AUTOINCREMENT,
    id TEXT UNIQUE NOT NULL,
    gmail TEXT NOT NULL,
    password TEXT NOT NULL,
    start_date TEXT NOT NULL,
    end_date TEXT NOT NULL,
    account_no TEXT NOT NULL,
    mobile_number TEXT NOT NULL,
    created_at TEXT NOT NULL
);
"""

# ---------------- DATABASE CONNECTION ----------------

def get_db():
    if "db" not in g:
        g.db = sqlite3.connect(current_app.config["DATABASE"])
        g.db.row_factory = sqlite3.Row
        g.db.executescript(SCHEMA)
    return g.db

def close_db(exception=None):
    db = g.pop("db", None)
    if db is not None:
        db.close()

# ---------------- INIT DATABASE ----------------

def init_db():
    """Create tables if missing and seed the single application user."""
    db = get_db()
    db.executescript(SCHEMA)
    ensure_default_user()

def ensure_default_user():
    db = get_db()
    count = db.execute("SELECT COUNT(*) AS count FROM users").fetchone()["count"]
    if count:
        return False

    email = current_app.config["DEFAULT_USER_EMAIL"]
    # another request may have seeded the user since the count
    cur = db.execute("INSERT OR IGNORE INTO users (email, password) VALUES (?, ?)",
                     (email, generate_password_hash(current_app.config["DEFAULT_USER_PASSWORD"])))
    db.commit()
    if cur.rowcount == 0:
        return False
    current_app.logger.info("Default user created: %s", email)
    return True

# ---------------- USERS ----------------

def get_user_by_email(email):
    ensure_default_user()
    return get_db().execute("SELECT * FROM users WHERE email = ?", (email,)).fetchone()

# ---------------- ENTRIES ----------------

def _now():
    stamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    return stamp.replace("+00:00", "Z")

def entry_to_dict(row):
    """Wire shape of an entry row; the internal ``seq`` column is dropped."""
    entry = {"id": row["id"]}
    for field, column in COLUMNS.items():
        entry[field] = row[column]
    entry["createdAt"] = row["created_at"]
    return entry

def list_entries():
    rows = get_db().execute("""
        SELECT * FROM entries
        ORDER BY created_at DESC, seq DESC
    """).fetchall()
    return [entry_to_dict(r) for r in rows]

def get_entry(entry_id):
    row = get_db().execute("SELECT * FROM entries WHERE id = ?", (entry_id,)).fetchone()
    return entry_to_dict(row) if row else None

def create_entry(fields):
    db = get_db()
    entry_id = uuid.uuid4().hex
    values = [str(fields[f]) for f in ENTRY_FIELDS]

    try:
        db.execute("""
            INSERT INTO entries (id, gmail, password, start_date, end_date,
                                 account_no, mobile_number, created_at)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?)
        """, (entry_id, *values, _now()))
        db.commit()
    except sqlite3.Error:
        db.rollback()
        raise

    return get_entry(entry_id)

def update_entry(entry_id, updates):
    """Apply a partial update. Returns the updated entry, or None if no entry has that id."""
    changes = {COLUMNS[k]: v for k, v in updates.items()
               if k in COLUMNS and v is not None}
    db = get_db()

    if not changes:
        return get_entry(entry_id)

    assignments = ", ".join(f"{column} = ?" for column in changes)
    try:
        cur = db.execute(f"UPDATE entries SET {assignments} WHERE id = ?",
                         (*changes.values(), entry_id))
        db.commit()
    except sqlite3.Error:
        db.rollback()
        raise

    if cur.rowcount == 0:
        return None
    return get_entry(entry_id)

def delete_entry(entry_id):
    db = get_db()
    try:
        cur = db.execute("DELETE FROM entries WHERE id = ?", (entry_id,))
        db.commit()
    except sqlite3.Error:
        db.rollback()
        raise
    return cur.rowcount > 0

def check_connection():
    return get_db().execute("SELECT 1").fetchone()[0] == 1
