"""
Tests for the sqlite store used inside an app context, and the CLI commands
built on it.
"""
import sqlite3

from flask import g
from werkzeug.security import check_password_hash, generate_password_hash

import db


class TestDefaultUser:
    def test_created_on_first_lookup(self, app, owner):
        with app.app_context():
            user = db.get_user_by_email(owner["email"])
            assert user is not None
            assert user["password"] != owner["password"]
            assert check_password_hash(user["password"], owner["password"])

    def test_created_only_once(self, app):
        with app.app_context():
            assert db.ensure_default_user() is True
            assert db.ensure_default_user() is False
            count = db.get_db().execute("SELECT COUNT(*) FROM users").fetchone()[0]
            assert count == 1

    def test_concurrent_seed_does_not_fail(self, app, owner, monkeypatch):
        """Another request inserts the user between our count and our insert."""
        def seed_elsewhere_then_hash(password):
            other = sqlite3.connect(app.config["DATABASE"])
            other.execute("INSERT INTO users (email, password) VALUES (?, ?)",
                          (owner["email"], generate_password_hash(password)))
            other.commit()
            other.close()
            return generate_password_hash(password)

        with app.app_context():
            db.get_db()
            monkeypatch.setattr(db, "generate_password_hash", seed_elsewhere_then_hash)
            assert db.ensure_default_user() is False
            count = db.get_db().execute("SELECT COUNT(*) FROM users").fetchone()[0]
            assert count == 1
            assert db.get_user_by_email(owner["email"]) is not None


class TestEntryStore:
    def test_update_skips_none_and_unknown(self, app, entry_data):
        with app.app_context():
            created = db.create_entry(entry_data)
            updated = db.update_entry(created["id"], {"gmail": None, "bogus": "x", "mobileNumber": "0199"})
            assert updated["gmail"] == entry_data["gmail"]
            assert updated["mobileNumber"] == "0199"

    def test_delete_reports_whether_removed(self, app, entry_data):
        with app.app_context():
            created = db.create_entry(entry_data)
            assert db.delete_entry(created["id"]) is True
            assert db.delete_entry(created["id"]) is False
            assert db.get_entry(created["id"]) is None

    def test_connection_closed_on_teardown(self, app):
        with app.app_context():
            db.get_db()
            assert "db" in g
        with app.app_context():
            assert "db" not in g


class TestCli:
    def test_init_db(self, app):
        result = app.test_cli_runner().invoke(args=["init-db"])
        assert "Initialized the database." in result.output
        with app.app_context():
            assert db.get_db().execute("SELECT COUNT(*) FROM users").fetchone()[0] == 1

    def test_check_db(self, app):
        result = app.test_cli_runner().invoke(args=["check-db"])
        assert result.exit_code == 0
        assert "Connection SUCCESSFUL!" in result.output
