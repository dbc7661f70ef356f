from datetime import datetime, timedelta

from werkzeug.exceptions import BadRequest

from db import ENTRY_FIELDS

ACCOUNT_NUMBERS = ("1", "2")
DEFAULT_TERM_DAYS = 14
DATE_FORMAT = "%Y-%m-%d"

# Filled in by the dashboard's shareMessage()
SHARE_TEMPLATE = """*Product*
*Ordered:* ZOOM PRO

*Go to:* https://zoom.us/signin#/login

*Log-in Details:*

*E-mail:* {gmail}
*Pass:* {password}

*Account Details:*

*Account No:* {accountNo}
*End Date:* {endDate}

Thank you for choosing *LSBD*."""


def _field_text(field, value):
    # JSON strings pass through, numbers keep their JSON spelling
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise BadRequest(f"{field} must be a string")


def validate_new_entry(data):
    """Return the six entry fields from a create request or raise BadRequest.

    Fields are checked in a fixed order and the first missing one is named.
    """
    for field in ENTRY_FIELDS:
        if not data.get(field):
            raise BadRequest(f"{field} is required")

    if data["accountNo"] not in ACCOUNT_NUMBERS:
        raise BadRequest("Account number must be 1 or 2")

    return {field: _field_text(field, data[field]) for field in ENTRY_FIELDS}


def clean_update(data):
    """Keep the editable fields of a partial update; None means "leave as is"."""
    return {field: _field_text(field, value) for field, value in data.items()
            if field in ENTRY_FIELDS and value is not None}


def derive_end_date(start_date, days=DEFAULT_TERM_DAYS):
    start = datetime.strptime(start_date, DATE_FORMAT).date()
    return (start + timedelta(days=days)).strftime(DATE_FORMAT)
