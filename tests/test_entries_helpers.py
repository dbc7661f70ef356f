"""
Tests for entry validation and end-date derivation.
"""
import pytest
from werkzeug.exceptions import BadRequest

from entries import clean_update, derive_end_date, validate_new_entry


class TestDeriveEndDate:
    @pytest.mark.parametrize("start, end", [
        ("2025-01-01", "2025-01-15"),
        ("2024-02-20", "2024-03-05"),
        ("2025-12-25", "2026-01-08"),
    ])
    def test_fourteen_days_later(self, start, end):
        assert derive_end_date(start) == end

    def test_custom_term(self):
        assert derive_end_date("2025-01-01", days=30) == "2025-01-31"


class TestValidateNewEntry:
    def test_drops_unknown_keys(self, entry_data):
        fields = validate_new_entry({**entry_data, "id": "x", "extra": 1})
        assert fields == entry_data

    def test_raises_bad_request(self, entry_data):
        with pytest.raises(BadRequest) as exc:
            validate_new_entry({**entry_data, "accountNo": "9"})
        assert exc.value.description == "Account number must be 1 or 2"

    def test_number_keeps_json_spelling(self, entry_data):
        fields = validate_new_entry({**entry_data, "mobileNumber": 1712345678})
        assert fields["mobileNumber"] == "1712345678"

    @pytest.mark.parametrize("value", [True, ["a@gmail.com"], {"a": 1}])
    def test_non_text_value_rejected(self, entry_data, value):
        with pytest.raises(BadRequest) as exc:
            validate_new_entry({**entry_data, "gmail": value})
        assert exc.value.description == "gmail must be a string"


class TestCleanUpdate:
    def test_keeps_only_entry_fields(self):
        updates = clean_update({"id": "x", "createdAt": "2000", "bogus": 1, "gmail": "a@gmail.com"})
        assert updates == {"gmail": "a@gmail.com"}

    def test_none_means_unchanged(self):
        assert clean_update({"gmail": None, "password": "p"}) == {"password": "p"}

    def test_numbers_become_text(self):
        assert clean_update({"mobileNumber": 123, "accountNo": 2}) == {"mobileNumber": "123", "accountNo": "2"}

    @pytest.mark.parametrize("value", [True, False, [1], {"x": "y"}])
    def test_non_text_value_rejected(self, value):
        with pytest.raises(BadRequest) as exc:
            clean_update({"accountNo": value})
        assert exc.value.description == "accountNo must be a string"
