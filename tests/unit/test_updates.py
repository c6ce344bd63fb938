"""Tests for parse_update(): field names to typed updates."""

import pytest

from roster.sdk import (
    SetActive,
    SetDepartment,
    SetExperience,
    SetName,
    SetRating,
    SetSalary,
    ValidationError,
    parse_update,
)


class TestParseUpdate:

    @pytest.mark.parametrize("field, value, expected", [
        ("name", "Jo", SetName("Jo")),
        ("department", "HR", SetDepartment("HR")),
        ("salary", 10.0, SetSalary(10.0)),
        ("rating", 4.0, SetRating(4.0)),
        ("experience", 3, SetExperience(3)),
        ("active", False, SetActive(False)),
    ])
    def test_known_fields(self, field, value, expected):
        assert parse_update(field, value) == expected

    def test_field_names_ignore_case_and_whitespace(self):
        assert parse_update(" Salary ", 1.0) == SetSalary(1.0)
        assert parse_update("RATING", 2.0) == SetRating(2.0)

    @pytest.mark.parametrize("field", ["bonus", "", None, "performance_rating"])
    def test_unknown_fields(self, field):
        with pytest.raises(ValidationError, match="Invalid field"):
            parse_update(field, 1)

    def test_values_are_not_checked_here(self):
        # The Employee model rejects it when the update is applied
        assert parse_update("salary", -1.0).value == -1.0

    def test_updates_name_their_attribute(self):
        assert SetRating(1.0).attribute == "performance_rating"
        assert SetExperience(1).attribute == "years_of_experience"
        assert SetActive(True).attribute == "is_active"
