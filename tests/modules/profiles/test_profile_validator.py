"""Tests for profile validation rules."""

from datetime import date

import pytest

from modules.profiles.models import FailureReason, NewProfile, Profile, ProfileChanges
from modules.profiles.validator import (
    blanked_required_fields,
    classify_existing_profile,
    missing_required_fields,
    normalize_email,
    validate_new_profile,
)


def make_profile(**overrides) -> Profile:
    data = {
        "id": "profile-123",
        "email": "existing@example.com",
        "password_hash": "hash",
        "full_name": "Existing Person",
        "birthday": date(1990, 5, 17),
        "is_email_confirmed": True,
        "is_deactivated": False,
    }
    data.update(overrides)
    return Profile(**data)


def complete_candidate(**overrides) -> NewProfile:
    data = {
        "email": "new@example.com",
        "password": "P@ssw0rd",
        "full_name": "New Person",
        "birthday": date(2000, 1, 1),
    }
    data.update(overrides)
    return NewProfile(**data)


class TestNormalizeEmail:
    def test_lowercases_and_strips(self):
        assert normalize_email("  Someone@Example.COM ") == "someone@example.com"

    def test_none_becomes_empty(self):
        assert normalize_email(None) == ""


class TestMissingRequiredFields:
    def test_complete_candidate(self):
        assert missing_required_fields(complete_candidate()) == []

    @pytest.mark.parametrize("field", ["email", "password", "full_name", "birthday"])
    def test_each_missing_field_is_reported(self, field):
        candidate = complete_candidate(**{field: None})
        assert missing_required_fields(candidate) == [field]

    def test_blank_strings_count_as_missing(self):
        candidate = complete_candidate(email="   ", full_name="")
        assert missing_required_fields(candidate) == ["email", "full_name"]


class TestBlankedRequiredFields:
    def test_unset_fields_are_ignored(self):
        assert blanked_required_fields(ProfileChanges()) == []

    def test_explicit_blank_is_reported(self):
        changes = ProfileChanges(full_name=" ")
        assert blanked_required_fields(changes) == ["full_name"]

    def test_explicit_none_is_reported(self):
        changes = ProfileChanges(birthday=None)
        assert blanked_required_fields(changes) == ["birthday"]


class TestClassifyExistingProfile:
    def test_confirmed_active(self):
        assert classify_existing_profile(make_profile()) == [FailureReason.DUPLICATE_EMAIL]

    def test_unconfirmed_active(self):
        existing = make_profile(is_email_confirmed=False)
        assert classify_existing_profile(existing) == [
            FailureReason.DUPLICATE_EMAIL,
            FailureReason.UNCONFIRMED_EMAIL,
        ]

    def test_confirmed_deactivated(self):
        existing = make_profile(is_deactivated=True)
        assert classify_existing_profile(existing) == [
            FailureReason.DUPLICATE_EMAIL,
            FailureReason.INACTIVE_PROFILE,
        ]

    def test_unconfirmed_deactivated(self):
        existing = make_profile(is_deactivated=True, is_email_confirmed=False)
        assert classify_existing_profile(existing) == [
            FailureReason.DUPLICATE_EMAIL,
            FailureReason.INACTIVE_PROFILE,
            FailureReason.UNCONFIRMED_EMAIL,
        ]


class TestValidateNewProfile:
    def test_no_existing_profile(self):
        assert validate_new_profile(complete_candidate(), None) == []

    def test_missing_field_takes_precedence_over_duplicate(self):
        existing = make_profile(is_deactivated=True, is_email_confirmed=False)
        candidate = complete_candidate(birthday=None)
        assert validate_new_profile(candidate, existing) == [FailureReason.MISSING_REQUIRED]

    def test_duplicate(self):
        assert validate_new_profile(complete_candidate(), make_profile()) == [
            FailureReason.DUPLICATE_EMAIL
        ]
