"""
Tests for the per-entity validation rules.
"""

import pytest

from church_records_api.app.core.errors import MemberNotFoundError, ValidationError
from church_records_api.app.services import validation

MEMBER = {"name": "Ana", "contact": "a@x.com", "membershipStatus": "Active"}
EVENT = {
    "title": "Easter Service",
    "description": "Sunrise worship",
    "dateTime": "2025-04-20T06:30:00Z",
    "location": "Main Hall",
}
CONTRIBUTION = {"memberId": "m1", "type": "Tithe", "amount": 50, "description": "Sunday"}


def without(data: dict, key: str) -> dict:
    return {k: v for k, v in data.items() if k != key}


class TestMember:
    def test_valid(self):
        member = validation.validate_member(MEMBER)
        assert member.membership_status == "Active"

    def test_accepts_snake_case_names(self):
        member = validation.validate_member(
            {"name": "Ana", "contact": "a@x.com", "membership_status": "Active"}
        )
        assert member.membership_status == "Active"

    @pytest.mark.parametrize("field", ["name", "contact", "membershipStatus"])
    def test_missing_field(self, field):
        with pytest.raises(ValidationError) as exc_info:
            validation.validate_member(without(MEMBER, field))
        assert exc_info.value.field == field
        assert exc_info.value.reason == f"Missing required field '{field}'"

    @pytest.mark.parametrize("value", [5, None, ["Ana"], True])
    def test_wrong_type(self, value):
        with pytest.raises(ValidationError) as exc_info:
            validation.validate_member({**MEMBER, "name": value})
        assert exc_info.value.reason.startswith("Invalid value for field 'name'")

    def test_empty_string_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            validation.validate_member({**MEMBER, "contact": ""})
        assert exc_info.value.field == "contact"

    def test_non_mapping_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            validation.validate_member(["Ana", "a@x.com", "Active"])
        assert exc_info.value.reason.startswith("Invalid input")

    def test_update_uses_the_same_rules(self):
        with pytest.raises(ValidationError):
            validation.validate_member_update({**MEMBER, "name": 42})
        assert validation.validate_member_update(MEMBER).name == "Ana"


class TestEvent:
    def test_valid_iso_string(self):
        event = validation.validate_event(EVENT)
        assert event.date_time.year == 2025

    def test_valid_unix_timestamp(self):
        event = validation.validate_event({**EVENT, "dateTime": 1745130600})
        assert event.date_time.year == 2025

    def test_missing_date_time(self):
        with pytest.raises(ValidationError) as exc_info:
            validation.validate_event(without(EVENT, "dateTime"))
        assert exc_info.value.field == "dateTime"

    def test_unparseable_date_time(self):
        with pytest.raises(ValidationError) as exc_info:
            validation.validate_event({**EVENT, "dateTime": "next sunday"})
        assert exc_info.value.field == "dateTime"

    @pytest.mark.parametrize("field", ["title", "description", "location"])
    def test_missing_text_field(self, field):
        with pytest.raises(ValidationError):
            validation.validate_event(without(EVENT, field))


class TestDonation:
    def test_valid(self):
        donation = validation.validate_donation({"donorId": "d1", "amount": 12.5})
        assert donation.amount == 12.5

    @pytest.mark.parametrize(
        "amount", ["50", True, None, 0, float("nan"), float("inf"), float("-inf")]
    )
    def test_bad_amount(self, amount):
        with pytest.raises(ValidationError) as exc_info:
            validation.validate_donation({"donorId": "d1", "amount": amount})
        assert exc_info.value.field == "amount"

    def test_missing_donor(self):
        with pytest.raises(ValidationError) as exc_info:
            validation.validate_donation({"amount": 10})
        assert exc_info.value.reason == "Missing required field 'donorId'"


class TestContribution:
    def test_valid_tithe_without_commitment_date(self):
        contribution = validation.validate_contribution(CONTRIBUTION)
        assert contribution.commitment_date is None
        assert not contribution.is_pledge

    def test_pledge_requires_commitment_date(self):
        with pytest.raises(ValidationError) as exc_info:
            validation.validate_contribution({**CONTRIBUTION, "type": "Pledge"})
        assert exc_info.value.field == "commitmentDate"
        assert "Pledge" in exc_info.value.reason

    def test_commitment_date_not_parsed_for_non_pledge(self):
        contribution = validation.validate_contribution(
            {**CONTRIBUTION, "commitmentDate": "soon"}
        )
        assert contribution.commitment_date is None

    @pytest.mark.parametrize("value", [0, "", None])
    def test_falsy_pledge_commitment_date_is_missing(self, value):
        with pytest.raises(ValidationError) as exc_info:
            validation.validate_contribution(
                {**CONTRIBUTION, "type": "Pledge", "commitmentDate": value}
            )
        assert exc_info.value.field == "commitmentDate"
        assert "Pledge" in exc_info.value.reason

    def test_pledge_with_commitment_date(self):
        contribution = validation.validate_contribution(
            {**CONTRIBUTION, "type": "Pledge", "commitmentDate": "2025-12-01T00:00:00Z"}
        )
        assert contribution.is_pledge
        assert contribution.commitment_date.month == 12

    def test_field_rules_run_before_pledge_rule(self):
        with pytest.raises(ValidationError) as exc_info:
            validation.validate_contribution(
                {"memberId": "m1", "type": "Pledge", "amount": 50}
            )
        assert exc_info.value.field == "description"

    @pytest.mark.parametrize("field", ["memberId", "type", "amount", "description"])
    def test_missing_field(self, field):
        with pytest.raises(ValidationError) as exc_info:
            validation.validate_contribution(without(CONTRIBUTION, field))
        assert exc_info.value.field == field


class TestPrayerRequestAndContent:
    def test_prayer_request(self):
        prayer = validation.validate_prayer_request({"memberId": "anyone", "request": "Peace"})
        assert prayer.member_id == "anyone"

    def test_prayer_request_missing_request(self):
        with pytest.raises(ValidationError):
            validation.validate_prayer_request({"memberId": "m1"})

    def test_content(self):
        content = validation.validate_content(
            {"type": "Sermon", "title": "Grace", "content": "..."}
        )
        assert content.type == "Sermon"

    def test_content_wrong_type(self):
        with pytest.raises(ValidationError) as exc_info:
            validation.validate_content({"type": "Sermon", "title": 3, "content": "..."})
        assert exc_info.value.field == "title"


def test_ensure_member_exists(repos, member):
    assert validation.ensure_member_exists(repos.members, member.id).name == "Ana"
    with pytest.raises(MemberNotFoundError):
        validation.ensure_member_exists(repos.members, "ghost")
