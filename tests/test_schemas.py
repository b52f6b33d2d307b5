"""Tests for the meetup schemas and record mapping."""

from meetup_api.app.schemas.meetup import (
    FilterOptions,
    Meetup,
    MeetupListResponse,
    MeetupRead,
    MeetupUpdate,
)

MEETUP = Meetup(meetup_id=3, title="Rust Meetup", body_text="Monthly gathering")


class TestFilterOptions:
    def test_absent(self):
        assert FilterOptions().resolve() == (10, 0)

    def test_page_offset(self):
        assert FilterOptions(limit=2, offset=2).resolve() == (2, 2)
        assert FilterOptions(limit=25, offset=3).resolve() == (25, 50)

    def test_limit_only(self):
        assert FilterOptions(limit=4).resolve() == (4, 0)


class TestMeetupUpdate:
    def test_title_only(self):
        updated = MeetupUpdate(title="X").apply_to(MEETUP)
        assert updated == Meetup(meetup_id=3, title="X", body_text="Monthly gathering")

    def test_empty_patch(self):
        assert MeetupUpdate().apply_to(MEETUP) == MEETUP

    def test_source_not_mutated(self):
        MeetupUpdate(title="X", body_text="Y").apply_to(MEETUP)
        assert MEETUP.title == "Rust Meetup"
        assert MEETUP.body_text == "Monthly gathering"


class TestMeetupRead:
    def test_projection_is_lossless(self):
        view = MeetupRead.from_record(MEETUP)
        assert view.model_dump() == {
            "meetup_id": 3,
            "title": "Rust Meetup",
            "body_text": "Monthly gathering",
        }

    def test_list_envelope(self):
        response = MeetupListResponse.from_records([MEETUP, MEETUP])
        assert response.status == "success"
        assert response.count == 2
        assert len(response.data) == 2
