"""
Tests for the content calendar and analytics queries.
"""
from datetime import datetime, timezone

from app.services.analytics import get_content_analytics
from app.services.calendar import get_content_calendar


def utc(*args):
    return datetime(*args, tzinfo=timezone.utc)


START = utc(2024, 1, 1)
END = utc(2024, 1, 31, 23, 59, 59)


class TestContentCalendar:
    """Test calendar range queries."""

    def test_only_content_with_schedule_in_range(self, db, make_content, test_user):
        make_content(title="Scheduled", status="scheduled", scheduled_at=utc(2024, 1, 15, 10))
        make_content(title="Approved", status="approved", scheduled_at=utc(2024, 1, 20, 10))
        make_content(title="Draft", status="draft")
        make_content(title="Before", status="scheduled", scheduled_at=utc(2023, 12, 31, 23, 59, 59))
        make_content(title="After", status="scheduled", scheduled_at=utc(2024, 2, 1, 0, 0, 1))

        result = get_content_calendar(db, test_user.id, START, END)

        assert [c.title for c in result] == ["Scheduled", "Approved"]

    def test_boundaries_are_inclusive(self, db, make_content, test_user):
        make_content(title="Start", status="scheduled", scheduled_at=START)
        make_content(title="End", status="scheduled", scheduled_at=END)

        result = get_content_calendar(db, test_user.id, START, END)

        assert [c.title for c in result] == ["Start", "End"]

    def test_platform_and_status_filters(self, db, make_content, test_user):
        make_content(title="IG scheduled", platform="instagram", status="scheduled", scheduled_at=utc(2024, 1, 5))
        make_content(title="IG approved", platform="instagram", status="approved", scheduled_at=utc(2024, 1, 6))
        make_content(title="X scheduled", platform="twitter", status="scheduled", scheduled_at=utc(2024, 1, 7))
        user_id = test_user.id

        assert [c.title for c in get_content_calendar(db, user_id, START, END, platform="instagram")] == [
            "IG scheduled",
            "IG approved",
        ]
        assert [c.title for c in get_content_calendar(db, user_id, START, END, status="scheduled")] == [
            "IG scheduled",
            "X scheduled",
        ]
        assert [
            c.title
            for c in get_content_calendar(db, user_id, START, END, platform="instagram", status="approved")
        ] == ["IG approved"]

    def test_other_users_content_is_excluded(self, db, make_content, reviewer, test_user):
        make_content(status="scheduled", scheduled_at=utc(2024, 1, 5), user_id=reviewer.id)
        assert get_content_calendar(db, test_user.id, START, END) == []

    def test_endpoint(self, client, make_content, test_user):
        make_content(title="In range", status="scheduled", scheduled_at=utc(2024, 1, 10))

        response = client.get(
            "/api/calendar",
            params={
                "user_id": test_user.id,
                "start_date": "2024-01-01T00:00:00Z",
                "end_date": "2024-01-31T23:59:59Z",
                "platform": "instagram",
            },
        )

        assert response.status_code == 200
        assert [c["title"] for c in response.json()] == ["In range"]


class TestContentAnalytics:
    """Test content counts."""

    def test_counts(self, db, make_content, test_user):
        make_content(platform="instagram", status="approved", ai_generated=True)
        make_content(platform="instagram", status="rejected")
        make_content(platform="twitter", status="scheduled", ai_generated=True)
        make_content(platform="linkedin", status="published")
        make_content(platform="linkedin", status="draft")

        result = get_content_analytics(db, test_user.id)

        assert result.total_content == 5
        assert result.ai_generated_content == 2
        assert result.approved_content == 1
        assert result.rejected_content == 1
        assert result.scheduled_content == 1
        assert result.published_content == 1
        assert result.by_platform == {"instagram": 2, "facebook": 0, "twitter": 1, "linkedin": 2}
        assert result.by_status == {
            "draft": 1,
            "pending_approval": 0,
            "approved": 1,
            "rejected": 1,
            "scheduled": 1,
            "published": 1,
        }

    def test_empty(self, db, test_user):
        result = get_content_analytics(db, test_user.id)
        assert result.total_content == 0
        assert set(result.by_platform.values()) == {0}
        assert len(result.by_status) == 6

    def test_date_and_platform_filters(self, db, make_content, test_user):
        make_content(platform="instagram", created_at=utc(2024, 1, 10))
        make_content(platform="twitter", created_at=utc(2024, 1, 11))
        make_content(platform="instagram", created_at=utc(2024, 3, 1))

        in_january = get_content_analytics(db, test_user.id, start_date=START, end_date=END)
        assert in_january.total_content == 2

        instagram_january = get_content_analytics(
            db, test_user.id, start_date=START, end_date=END, platform="instagram"
        )
        assert instagram_january.total_content == 1
        assert instagram_january.by_platform["twitter"] == 0

    def test_endpoint(self, client, make_content, test_user, reviewer):
        make_content(platform="facebook", status="approved")
        make_content(platform="facebook", status="approved", user_id=reviewer.id)

        response = client.get("/api/analytics/content", params={"user_id": test_user.id})

        assert response.status_code == 200
        data = response.json()
        assert data["total_content"] == 1
        assert data["by_platform"]["facebook"] == 1
        assert data["by_status"]["approved"] == 1
