"""
Tests for approval decisions and partial content updates.
"""
from datetime import datetime, timedelta

import pytest

from app.exceptions import NotFoundError
from app.models.content import Approved, Pending, Rejected
from app.services.lifecycle import approve_content, update_content
from app.timeutils import as_utc, utcnow

LAST_WEEK = utcnow() - timedelta(days=7)


class TestApproveContent:
    """Test approve/reject transitions."""

    def test_approve(self, db, make_content, reviewer):
        content = make_content(status="pending_approval", updated_at=LAST_WEEK)

        result = approve_content(db, content.id, approved_by=reviewer.id, approved=True)

        assert result.status == "approved"
        assert result.approved_by == reviewer.id
        assert result.approved_at is not None
        assert result.rejected_reason is None
        assert as_utc(result.updated_at) > LAST_WEEK
        assert isinstance(result.approval_outcome, Approved)

    def test_reject_with_reason(self, db, make_content, reviewer):
        content = make_content(status="pending_approval")

        result = approve_content(
            db, content.id, approved_by=reviewer.id, approved=False, rejection_reason="bad tone"
        )

        assert result.status == "rejected"
        assert result.rejected_reason == "bad tone"
        assert result.approved_by is None
        assert result.approved_at is None
        assert result.approval_outcome == Rejected(reason="bad tone")

    def test_reject_without_reason_uses_default(self, db, make_content, reviewer):
        content = make_content(status="pending_approval")

        result = approve_content(db, content.id, approved_by=reviewer.id, approved=False)

        assert result.rejected_reason == "No reason provided"

    def test_reject_after_approve_clears_approval(self, db, make_content, reviewer):
        """Approved at T1 then rejected at T2: only the rejection remains."""
        content = make_content(status="pending_approval")
        approve_content(db, content.id, approved_by=reviewer.id, approved=True)

        result = approve_content(
            db, content.id, approved_by=reviewer.id, approved=False, rejection_reason="bad tone"
        )

        assert result.approved_by is None
        assert result.approved_at is None
        assert result.rejected_reason == "bad tone"

    def test_approve_after_reject_clears_reason(self, db, make_content, reviewer):
        content = make_content(status="pending_approval")
        approve_content(db, content.id, approved_by=reviewer.id, approved=False, rejection_reason="typo")

        result = approve_content(db, content.id, approved_by=reviewer.id, approved=True)

        assert result.status == "approved"
        assert result.rejected_reason is None
        assert result.approved_by == reviewer.id

    @pytest.mark.parametrize("status", ["draft", "scheduled", "published", "approved"])
    def test_any_prior_status_can_be_decided(self, db, make_content, reviewer, status):
        content = make_content(status=status)
        result = approve_content(db, content.id, approved_by=reviewer.id, approved=True)
        assert result.status == "approved"

    def test_missing_content(self, db, reviewer):
        with pytest.raises(NotFoundError, match="Content with id 999 not found"):
            approve_content(db, 999, approved_by=reviewer.id, approved=True)

    def test_fresh_content_outcome_is_pending(self, make_content):
        assert make_content().approval_outcome == Pending()


class TestUpdateContent:
    """Test partial updates."""

    def test_omitted_fields_are_untouched(self, db, make_content):
        content = make_content(hashtags="#launch")

        result = update_content(db, content.id, {"title": "New title"})

        assert result.title == "New title"
        assert result.caption == "Our new product is here"
        assert result.hashtags == "#launch"

    def test_explicit_null_clears(self, db, make_content):
        content = make_content(hashtags="#launch", rejected_reason="old")

        result = update_content(db, content.id, {"hashtags": None, "rejected_reason": None})

        assert result.hashtags is None
        assert result.rejected_reason is None

    def test_status_change_does_not_touch_approval_fields(self, db, make_content):
        content = make_content()

        result = update_content(db, content.id, {"status": "approved"})

        assert result.status == "approved"
        assert result.approved_by is None
        assert result.approved_at is None

    def test_missing_content(self, db):
        with pytest.raises(NotFoundError):
            update_content(db, 404, {"title": "x"})

    def test_update_refreshes_updated_at(self, db, make_content):
        content = make_content(updated_at=LAST_WEEK)

        result = update_content(db, content.id, {"caption": "Edited"})

        assert as_utc(result.updated_at) > LAST_WEEK

    def test_empty_update_still_refreshes_updated_at(self, db, make_content):
        """No fields sent: only the timestamp moves."""
        content = make_content(updated_at=LAST_WEEK)

        result = update_content(db, content.id, {})

        assert as_utc(result.updated_at) > LAST_WEEK
        assert result.title == "Launch post"


class TestLifecycleEndpoints:
    """Test approval and update routes."""

    def test_approve_endpoint(self, client, make_content, reviewer):
        content = make_content(status="pending_approval")
        response = client.post(
            f"/api/content/{content.id}/approval",
            json={"approved_by": reviewer.id, "approved": True},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "approved"
        assert data["approved_by"] == reviewer.id
        assert data["approved_at"] is not None

    def test_reject_endpoint(self, client, make_content, reviewer):
        content = make_content(status="pending_approval")
        response = client.post(
            f"/api/content/{content.id}/approval",
            json={"approved_by": reviewer.id, "approved": False, "rejection_reason": "off brand"},
        )
        assert response.status_code == 200
        assert response.json()["rejected_reason"] == "off brand"

    def test_approve_missing_content(self, client, reviewer):
        response = client.post(
            "/api/content/31337/approval",
            json={"approved_by": reviewer.id, "approved": True},
        )
        assert response.status_code == 404
        assert response.json()["error_code"] == "NOT_FOUND"

    def test_patch_distinguishes_null_from_omitted(self, client, make_content):
        content = make_content(hashtags="#keep", scheduled_at=None)

        response = client.patch(f"/api/content/{content.id}", json={"caption": "Edited"})
        assert response.status_code == 200
        assert response.json()["hashtags"] == "#keep"

        response = client.patch(f"/api/content/{content.id}", json={"hashtags": None})
        assert response.status_code == 200
        assert response.json()["hashtags"] is None
        assert response.json()["caption"] == "Edited"

    def test_patch_rejects_null_title(self, client, make_content):
        content = make_content()
        response = client.patch(f"/api/content/{content.id}", json={"title": None})
        assert response.status_code == 422

    def test_patch_missing_content(self, client):
        response = client.patch("/api/content/999", json={"title": "x"})
        assert response.status_code == 404

    @pytest.mark.parametrize("field", ["title", "caption"])
    def test_patch_rejects_empty_text(self, client, db, make_content, field):
        """An empty title or caption is refused before anything is written."""
        content = make_content()
        original = getattr(content, field)

        response = client.patch(f"/api/content/{content.id}", json={field: ""})
        assert response.status_code == 422

        db.refresh(content)
        assert getattr(content, field) == original
        assert client.get(f"/api/content/{content.id}").status_code == 200

    def test_timestamps_are_returned_as_utc(self, client, make_content, reviewer):
        content = make_content(status="pending_approval")
        data = client.post(
            f"/api/content/{content.id}/approval",
            json={"approved_by": reviewer.id, "approved": True},
        ).json()

        for field in ("approved_at", "created_at", "updated_at"):
            value = datetime.fromisoformat(data[field].replace("Z", "+00:00"))
            assert value.utcoffset() == timedelta(0)
