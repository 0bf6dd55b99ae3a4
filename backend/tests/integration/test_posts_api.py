"""Integration tests for post endpoints

Tests cover:
- Public listing and single post lookup
- Post creation and its validation rules
- Owner/admin permissions on update and delete
- Admin moderation and CSV export
"""

from datetime import date, timedelta
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from lostify.models.post import Post

pytestmark = pytest.mark.integration

NEW_POST = {
    "title": "Black Wallet",
    "description": "lost near gym",
    "type": "lost",
    "category": "Wallets",
    "location": "Gym",
    "contact_info": "+91 98765 43210",
}


class TestCreatePost:
    """Test POST /api/posts"""

    def test_create_post(self, alice_client: TestClient, alice):
        response = alice_client.post("/api/posts", json={**NEW_POST, "date": "2024-03-01"})

        assert response.status_code == 201
        data = response.json()
        assert data["title"] == "Black Wallet"
        assert data["status"] == "active"
        assert data["flagged"] is False
        assert data["owner_id"] == str(alice.id)
        assert data["username"] == "alice"
        assert data["date"] == "2024-03-01"

    def test_date_defaults_to_today(self, alice_client: TestClient):
        response = alice_client.post("/api/posts", json=NEW_POST)

        assert response.status_code == 201
        assert response.json()["date"] == date.today().isoformat()

    def test_future_date_rejected(self, alice_client: TestClient):
        tomorrow = (date.today() + timedelta(days=1)).isoformat()

        response = alice_client.post("/api/posts", json={**NEW_POST, "date": tomorrow})

        assert response.status_code == 422

    def test_invalid_type_rejected(self, alice_client: TestClient):
        response = alice_client.post("/api/posts", json={**NEW_POST, "type": "stolen"})

        assert response.status_code == 422

    @pytest.mark.parametrize("field", ["title", "category", "location", "contact_info"])
    def test_required_fields(self, alice_client: TestClient, field):
        payload = {k: v for k, v in NEW_POST.items() if k != field}

        response = alice_client.post("/api/posts", json=payload)

        assert response.status_code == 422

    def test_blank_title_rejected(self, alice_client: TestClient):
        response = alice_client.post("/api/posts", json={**NEW_POST, "title": "   "})

        assert response.status_code == 422

    def test_description_optional(self, alice_client: TestClient):
        payload = {k: v for k, v in NEW_POST.items() if k != "description"}

        response = alice_client.post("/api/posts", json=payload)

        assert response.status_code == 201
        assert response.json()["description"] == ""

    def test_requires_authentication(self, client: TestClient):
        response = client.post("/api/posts", json=NEW_POST)

        assert response.status_code == 401


class TestReadPosts:
    """Test GET /api/posts, /api/posts/my-posts and /api/posts/{id}"""

    def test_listing_is_public_and_active_only(self, client: TestClient, alice, make_post):
        make_post(alice, title="Active")
        make_post(alice, title="Done", status="resolved")

        response = client.get("/api/posts")

        assert response.status_code == 200
        assert [p["title"] for p in response.json()] == ["Active"]

    def test_listing_query_filters(self, client: TestClient, alice, bob, make_post):
        make_post(alice, title="Black Wallet")
        make_post(bob, title="Blue Umbrella", type="found", category="Umbrellas")
        make_post(bob, title="Old Keys", type="found", category="Keys", status="resolved")

        found = client.get("/api/posts", params={"type": "found", "status": "all"}).json()
        umbrellas = client.get("/api/posts", params={"category": "UMBRELLAS"}).json()
        oldest = client.get("/api/posts", params={"status": "all", "sort_by": "oldest"}).json()

        assert [p["title"] for p in found] == ["Old Keys", "Blue Umbrella"]
        assert [p["title"] for p in umbrellas] == ["Blue Umbrella"]
        assert [p["title"] for p in oldest] == ["Black Wallet", "Blue Umbrella", "Old Keys"]

    def test_invalid_sort_rejected(self, client: TestClient):
        response = client.get("/api/posts", params={"sort_by": "random"})

        assert response.status_code == 422

    def test_my_posts_includes_every_status(self, alice_client: TestClient, alice, bob, make_post):
        make_post(alice, title="Mine")
        make_post(alice, title="Mine Resolved", status="resolved")
        make_post(bob, title="Not Mine")

        response = alice_client.get("/api/posts/my-posts")

        assert response.status_code == 200
        assert [p["title"] for p in response.json()] == ["Mine Resolved", "Mine"]

    def test_get_single_post(self, client: TestClient, alice, make_post):
        post = make_post(alice)

        response = client.get(f"/api/posts/{post.id}")

        assert response.status_code == 200
        assert response.json()["id"] == str(post.id)

    def test_get_missing_post(self, client: TestClient):
        response = client.get(f"/api/posts/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["detail"] == "Post not found"


class TestUpdateDeletePost:
    """Test PUT and DELETE /api/posts/{id}"""

    def test_owner_can_update(self, alice_client: TestClient, alice, make_post):
        post = make_post(alice)

        response = alice_client.put(f"/api/posts/{post.id}", json={"title": "Brown Wallet", "status": "resolved"})

        assert response.status_code == 200
        assert response.json()["title"] == "Brown Wallet"
        assert response.json()["status"] == "resolved"
        assert response.json()["category"] == "Wallets"

    def test_non_owner_cannot_update(self, client: TestClient, alice, bob, make_post, auth_headers):
        post = make_post(alice)

        response = client.put(f"/api/posts/{post.id}", json={"title": "Mine now"}, headers=auth_headers(bob))

        assert response.status_code == 403

    def test_admin_can_update_any_post(self, admin_client: TestClient, alice, make_post):
        post = make_post(alice)

        response = admin_client.put(f"/api/posts/{post.id}", json={"location": "Library"})

        assert response.status_code == 200
        assert response.json()["location"] == "Library"

    def test_owner_cannot_flag_through_update(self, alice_client: TestClient, alice, make_post):
        post = make_post(alice)

        response = alice_client.put(f"/api/posts/{post.id}", json={"status": "flagged"})

        assert response.status_code == 422

    def test_owner_cannot_reactivate_flagged_post(
        self, alice_client: TestClient, db_session: Session, alice, make_post
    ):
        post = make_post(alice, status="flagged")

        response = alice_client.put(f"/api/posts/{post.id}", json={"status": "active"})

        assert response.status_code == 403
        db_session.refresh(post)
        assert post.status == "flagged"

    def test_admin_can_reactivate_flagged_post(self, admin_client: TestClient, alice, make_post):
        post = make_post(alice, status="flagged")

        response = admin_client.put(f"/api/posts/{post.id}", json={"status": "active"})

        assert response.status_code == 200
        assert response.json()["status"] == "active"

    def test_blank_title_rejected_on_update(self, alice_client: TestClient, alice, make_post):
        post = make_post(alice)

        response = alice_client.put(f"/api/posts/{post.id}", json={"title": "   "})

        assert response.status_code == 422

    def test_update_strips_text_fields(self, alice_client: TestClient, alice, make_post):
        post = make_post(alice)

        response = alice_client.put(f"/api/posts/{post.id}", json={"location": "  Library  "})

        assert response.status_code == 200
        assert response.json()["location"] == "Library"

    def test_update_missing_post(self, alice_client: TestClient):
        response = alice_client.put(f"/api/posts/{uuid4()}", json={"title": "x"})

        assert response.status_code == 404

    def test_owner_can_delete(self, alice_client: TestClient, db_session: Session, alice, make_post):
        post = make_post(alice)
        post_id = post.id

        response = alice_client.delete(f"/api/posts/{post_id}")

        assert response.status_code == 200
        assert response.json()["message"] == "Post deleted successfully"
        assert db_session.get(Post, post_id) is None

    def test_non_owner_cannot_delete(self, client: TestClient, alice, bob, make_post, auth_headers):
        post = make_post(alice)

        response = client.delete(f"/api/posts/{post.id}", headers=auth_headers(bob))

        assert response.status_code == 403

    def test_admin_can_delete(self, admin_client: TestClient, alice, make_post):
        post = make_post(alice)

        response = admin_client.delete(f"/api/posts/{post.id}")

        assert response.status_code == 200


class TestAdminPosts:
    """Test admin-only post endpoints"""

    def test_admin_all_includes_every_status(self, admin_client: TestClient, alice, make_post):
        make_post(alice, title="Active")
        make_post(alice, title="Flagged", status="flagged", admin_notes="spam?")

        response = admin_client.get("/api/posts/admin/all")

        assert response.status_code == 200
        data = response.json()
        assert [p["title"] for p in data] == ["Flagged", "Active"]
        assert data[0]["admin_notes"] == "spam?"

    def test_admin_endpoints_forbidden_for_users(self, alice_client: TestClient, alice, make_post):
        post = make_post(alice)

        assert alice_client.get("/api/posts/admin/all").status_code == 403
        assert alice_client.patch(f"/api/posts/admin/{post.id}", json={"flagged": True}).status_code == 403
        assert alice_client.get("/api/posts/export/csv").status_code == 403
        assert alice_client.get("/api/posts/stats/admin").status_code == 403

    def test_moderate_post(self, admin_client: TestClient, alice, make_post):
        post = make_post(alice)

        response = admin_client.patch(
            f"/api/posts/admin/{post.id}",
            json={"status": "flagged", "flagged": True, "admin_notes": "Duplicate report"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "flagged"
        assert data["flagged"] is True
        assert data["admin_notes"] == "Duplicate report"

    def test_moderate_missing_post(self, admin_client: TestClient):
        response = admin_client.patch(f"/api/posts/admin/{uuid4()}", json={"flagged": True})

        assert response.status_code == 404

    def test_export_csv(self, admin_client: TestClient, alice, make_post):
        make_post(alice, title="Black Wallet")
        make_post(alice, title="Keys", status="resolved")

        response = admin_client.get("/api/posts/export/csv")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert "lostify-posts.csv" in response.headers["content-disposition"]
        lines = response.text.strip().splitlines()
        assert lines[0].startswith("ID,Title,Description,Type,Category")
        assert len(lines) == 3

    def test_post_stats(self, admin_client: TestClient, alice, make_post):
        make_post(alice, type="lost")
        make_post(alice, type="found", status="resolved")

        response = admin_client.get("/api/posts/stats/admin")

        assert response.status_code == 200
        assert response.json() == {
            "total_posts": 2,
            "active_posts": 1,
            "resolved_posts": 1,
            "lost_posts": 1,
            "found_posts": 1,
        }
