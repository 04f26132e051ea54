# -*- coding: utf-8 -*-
"""Live update API tests."""

LIVE = "/api/v1/live-updates"


def _start(client, headers, **overrides):
    body = {"title": "Election night", "content": "Polls are closed", "author_id": "author-1"}
    body.update(overrides)
    response = client.post(LIVE, json=body, headers=headers)
    assert response.status_code == 201
    return response.json()


class TestCreateLiveUpdate:
    """Tests for POST /live-updates."""

    def test_create(self, client_with_db, editor_headers):
        live = _start(
            client_with_db,
            editor_headers,
            type="sports",
            details={"score": "Team A 2 - 1 Team B", "participants": ["Team A", "Team B"]},
        )

        assert live["status"] == "active"
        assert live["type"] == "sports"
        assert live["details"]["score"] == "Team A 2 - 1 Team B"
        assert [e["content"] for e in live["entries"]] == ["Polls are closed"]

    def test_requires_editor(self, client_with_db, viewer_headers):
        response = client_with_db.post(
            LIVE,
            json={"title": "Election night", "content": "Polls are closed", "author_id": "a1"},
            headers=viewer_headers,
        )

        assert response.status_code == 403

    def test_priority_range(self, client_with_db, editor_headers):
        response = client_with_db.post(
            LIVE,
            json={"title": "Election night", "content": "x", "author_id": "a1", "priority": 9},
            headers=editor_headers,
        )

        assert response.status_code == 422


class TestEntries:
    """Tests for POST /live-updates/{id}/updates."""

    def test_add_entry(self, client_with_db, editor_headers):
        live = _start(client_with_db, editor_headers)

        response = client_with_db.post(
            f"{LIVE}/{live['id']}/updates",
            json={"content": "First results in", "author_id": "author-2"},
            headers=editor_headers,
        )

        assert response.status_code == 200
        assert len(response.json()["entries"]) == 2

    def test_ended_coverage_rejects_entries(self, client_with_db, editor_headers):
        live = _start(client_with_db, editor_headers)
        ended = client_with_db.put(
            f"{LIVE}/{live['id']}", json={"status": "ended"}, headers=editor_headers
        )
        assert ended.json()["ended_at"] is not None

        response = client_with_db.post(
            f"{LIVE}/{live['id']}/updates",
            json={"content": "Too late", "author_id": "author-1"},
            headers=editor_headers,
        )

        assert response.status_code == 422
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    def test_missing_coverage(self, client_with_db, editor_headers):
        response = client_with_db.post(
            f"{LIVE}/missing/updates",
            json={"content": "Hello", "author_id": "author-1"},
            headers=editor_headers,
        )

        assert response.status_code == 404


class TestReadLiveUpdates:
    """Tests for the public reads."""

    def test_get_counts_views(self, client_with_db, editor_headers):
        live = _start(client_with_db, editor_headers)

        client_with_db.get(f"{LIVE}/{live['id']}")
        response = client_with_db.get(f"{LIVE}/{live['id']}")

        assert response.json()["view_count"] == 2

    def test_active_and_by_type(self, client_with_db, editor_headers):
        _start(client_with_db, editor_headers, title="Derby", type="sports")
        _start(client_with_db, editor_headers, title="Hidden", type="sports", show_on_homepage=False)
        _start(client_with_db, editor_headers, title="Storm", type="weather")

        active = client_with_db.get(f"{LIVE}/active").json()
        sports = client_with_db.get(f"{LIVE}/type/sports").json()

        assert {i["title"] for i in active} == {"Derby", "Storm"}
        assert {i["title"] for i in sports} == {"Derby", "Hidden"}

    def test_unknown_type(self, client_with_db):
        assert client_with_db.get(f"{LIVE}/type/gossip").status_code == 422

    def test_list_filters(self, client_with_db, editor_headers):
        _start(client_with_db, editor_headers, title="Derby", type="sports")
        _start(client_with_db, editor_headers, title="Storm", type="weather")

        data = client_with_db.get(LIVE, params={"type": "weather"}).json()

        assert [i["title"] for i in data["live_updates"]] == ["Storm"]
        assert data["pagination"]["total_items"] == 1


class TestDeleteLiveUpdate:
    """Tests for DELETE /live-updates/{id}."""

    def test_delete_is_permanent(self, client_with_db, editor_headers, admin_headers):
        live = _start(client_with_db, editor_headers)

        response = client_with_db.delete(f"{LIVE}/{live['id']}", headers=admin_headers)

        assert response.status_code == 204
        assert client_with_db.get(f"{LIVE}/{live['id']}").status_code == 404
        assert client_with_db.get("/api/v1/recycle-bin", headers=admin_headers).json()["total"] == 0

    def test_delete_requires_admin(self, client_with_db, editor_headers):
        live = _start(client_with_db, editor_headers)

        response = client_with_db.delete(f"{LIVE}/{live['id']}", headers=editor_headers)

        assert response.status_code == 403
