# -*- coding: utf-8 -*-
"""Tests for recycle bin API endpoints."""

from datetime import datetime, UTC, timedelta

import pytest

from newsdesk.models.db_models import DeletedItemDB

BIN = "/api/v1/recycle-bin"


def _create(client, path, headers, **body):
    response = client.post(f"/api/v1/{path}", json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def _soft_delete(client, path, entity_id, headers):
    response = client.delete(f"/api/v1/{path}/{entity_id}", headers=headers)
    assert response.status_code == 200, response.text
    return response.json()


class TestSoftDeleteEndpoints:
    """Tests for entity DELETE endpoints that feed the recycle bin."""

    def test_delete_article(self, client_with_db, editor_headers, admin_headers):
        article = _create(client_with_db, "articles", editor_headers, title="Budget 2024")

        data = _soft_delete(client_with_db, "articles", article["id"], admin_headers)

        assert data["item_type"] == "article"
        assert data["original_id"] == article["id"]
        assert "deleted_item_id" in data
        assert "expires_at" in data

        response = client_with_db.get(f"/api/v1/articles/{article['id']}", headers=editor_headers)
        assert response.status_code == 404

    def test_delete_requires_admin(self, client_with_db, editor_headers):
        tag = _create(client_with_db, "tags", editor_headers, name="Local")

        response = client_with_db.delete(f"/api/v1/tags/{tag['id']}", headers=editor_headers)

        assert response.status_code == 403

    def test_delete_requires_user(self, client_with_db, editor_headers):
        tag = _create(client_with_db, "tags", editor_headers, name="Local")

        response = client_with_db.delete(f"/api/v1/tags/{tag['id']}")

        assert response.status_code == 401

    def test_delete_missing_entity(self, client_with_db, admin_headers):
        response = client_with_db.delete("/api/v1/categories/missing", headers=admin_headers)

        assert response.status_code == 404
        assert response.json()["error_code"] == "RESOURCE_NOT_FOUND"

    @pytest.mark.parametrize(
        "path, body, item_type",
        [
            ("categories", {"name": "Sports"}, "category"),
            ("authors", {"name": "Jane Reporter"}, "author"),
            ("pages", {"title": "About us"}, "staticPage"),
            ("breaking-news", {"title": "Storm warning issued"}, "breakingNews"),
            ("tags", {"name": "Elections"}, "tag"),
        ],
    )
    def test_every_type_round_trips(
        self, client_with_db, editor_headers, admin_headers, path, body, item_type
    ):
        entity = _create(client_with_db, path, editor_headers, **body)
        deleted = _soft_delete(client_with_db, path, entity["id"], admin_headers)
        assert deleted["item_type"] == item_type

        response = client_with_db.post(
            f"{BIN}/{deleted['deleted_item_id']}/restore", headers=admin_headers
        )

        assert response.status_code == 200
        assert response.json()["item_type"] == item_type
        assert response.json()["id"] == entity["id"]


class TestListDeleted:
    """Tests for GET /recycle-bin."""

    def test_list_empty(self, client_with_db, admin_headers):
        response = client_with_db.get(BIN, headers=admin_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["items"] == []
        assert data["total"] == 0
        assert data["pagination"]["total_pages"] == 0
        assert data["pagination"]["has_next_page"] is False

    def test_list_most_recent_first(self, client_with_db, editor_headers, admin_headers):
        article = _create(client_with_db, "articles", editor_headers, title="Budget 2024")
        tag = _create(client_with_db, "tags", editor_headers, name="Economy")
        first = _soft_delete(client_with_db, "articles", article["id"], admin_headers)
        second = _soft_delete(client_with_db, "tags", tag["id"], admin_headers)

        response = client_with_db.get(BIN, headers=admin_headers)

        ids = [i["id"] for i in response.json()["items"]]
        assert ids == [second["deleted_item_id"], first["deleted_item_id"]]
        assert "snapshot" not in response.json()["items"][0]

    def test_filter_by_type(self, client_with_db, editor_headers, admin_headers):
        for name in ("Sports", "Politics"):
            category = _create(client_with_db, "categories", editor_headers, name=name)
            _soft_delete(client_with_db, "categories", category["id"], admin_headers)
        article = _create(client_with_db, "articles", editor_headers, title="Budget 2024")
        _soft_delete(client_with_db, "articles", article["id"], admin_headers)

        categories = client_with_db.get(BIN, params={"item_type": "category"}, headers=admin_headers).json()
        articles = client_with_db.get(BIN, params={"item_type": "article"}, headers=admin_headers).json()
        everything = client_with_db.get(BIN, headers=admin_headers).json()

        assert categories["total"] == 2
        assert {i["item_type"] for i in categories["items"]} == {"category"}
        assert categories["total"] + articles["total"] == everything["total"] == 3

    def test_pagination(self, client_with_db, editor_headers, admin_headers):
        for i in range(3):
            tag = _create(client_with_db, "tags", editor_headers, name=f"tag {i}")
            _soft_delete(client_with_db, "tags", tag["id"], admin_headers)

        data = client_with_db.get(BIN, params={"page": 2, "limit": 2}, headers=admin_headers).json()

        assert len(data["items"]) == 1
        assert data["pagination"] == {
            "current_page": 2,
            "total_pages": 2,
            "total_items": 3,
            "has_next_page": False,
            "has_prev_page": True,
        }

    def test_invalid_type_filter(self, client_with_db, admin_headers):
        response = client_with_db.get(BIN, params={"item_type": "gallery"}, headers=admin_headers)

        assert response.status_code == 422

    def test_invalid_page(self, client_with_db, admin_headers):
        response = client_with_db.get(BIN, params={"page": 0}, headers=admin_headers)

        assert response.status_code == 422

    def test_requires_admin(self, client_with_db, editor_headers):
        assert client_with_db.get(BIN, headers=editor_headers).status_code == 403
        assert client_with_db.get(BIN).status_code == 401


class TestGetDeletedItem:
    """Tests for GET /recycle-bin/{id}."""

    def test_get_includes_snapshot(self, client_with_db, editor_headers, admin_headers):
        article = _create(
            client_with_db, "articles", editor_headers, title="Budget 2024", tags=["economy"]
        )
        deleted = _soft_delete(client_with_db, "articles", article["id"], admin_headers)

        response = client_with_db.get(f"{BIN}/{deleted['deleted_item_id']}", headers=admin_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["title"] == "Budget 2024"
        assert data["deleted_by"] == "admin-1"
        assert data["snapshot"]["id"] == article["id"]
        assert data["snapshot"]["tags"] == ["economy"]

    def test_get_missing(self, client_with_db, admin_headers):
        response = client_with_db.get(f"{BIN}/missing", headers=admin_headers)

        assert response.status_code == 404


class TestRestore:
    """Tests for POST /recycle-bin/{id}/restore."""

    def test_restore_article(self, client_with_db, editor_headers, admin_headers):
        """Restored article keeps its ID and fields; a second restore is 404."""
        article = _create(
            client_with_db, "articles", editor_headers, title="Budget 2024", status="published"
        )
        deleted = _soft_delete(client_with_db, "articles", article["id"], admin_headers)
        url = f"{BIN}/{deleted['deleted_item_id']}/restore"

        response = client_with_db.post(url, headers=admin_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["item_type"] == "article"
        assert data["id"] == article["id"]
        assert data["data"]["title"] == "Budget 2024"
        assert data["data"]["status"] == "published"

        live = client_with_db.get(f"/api/v1/articles/{article['id']}", headers=editor_headers)
        assert live.status_code == 200
        assert live.json()["slug"] == "budget-2024"
        assert client_with_db.get(BIN, headers=admin_headers).json()["total"] == 0

        again = client_with_db.post(url, headers=admin_headers)
        assert again.status_code == 404

    def test_restore_conflict_keeps_record(self, client_with_db, editor_headers, admin_headers):
        sports = _create(client_with_db, "categories", editor_headers, name="Sports")
        deleted = _soft_delete(client_with_db, "categories", sports["id"], admin_headers)
        _create(client_with_db, "categories", editor_headers, name="Sports")

        response = client_with_db.post(
            f"{BIN}/{deleted['deleted_item_id']}/restore", headers=admin_headers
        )

        assert response.status_code == 409
        body = response.json()
        assert body["error_code"] == "CONFLICT"
        assert body["context"]["deleted_item_id"] == deleted["deleted_item_id"]

        listed = client_with_db.get(BIN, headers=admin_headers).json()
        assert [i["id"] for i in listed["items"]] == [deleted["deleted_item_id"]]

    def test_restore_unknown_type_is_server_error(self, client_with_db, test_db, admin_headers):
        now = datetime.now(UTC)
        item = DeletedItemDB(
            item_type="gallery",
            original_id="g1",
            snapshot={"id": "g1"},
            title="Photos",
            deleted_by="admin-1",
            deleted_at=now,
            expires_at=now + timedelta(days=30),
        )
        test_db.add(item)
        test_db.commit()

        response = client_with_db.post(f"{BIN}/{item.id}/restore", headers=admin_headers)

        assert response.status_code == 500
        assert response.json()["error_code"] == "INVALID_ITEM_TYPE"

    def test_restore_updates_author_count(self, client_with_db, editor_headers, admin_headers):
        author = _create(client_with_db, "authors", editor_headers, name="Jane Reporter")
        article = _create(
            client_with_db, "articles", editor_headers, title="Budget 2024", author_id=author["id"]
        )

        def count():
            return client_with_db.get(f"/api/v1/authors/{author['id']}").json()["articles_count"]

        assert count() == 1
        deleted = _soft_delete(client_with_db, "articles", article["id"], admin_headers)
        assert count() == 0
        client_with_db.post(f"{BIN}/{deleted['deleted_item_id']}/restore", headers=admin_headers)
        assert count() == 1


class TestPermanentDelete:
    """Tests for DELETE /recycle-bin/{id}."""

    def test_permanent_delete(self, client_with_db, editor_headers, admin_headers):
        tag = _create(client_with_db, "tags", editor_headers, name="Obsolete")
        deleted = _soft_delete(client_with_db, "tags", tag["id"], admin_headers)
        url = f"{BIN}/{deleted['deleted_item_id']}"

        response = client_with_db.delete(url, headers=admin_headers)
        assert response.status_code == 204

        assert client_with_db.delete(url, headers=admin_headers).status_code == 404
        assert client_with_db.post(f"{url}/restore", headers=admin_headers).status_code == 404


class TestEmpty:
    """Tests for POST /recycle-bin/empty."""

    def test_requires_confirm(self, client_with_db, admin_headers):
        response = client_with_db.post(f"{BIN}/empty", headers=admin_headers)

        assert response.status_code == 400

    def test_empty_by_type(self, client_with_db, editor_headers, admin_headers):
        deleted_tags = []
        for name in ("a", "b"):
            tag = _create(client_with_db, "tags", editor_headers, name=name)
            deleted_tags.append(_soft_delete(client_with_db, "tags", tag["id"], admin_headers))
        article = _create(client_with_db, "articles", editor_headers, title="Keep me")
        _soft_delete(client_with_db, "articles", article["id"], admin_headers)

        response = client_with_db.post(
            f"{BIN}/empty",
            params={"confirm": "true", "item_type": "tag"},
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert response.json()["deleted_count"] == 2
        remaining = client_with_db.get(BIN, params={"item_type": "tag"}, headers=admin_headers)
        assert remaining.json()["total"] == 0
        for deleted in deleted_tags:
            restore = client_with_db.post(
                f"{BIN}/{deleted['deleted_item_id']}/restore", headers=admin_headers
            )
            assert restore.status_code == 404
        assert client_with_db.get(BIN, headers=admin_headers).json()["total"] == 1

    def test_empty_expired_only(self, client_with_db, test_db, editor_headers, admin_headers):
        for name in ("old", "new"):
            tag = _create(client_with_db, "tags", editor_headers, name=name)
            _soft_delete(client_with_db, "tags", tag["id"], admin_headers)
        old = test_db.query(DeletedItemDB).filter(DeletedItemDB.title == "old").one()
        old.expires_at = datetime.now(UTC) - timedelta(hours=1)
        test_db.commit()

        response = client_with_db.post(
            f"{BIN}/empty",
            params={"confirm": "true", "expired_only": "true"},
            headers=admin_headers,
        )

        assert response.json()["deleted_count"] == 1


class TestStats:
    """Tests for GET /recycle-bin/stats."""

    def test_stats(self, client_with_db, editor_headers, admin_headers):
        for name in ("a", "b"):
            tag = _create(client_with_db, "tags", editor_headers, name=name)
            _soft_delete(client_with_db, "tags", tag["id"], admin_headers)

        response = client_with_db.get(f"{BIN}/stats", headers=admin_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 2
        assert data["expiring_soon"] == 0
        assert data["by_type"][0]["item_type"] == "tag"
        assert data["by_type"][0]["count"] == 2
