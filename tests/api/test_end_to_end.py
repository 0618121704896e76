"""
End-to-end tests against the real store.

The app lifespan runs with an in-memory SQLite database, so every request
goes through routers, services, entity CRUD and the key-value table.

System role: Verification of full request flows
"""

from aksara.boundary.db.CRUD.entity_crud import encode_cursor


class TestThoughtBoard:
    def test_post_list_delete_flow(self, live_client):
        created = live_client.post("/api/thoughts", json={"text": "hello"})
        assert created.status_code == 200
        thought = created.json()["data"]
        assert thought["author"] == "anonymous"
        assert thought["text"] == "hello"
        assert thought["id"]
        assert isinstance(thought["createdAt"], int)

        listed = live_client.get("/api/thoughts").json()["data"]
        assert listed[0]["id"] == thought["id"]

        deleted = live_client.delete(f"/api/thoughts/{thought['id']}")
        assert deleted.json() == {"success": True, "data": {"id": thought["id"], "deleted": True}}

        listed = live_client.get("/api/thoughts").json()["data"]
        assert all(t["id"] != thought["id"] for t in listed)

    def test_empty_board_lists_nothing(self, live_client):
        response = live_client.get("/api/thoughts")

        assert response.json() == {"success": True, "data": []}

    def test_listing_spans_several_store_pages(self, live_client):
        ids = {
            live_client.post("/api/thoughts", json={"text": f"thought {n}"}).json()["data"]["id"]
            for n in range(25)
        }

        listed = live_client.get("/api/thoughts").json()["data"]

        assert {t["id"] for t in listed} == ids
        created_at = [t["createdAt"] for t in listed]
        assert created_at == sorted(created_at, reverse=True)

    def test_deleting_twice_reports_false(self, live_client):
        thought_id = live_client.post("/api/thoughts", json={"text": "once"}).json()["data"]["id"]
        live_client.delete(f"/api/thoughts/{thought_id}")

        response = live_client.delete(f"/api/thoughts/{thought_id}")

        assert response.json()["data"] == {"id": thought_id, "deleted": False}

    def test_rejected_thought_is_not_stored(self, live_client):
        response = live_client.post("/api/thoughts", json={"text": "   "})

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Kata-kata tidak boleh kosong."}
        assert live_client.get("/api/thoughts").json()["data"] == []


class TestUsers:
    def test_first_listing_seeds_demo_users(self, live_client):
        page = live_client.get("/api/users").json()["data"]

        assert page["items"] == [
            {"id": "u1", "name": "User A"},
            {"id": "u2", "name": "User B"},
        ]
        assert page["next"] is None

    def test_cursor_walks_pages(self, live_client):
        live_client.get("/api/users")
        live_client.post("/api/users", json={"name": "Citra"})

        first = live_client.get("/api/users", params={"limit": "2"}).json()["data"]
        assert [u["id"] for u in first["items"]] == ["u1", "u2"]
        assert first["next"]

        second = live_client.get(
            "/api/users", params={"limit": "2", "cursor": first["next"]}
        ).json()["data"]
        assert [u["name"] for u in second["items"]] == ["Citra"]
        assert second["next"] is None

    def test_deleted_seed_user_stays_deleted(self, live_client):
        live_client.get("/api/users")
        live_client.delete("/api/users/u1")

        page = live_client.get("/api/users").json()["data"]

        assert [u["id"] for u in page["items"]] == ["u2"]

    def test_invalid_cursor_is_400(self, live_client):
        response = live_client.get("/api/users", params={"cursor": "not-a-cursor!"})

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "invalid cursor"}

    def test_cursor_past_store_range_is_400(self, live_client):
        cursor = encode_cursor(10**23)

        response = live_client.get("/api/users", params={"cursor": cursor})

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "invalid cursor"}

    def test_huge_limit_returns_a_page(self, live_client):
        for raw in ("1e30", "99999999999999999999"):
            response = live_client.get("/api/users", params={"limit": raw})

            assert response.status_code == 200
            assert [u["id"] for u in response.json()["data"]["items"]] == ["u1", "u2"]

    def test_delete_many_counts_existing_only(self, live_client):
        live_client.get("/api/users")

        response = live_client.post("/api/users/deleteMany", json={"ids": ["u1", "u2", "ghost"]})

        assert response.json()["data"] == {"deletedCount": 2, "ids": ["u1", "u2", "ghost"]}
        assert live_client.get("/api/users").json()["data"]["items"] == []


class TestChats:
    def test_seeded_board_has_greeting(self, live_client):
        boards = live_client.get("/api/chats").json()["data"]["items"]
        assert [b["id"] for b in boards] == ["c1"]

        messages = live_client.get("/api/chats/c1/messages").json()["data"]
        assert messages[0]["text"] == "Hello"
        assert messages[0]["userId"] == "u1"

    def test_create_board_and_post_message(self, live_client):
        board = live_client.post("/api/chats", json={"title": "Random"}).json()["data"]
        assert set(board) == {"id", "title"}

        sent = live_client.post(
            f"/api/chats/{board['id']}/messages",
            json={"userId": "u2", "text": "hi there"},
        ).json()["data"]
        assert sent["chatId"] == board["id"]

        messages = live_client.get(f"/api/chats/{board['id']}/messages").json()["data"]
        assert [m["id"] for m in messages] == [sent["id"]]

    def test_message_to_unknown_board_is_404(self, live_client):
        response = live_client.post(
            "/api/chats/missing/messages",
            json={"userId": "u1", "text": "anyone?"},
        )

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "chat not found"}

    def test_deleted_board_is_gone(self, live_client):
        board_id = live_client.post("/api/chats", json={"title": "Temp"}).json()["data"]["id"]

        assert live_client.delete(f"/api/chats/{board_id}").json()["data"]["deleted"] is True
        assert live_client.get(f"/api/chats/{board_id}/messages").status_code == 404
