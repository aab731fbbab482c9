"""Integration tests for /api/draws."""
DRAW_BODY = {"mood": "hopeful", "question": "What should I focus on today?"}


class TestDailyDraw:
    def test_once_per_day(self, client, auth_headers):
        status = client.get("/api/draws/today", headers=auth_headers)
        assert status.status_code == 200
        assert status.json["has_drawn"] is False
        assert status.json["can_draw"] is True
        assert status.json["limit"] == 1

        first = client.post("/api/draws/daily", json=DRAW_BODY, headers=auth_headers)
        assert first.status_code == 200
        assert first.json["success"] is True
        card = first.json["card"]
        assert 0 <= card["card_id"] <= 21
        assert card["mood"] == "hopeful"
        assert card["interpretation_basic"]

        second = client.post(
            "/api/draws/daily",
            json={"mood": "anxious", "question": "Another one?"},
            headers=auth_headers,
        )
        assert second.status_code == 409
        assert second.json["error"] == "Already drawn today"
        assert second.json["card"]["card_id"] == card["card_id"]

        status = client.get("/api/draws/today", headers=auth_headers)
        assert status.json["has_drawn"] is True
        assert status.json["can_draw"] is False
        assert status.json["card"]["id"] == card["card_id"]
        assert status.json["draws_today"] == 1

        history = client.get("/api/draws/history", headers=auth_headers)
        assert history.status_code == 200
        assert history.json["count"] == 1
        assert history.json["draws"][0]["card_id"] == card["card_id"]

    def test_requires_auth(self, client):
        assert client.post("/api/draws/daily", json=DRAW_BODY).status_code == 401

    def test_invalid_mood(self, client, auth_headers):
        response = client.post(
            "/api/draws/daily",
            json={"mood": "sleepy", "question": "What now?"},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert "mood" in response.json["details"]

    def test_missing_question(self, client, auth_headers):
        response = client.post("/api/draws/daily", json={"mood": "hopeful"}, headers=auth_headers)

        assert response.status_code == 400
        assert "question" in response.json["details"]

    def test_history_limit_validated(self, client, auth_headers):
        response = client.get("/api/draws/history?limit=0", headers=auth_headers)

        assert response.status_code == 400


class TestDailyLimit:
    def test_quota_exhausted(self, make_app):
        app = make_app(DAILY_DRAW_LIMIT=0)
        client = app.test_client()
        token = client.post(
            "/api/auth/register",
            json={"email": "limited@example.com", "password": "password123"},
        ).json["token"]
        headers = {"Authorization": f"Bearer {token}"}

        status = client.get("/api/draws/today", headers=headers)
        response = client.post("/api/draws/daily", json=DRAW_BODY, headers=headers)

        assert status.json["can_draw"] is False
        assert response.status_code == 403
        assert response.json["upgrade_required"] is True

    def test_premium_not_limited(self, make_app):
        app = make_app(DAILY_DRAW_LIMIT=0)
        client = app.test_client()

        from symbol_quest.extensions import db
        from symbol_quest.models.enums import SubscriptionTier
        from symbol_quest.models.user import User

        token = client.post(
            "/api/auth/register",
            json={"email": "star@example.com", "password": "password123"},
        ).json["token"]
        user = User.query.filter_by(email="star@example.com").first()
        user.subscription_tier = SubscriptionTier.PREMIUM
        db.session.commit()

        response = client.post(
            "/api/draws/daily", json=DRAW_BODY, headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 200
