"""HTTP tests for the auth and open call routes."""

import pytest
from httpx import AsyncClient


async def signup(client: AsyncClient, email: str, name: str = "Ann") -> dict:
    response = await client.post(
        "/api/auth/signup", json={"email": email, "password": "secret1", "name": name}
    )
    assert response.status_code == 201, response.text
    return response.json()


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.mark.asyncio
async def test_health(client: AsyncClient) -> None:
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


class TestAuthRoutes:
    @pytest.mark.asyncio
    async def test_signup_login_logout_flow(self, client: AsyncClient) -> None:
        created = await signup(client, "a@b.com")
        assert created["user"]["email"] == "a@b.com"
        assert created["user"]["name"] == "Ann"
        assert "password_hash" not in created["user"]

        login = await client.post(
            "/api/auth/login", json={"email": "A@B.com", "password": "secret1"}
        )
        assert login.status_code == 200
        token = login.json()["session_token"]
        assert token != created["session_token"]

        wrong = await client.post(
            "/api/auth/login", json={"email": "a@b.com", "password": "wrong-password"}
        )
        unknown = await client.post(
            "/api/auth/login", json={"email": "nobody@b.com", "password": "secret1"}
        )
        assert wrong.status_code == unknown.status_code == 401
        assert wrong.json() == unknown.json() == {"detail": "Invalid email or password"}

        session = await client.get("/api/auth/session", headers=bearer(token))
        assert session.json()["email"] == "a@b.com"

        logout = await client.post("/api/auth/logout", headers=bearer(token))
        assert logout.json() == {"success": True}

        after = await client.get("/api/auth/session", headers=bearer(token))
        assert after.status_code == 200
        assert after.json() is None

        again = await client.post("/api/auth/logout", headers=bearer(token))
        assert again.status_code == 200

    @pytest.mark.asyncio
    async def test_duplicate_signup_conflicts(self, client: AsyncClient) -> None:
        await signup(client, "a@b.com")
        response = await client.post(
            "/api/auth/signup",
            json={"email": "A@B.COM", "password": "secret1", "name": "Other"},
        )
        assert response.status_code == 409
        assert response.json()["detail"] == "Email already registered"

    @pytest.mark.asyncio
    async def test_signup_rejects_invalid_email(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/auth/signup", json={"email": "not-an-email", "password": "secret1", "name": "A"}
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid email format"

    @pytest.mark.asyncio
    async def test_session_without_token_is_null(self, client: AsyncClient) -> None:
        response = await client.get("/api/auth/session")
        assert response.status_code == 200
        assert response.json() is None

    @pytest.mark.asyncio
    async def test_profile_update_requires_session(self, client: AsyncClient) -> None:
        response = await client.patch("/api/auth/profile", json={"name": "X"})
        assert response.status_code == 401
        assert response.json()["detail"] == "Not authenticated"

    @pytest.mark.asyncio
    async def test_profile_update(self, client: AsyncClient) -> None:
        token = (await signup(client, "a@b.com"))["session_token"]
        profile = {
            "mediums": ["Painting"],
            "location": "Brooklyn",
            "career_stage": "emerging",
            "themes": ["nature"],
            "prefer_no_fee": True,
        }
        response = await client.patch(
            "/api/auth/profile",
            json={"name": "Annie", "artist_profile": profile},
            headers=bearer(token),
        )
        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "Annie"
        assert body["artist_profile"]["location"] == "Brooklyn"
        assert body["artist_profile"]["max_entry_fee"] is None

    @pytest.mark.asyncio
    async def test_password_change_keeps_only_current_session(self, client: AsyncClient) -> None:
        first = (await signup(client, "a@b.com"))["session_token"]
        login = await client.post(
            "/api/auth/login", json={"email": "a@b.com", "password": "secret1"}
        )
        second = login.json()["session_token"]

        response = await client.post(
            "/api/auth/password",
            json={"current_password": "secret1", "new_password": "secret2"},
            headers=bearer(second),
        )
        assert response.status_code == 200

        assert (await client.get("/api/auth/session", headers=bearer(second))).json() is not None
        assert (await client.get("/api/auth/session", headers=bearer(first))).json() is None

        old = await client.post("/api/auth/login", json={"email": "a@b.com", "password": "secret1"})
        new = await client.post("/api/auth/login", json={"email": "a@b.com", "password": "secret2"})
        assert old.status_code == 401
        assert new.status_code == 200

    @pytest.mark.asyncio
    async def test_password_change_wrong_current(self, client: AsyncClient) -> None:
        token = (await signup(client, "a@b.com"))["session_token"]
        response = await client.post(
            "/api/auth/password",
            json={"current_password": "nope-nope", "new_password": "secret2"},
            headers=bearer(token),
        )
        assert response.status_code == 401
        assert response.json()["detail"] == "Current password is incorrect"

    @pytest.mark.asyncio
    async def test_cleanup_reports_count(self, client: AsyncClient) -> None:
        await signup(client, "a@b.com")
        response = await client.post("/api/auth/sessions/cleanup")
        assert response.status_code == 200
        assert response.json() == {"deleted": 0}


class TestOpenCallRoutes:
    @pytest.mark.asyncio
    async def test_anonymous_queries_are_empty(self, client: AsyncClient) -> None:
        assert (await client.get("/api/open-calls")).json() == []
        assert (await client.get("/api/open-calls/states")).json() == []
        assert (await client.get("/api/open-calls/custom")).json() == []
        assert (await client.get("/api/open-calls/preferences")).json() is None

    @pytest.mark.asyncio
    async def test_anonymous_mutations_are_rejected(self, client: AsyncClient) -> None:
        response = await client.put("/api/open-calls/states/nyfa-001", json={"bookmarked": True})
        assert response.status_code == 401
        response = await client.post(
            "/api/open-calls/custom", json={"title": "T", "organization": "O"}
        )
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_ranked_listing_reflects_state(self, client: AsyncClient) -> None:
        token = (await signup(client, "a@b.com"))["session_token"]
        headers = bearer(token)

        prefs = await client.patch(
            "/api/open-calls/preferences",
            json={"mediums": ["sculpture"], "prefer_no_fee": True},
            headers=headers,
        )
        assert prefs.json()["mediums"] == ["sculpture"]

        nulled = await client.patch(
            "/api/open-calls/preferences",
            json={"prefer_no_fee": None, "themes": None},
            headers=headers,
        )
        assert nulled.status_code == 200
        assert nulled.json()["prefer_no_fee"] is True
        assert nulled.json()["themes"] == []

        state = await client.put(
            "/api/open-calls/states/nyfa-005", json={"bookmarked": True}, headers=headers
        )
        assert state.status_code == 200
        assert state.json()["bookmarked"] is True
        hidden = await client.put(
            "/api/open-calls/states/nyfa-007", json={"hidden": True}, headers=headers
        )
        assert hidden.json()["hidden"] is True

        calls = (await client.get("/api/open-calls", headers=headers)).json()
        scores = [c["score"] for c in calls]
        assert scores == sorted(scores, reverse=True)
        by_id = {c["id"]: c for c in calls}
        assert by_id["nyfa-005"]["bookmarked"] is True
        assert by_id["nyfa-007"]["hidden"] is True

        visible = (
            await client.get(
                "/api/open-calls", params={"include_hidden": "false"}, headers=headers
            )
        ).json()
        assert "nyfa-007" not in {c["id"] for c in visible}

    @pytest.mark.asyncio
    async def test_custom_calls_are_isolated(self, client: AsyncClient) -> None:
        ann = bearer((await signup(client, "a@b.com"))["session_token"])
        ben = bearer((await signup(client, "b@b.com", "Ben"))["session_token"])

        created = await client.post(
            "/api/open-calls/custom",
            json={"title": "Salon", "organization": "Studio 9"},
            headers=ann,
        )
        assert created.status_code == 201
        call_id = created.json()["id"]

        foreign = await client.patch(
            f"/api/open-calls/custom/{call_id}", json={"title": "Mine now"}, headers=ben
        )
        missing = await client.patch(
            "/api/open-calls/custom/9999", json={"title": "Mine now"}, headers=ben
        )
        assert foreign.status_code == missing.status_code == 404
        assert foreign.json() == missing.json() == {"detail": "Custom open call not found"}

        deleted = await client.delete(f"/api/open-calls/custom/{call_id}", headers=ben)
        assert deleted.status_code == 404

        mine = (await client.get("/api/open-calls/custom", headers=ann)).json()
        assert [c["title"] for c in mine] == ["Salon"]
        assert (await client.get("/api/open-calls/custom", headers=ben)).json() == []

        listing = (await client.get("/api/open-calls", headers=ann)).json()
        manual = [c for c in listing if c["id"] == f"custom-{call_id}"]
        assert manual and manual[0]["source"] == "Manual"

    @pytest.mark.asyncio
    async def test_score_endpoint(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/open-calls/score",
            json={
                "call": {
                    "id": "x",
                    "title": "Residency",
                    "organization": "Org",
                    "entry_fee": 0,
                    "source": "Other",
                },
                "preferences": {"prefer_no_fee": True},
            },
        )
        assert response.status_code == 200
        assert response.json() == {
            "score": 60,
            "reasons": ["No entry fee"],
            "recommendation": "recommended",
        }
