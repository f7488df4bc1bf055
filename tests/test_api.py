"""HTTP tests for the auth, status and calendar event endpoints."""

import pytest

EVENTS_PATH = "/calendar/v3/calendars/primary/events"


class TestHealthAndStatus:
    def test_root_reports_authentication(self, api_client, token_store, credentials):
        response = api_client.get("/")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "OK"
        assert body["version"] == "1.0.0"
        assert body["authenticated"] is False

        token_store.set(credentials)
        assert api_client.get("/").json()["authenticated"] is True

    def test_status_without_token(self, api_client):
        assert api_client.get("/status").json() == {
            "authenticated": False,
            "tokenExpiry": None,
        }

    def test_status_with_token(self, authed_client, credentials):
        assert authed_client.get("/status").json() == {
            "authenticated": True,
            "tokenExpiry": credentials.expiry_date,
        }


class TestAuthRoutes:
    def test_auth_redirects_to_consent_page(self, api_client):
        response = api_client.get("/auth", follow_redirects=False)
        assert response.status_code == 307
        location = response.headers["location"]
        assert location.startswith("https://accounts.google.com/")
        assert "prompt=consent" in location
        assert "access_type=offline" in location

    def test_callback_without_code(self, api_client, fake_google):
        response = api_client.get("/callback")
        assert response.status_code == 400
        assert response.json()["error"] == "No authorization code received"
        assert fake_google.requests == []

    def test_callback_reports_provider_error(self, api_client):
        response = api_client.get("/callback", params={"error": "access_denied"})
        assert response.status_code == 400
        assert response.json()["details"] == ["Provider error: access_denied"]

    def test_callback_success(self, api_client, fake_google, token_store):
        fake_google.respond(
            "POST",
            "/token",
            json_body={"access_token": "ya29.fresh", "expires_in": 3600},
        )
        response = api_client.get("/callback", params={"code": "4/abc"})
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["expiresAt"] == token_store.get().expiry_date
        assert token_store.get().access_token == "ya29.fresh"

    def test_callback_exchange_failure(self, api_client, fake_google, token_store):
        fake_google.respond(
            "POST", "/token", status_code=400, json_body={"error": "invalid_grant"}
        )
        response = api_client.get("/callback", params={"code": "expired"})
        assert response.status_code == 500
        assert response.json()["error"] == "Failed to authenticate"
        assert token_store.is_authenticated() is False


@pytest.mark.parametrize(
    "method, path",
    [
        ("GET", "/events"),
        ("POST", "/events"),
        ("PUT", "/events/evt1"),
        ("DELETE", "/events/evt1"),
        ("GET", "/mail"),
        ("GET", "/mail/msg1"),
        ("GET", "/mail/threads/thr1"),
        ("GET", "/drive/files"),
        ("GET", "/drive/files/file1"),
        ("GET", "/docs/doc1"),
        ("GET", "/sheets/sheet1"),
        ("GET", "/sheets/sheet1/Sheet1"),
    ],
)
def test_protected_routes_require_authentication(api_client, fake_google, method, path):
    kwargs = {"json": {}} if method in ("POST", "PUT") else {}
    response = api_client.request(method, path, **kwargs)
    assert response.status_code == 401
    assert response.json()["error"] == "Not authenticated. Call /auth first."
    assert fake_google.requests == []


class TestListEvents:
    def test_lists_upcoming_events(self, authed_client, fake_google):
        fake_google.respond("GET", EVENTS_PATH, json_body={"items": [{"id": "e1"}]})
        response = authed_client.get("/events")
        assert response.status_code == 200
        assert response.json() == {"success": True, "events": [{"id": "e1"}]}

        params = fake_google.last_request.url.params
        assert params["maxResults"] == "10"
        assert params["singleEvents"] == "true"
        assert params["orderBy"] == "startTime"
        assert "timeMin" in params
        assert fake_google.last_request.headers["Authorization"] == "Bearer ya29.test-access"

    def test_upstream_failure(self, authed_client, fake_google):
        fake_google.respond(
            "GET",
            EVENTS_PATH,
            status_code=401,
            json_body={"error": {"message": "Invalid Credentials"}},
        )
        response = authed_client.get("/events")
        assert response.status_code == 500
        body = response.json()
        assert body["code"] == "UPSTREAM_ERROR"
        assert "Invalid Credentials" in body["error"]


class TestCreateEvent:
    @pytest.mark.parametrize("missing", ["summary", "start", "end"])
    def test_missing_required_field(self, authed_client, fake_google, missing):
        body = {
            "summary": "팀 회의",
            "start": "2026-11-01T10:00:00",
            "end": "2026-11-01T11:00:00",
        }
        del body[missing]
        response = authed_client.post("/events", json=body)
        assert response.status_code == 400
        assert response.json()["error"] == "Missing required fields: summary, start, end"
        assert fake_google.requests == []

    def test_inferred_color_and_no_reminders(self, authed_client, fake_google):
        fake_google.respond("POST", EVENTS_PATH, json_body={"id": "new", "colorId": "5"})
        response = authed_client.post(
            "/events",
            json={
                "summary": "가족과 저녁 식사",
                "start": "2026-11-01T18:00:00",
                "end": "2026-11-01T20:00:00",
            },
        )
        assert response.status_code == 200
        assert response.json() == {"success": True, "event": {"id": "new", "colorId": "5"}}

        sent = fake_google.last_json()
        assert sent["colorId"] == "5"
        assert "reminders" not in sent
        assert sent["start"]["dateTime"] == "2026-11-01T18:00:00"

    def test_reminder_overrides(self, authed_client, fake_google):
        fake_google.respond("POST", EVENTS_PATH, json_body={"id": "new"})
        authed_client.post(
            "/events",
            json={
                "summary": "프로젝트 마감",
                "start": "2026-11-01T18:00:00",
                "end": "2026-11-01T20:00:00",
                "type": "work",
                "reminders": [{"method": "popup", "minutes": 1440}, {"minutes": 10}],
            },
        )
        sent = fake_google.last_json()
        assert sent["colorId"] == "6"
        assert sent["reminders"] == {
            "useDefault": True,
            "overrides": [
                {"method": "popup", "minutes": 1440},
                {"method": "popup", "minutes": 10},
            ],
        }

    def test_invalid_reminder_method(self, authed_client, fake_google):
        response = authed_client.post(
            "/events",
            json={
                "summary": "요가",
                "start": "2026-11-01T07:00:00",
                "end": "2026-11-01T08:00:00",
                "reminders": [{"method": "sms", "minutes": 5}],
            },
        )
        assert response.status_code == 400
        assert fake_google.requests == []


class TestUpdateEvent:
    def test_uses_patch_with_only_provided_fields(self, authed_client, fake_google):
        fake_google.respond("PATCH", f"{EVENTS_PATH}/evt1", json_body={"id": "evt1"})
        response = authed_client.put("/events/evt1", json={"summary": "가족 여행"})
        assert response.status_code == 200
        assert fake_google.last_request.method == "PATCH"
        assert fake_google.last_json() == {"summary": "가족 여행"}

    def test_null_type_clears_color(self, authed_client, fake_google):
        fake_google.respond("PATCH", f"{EVENTS_PATH}/evt1", json_body={"id": "evt1"})
        authed_client.put("/events/evt1", json={"type": None})
        assert fake_google.last_json() == {"colorId": None}

    def test_type_sets_color(self, authed_client, fake_google):
        fake_google.respond("PATCH", f"{EVENTS_PATH}/evt1", json_body={"id": "evt1"})
        authed_client.put("/events/evt1", json={"type": "self-improvement"})
        assert fake_google.last_json() == {"colorId": "2"}

    def test_empty_reminders_reset_to_default(self, authed_client, fake_google):
        fake_google.respond("PATCH", f"{EVENTS_PATH}/evt1", json_body={"id": "evt1"})
        authed_client.put("/events/evt1", json={"reminders": []})
        assert fake_google.last_json() == {"reminders": {"useDefault": True}}

    def test_end_only(self, authed_client, fake_google):
        fake_google.respond("PATCH", f"{EVENTS_PATH}/evt1", json_body={"id": "evt1"})
        authed_client.put("/events/evt1", json={"end": "2026-11-01T21:00:00"})
        sent = fake_google.last_json()
        assert set(sent) == {"end"}
        assert sent["end"]["dateTime"] == "2026-11-01T21:00:00"


class TestDeleteEvent:
    def test_delete(self, authed_client, fake_google):
        fake_google.respond("DELETE", f"{EVENTS_PATH}/evt1", status_code=204)
        response = authed_client.delete("/events/evt1")
        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Event deleted successfully"}

    def test_delete_missing_event(self, authed_client, fake_google):
        response = authed_client.delete("/events/unknown")
        assert response.status_code == 500
        assert response.json()["code"] == "UPSTREAM_ERROR"
