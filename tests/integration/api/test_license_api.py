"""
Integration tests for License API endpoints.
"""

from datetime import datetime, timezone

import pytest
from django.urls import reverse

from core.domain.exceptions import LicenseNotFoundError, StoreIOError

EXPIRY = "2030-01-01T00:00:00Z"


def post(client, name, payload, **extra):
    return client.post(reverse(f"licenses:{name}"), payload, format="json", **extra)


def create_license(client, player_id="p1", license_key="K1", expiration_date=EXPIRY):
    response = post(
        client,
        "create-license",
        {"playerId": player_id, "licenseKey": license_key, "expirationDate": expiration_date},
    )
    assert response.status_code == 200
    return response.json()


@pytest.mark.integration
@pytest.mark.usefixtures("api_engine")
class TestLicenseAPI:
    """Integration tests for the license lifecycle endpoints."""

    def test_create_license(self, api_client):
        """Test creating a license."""
        data = create_license(api_client)

        assert data["message"] == "License created"
        assert data["token"]
        assert data["refreshToken"]
        assert data["expirationDate"] == EXPIRY

    def test_create_license_missing_field(self, api_client):
        """Test that a missing field is a validation error."""
        response = post(api_client, "create-license", {"playerId": "p1"})

        assert response.status_code == 400
        error = response.json()["error"]
        assert "licenseKey" in error["message"]
        assert "expirationDate" in error["message"]

    def test_validate_license(self, api_client):
        """Test that validate returns the issued credentials."""
        created = create_license(api_client)

        response = post(api_client, "validate-license", {"licenseKey": "K1", "playerId": "p1"})

        assert response.status_code == 200
        assert response.json() == {
            "valid": True,
            "token": created["token"],
            "refreshToken": created["refreshToken"],
            "expirationDate": EXPIRY,
        }

    def test_validate_license_unknown(self, api_client):
        """Test validating an unknown pair."""
        response = post(api_client, "validate-license", {"licenseKey": "K1", "playerId": "p1"})

        assert response.status_code == 200
        assert response.json() == {"valid": False, "message": "Invalid license or playerId"}

    def test_validate_token_before_expiry(self, api_client):
        """Test validating a live token."""
        created = create_license(api_client)

        response = post(
            api_client, "validate-token", {"token": created["token"], "playerId": "p1"}
        )

        assert response.status_code == 200
        assert response.json() == {
            "valid": True,
            "expired": False,
            "newToken": None,
            "playerId": "p1",
            "supportDevs": "support@example.com",
            "announcement": "Server maintenance on Friday",
        }

    def test_validate_token_after_expiry(self, api_client, clock):
        """Test that an expired token is re-issued when the refresh token matches."""
        created = create_license(api_client)
        clock.now = datetime(2030, 1, 2, tzinfo=timezone.utc)

        response = post(
            api_client,
            "validate-token",
            {
                "token": created["token"],
                "refreshToken": created["refreshToken"],
                "playerId": "p1",
            },
        )

        data = response.json()
        assert data["valid"] is True
        assert data["expired"] is True
        assert data["newToken"]

    def test_validate_token_wrong_refresh(self, api_client, clock):
        """Test that a wrong refresh token is refused."""
        created = create_license(api_client)
        clock.now = datetime(2030, 1, 2, tzinfo=timezone.utc)

        response = post(
            api_client,
            "validate-token",
            {"token": created["token"], "refreshToken": "wrong", "playerId": "p1"},
        )

        assert response.status_code == 200
        assert response.json() == {"valid": False, "message": "Invalid refresh token"}

    @pytest.mark.parametrize("token", ["", None])
    def test_validate_token_without_token_uses_refresh(self, api_client, token):
        """Test that an empty or absent token falls back to the refresh token."""
        created = create_license(api_client)
        payload = {"refreshToken": created["refreshToken"], "playerId": "p1"}
        if token is not None:
            payload["token"] = token

        response = post(api_client, "validate-token", payload)

        assert response.status_code == 200
        data = response.json()
        assert data["valid"] is True
        assert data["expired"] is True
        assert data["newToken"]

    def test_refresh_token(self, api_client):
        """Test exchanging a refresh token."""
        created = create_license(api_client)

        response = post(api_client, "refresh-token", {"refreshToken": created["refreshToken"]})

        data = response.json()
        assert data["valid"] is True
        assert data["token"]

    def test_refresh_token_unknown(self, api_client):
        """Test refreshing with an unknown refresh token."""
        response = post(api_client, "refresh-token", {"refreshToken": "unknown"})

        assert response.json() == {"valid": False, "message": "Invalid refresh token"}

    def test_refresh_token_overlong_unknown(self, api_client):
        """Test that a long unknown refresh token is refused like any unknown one."""
        response = post(api_client, "refresh-token", {"refreshToken": "x" * 65})

        assert response.status_code == 200
        assert response.json() == {"valid": False, "message": "Invalid refresh token"}

    def test_update_license(self, api_client):
        """Test updating key and expiration date."""
        created = create_license(api_client)

        response = post(
            api_client,
            "update-license",
            {
                "playerId": "p1",
                "licenseKey": "K1",
                "newLicenseKey": "K2",
                "newExpirationDate": "2031-06-01T00:00:00Z",
            },
        )

        data = response.json()
        assert data["message"] == "License updated"
        assert data["newToken"] != created["token"]
        assert data["newRefreshToken"] != created["refreshToken"]
        assert data["newExpirationDate"] == "2031-06-01T00:00:00Z"

    def test_update_license_empty_values_keep_current(self, api_client):
        """Test that empty new values leave key and expiry unchanged."""
        create_license(api_client)

        response = post(
            api_client,
            "update-license",
            {"playerId": "p1", "licenseKey": "K1", "newLicenseKey": "", "newExpirationDate": ""},
        )

        assert response.json()["newExpirationDate"] == EXPIRY
        validated = post(
            api_client, "validate-license", {"licenseKey": "K1", "playerId": "p1"}
        ).json()
        assert validated["valid"] is True

    def test_update_license_bad_date(self, api_client):
        """Test that an unparseable expiration date is a validation error."""
        create_license(api_client)

        response = post(
            api_client,
            "update-license",
            {"playerId": "p1", "licenseKey": "K1", "newExpirationDate": "next year"},
        )

        assert response.status_code == 400

    def test_update_license_not_found(self, api_client):
        """Test updating a missing license."""
        response = post(api_client, "update-license", {"playerId": "p1", "licenseKey": "K1"})

        assert response.json() == {"valid": False, "message": "License not found"}

    def test_delete_license(self, api_client):
        """Test deleting a license and then deleting it again."""
        create_license(api_client)

        first = post(api_client, "delete-license", {"licenseKey": "K1", "playerId": "p1"})
        second = post(api_client, "delete-license", {"licenseKey": "K1", "playerId": "p1"})

        assert first.json() == {"message": "License deleted"}
        assert second.json() == {"message": "License not found"}

    def test_get_trial(self, api_client):
        """Test that a player gets exactly one trial."""
        first = post(api_client, "get-trial", {"playerId": "p1"})
        second = post(api_client, "get-trial", {"playerId": "p1"})

        data = first.json()
        assert first.status_code == 200
        assert data["success"] is True
        assert data["trialKey"].startswith("TRIAL-")
        assert data["token"]
        assert data["expirationDate"] == "2035-06-01T00:00:00Z"
        assert second.status_code == 200
        assert second.json() == {"success": False, "message": "Trial already used"}

    def test_get_trial_missing_player(self, api_client):
        """Test that a trial request without player is a bad request."""
        response = post(api_client, "get-trial", {})

        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "Missing playerId"}

    def test_list_licenses(self, api_client):
        """Test listing records with the admin token."""
        created = create_license(api_client)

        response = api_client.get(
            reverse("licenses:list-licenses"), HTTP_X_ADMIN_TOKEN="test-admin-token"
        )

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 1
        assert data["licenses"][0] == {
            "licenseKey": "K1",
            "playerId": "p1",
            "token": created["token"],
            "refreshToken": created["refreshToken"],
            "expirationDate": EXPIRY,
        }

    @pytest.mark.parametrize("headers", [{}, {"HTTP_X_ADMIN_TOKEN": "wrong"}])
    def test_list_licenses_forbidden(self, api_client, headers):
        """Test that listing without the admin token is refused."""
        response = api_client.get(reverse("licenses:list-licenses"), **headers)

        assert response.status_code == 403

    def test_store_failure_is_503(self, api_client, api_engine, monkeypatch):
        """Test that a store failure surfaces as a structured 503."""

        def broken_add(record):
            raise StoreIOError("disk full")

        monkeypatch.setattr(api_engine.record_store, "add", broken_add)

        response = post(
            api_client,
            "create-license",
            {"playerId": "p1", "licenseKey": "K1", "expirationDate": EXPIRY},
        )

        assert response.status_code == 503
        assert response.json()["error"]["code"] == "STORE_IO_ERROR"

    def test_record_vanishing_during_refresh_is_422(self, api_client, api_engine, monkeypatch):
        """Test that a store losing the record mid-operation gives a structured 422."""
        created = create_license(api_client)

        def vanished(record):
            raise LicenseNotFoundError(f"License record {record.id} not found")

        monkeypatch.setattr(api_engine.record_store, "update", vanished)

        response = post(api_client, "refresh-token", {"refreshToken": created["refreshToken"]})

        assert response.status_code == 422
        assert response.json()["error"]["code"] == "LICENSE_NOT_FOUND"

    def test_correlation_id_header(self, api_client):
        """Test that responses carry a correlation id."""
        response = post(
            api_client,
            "validate-license",
            {"licenseKey": "K1", "playerId": "p1"},
            HTTP_X_CORRELATION_ID="abc-123",
        )

        assert response["X-Correlation-ID"] == "abc-123"


@pytest.mark.integration
class TestServiceEndpoints:
    """Integration tests for health and metrics."""

    def test_health(self, client):
        """Test the health endpoint."""
        response = client.get("/health/")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_metrics(self, client):
        """Test the Prometheus exposition endpoint."""
        response = client.get("/metrics/")

        assert response.status_code == 200
        assert b"license_operations_total" in response.content
