"""Test rate limiting functionality."""
import pytest


@pytest.mark.integration
@pytest.mark.rate_limit
class TestRateLimiting:
    """Test rate limiting on organizer endpoints."""

    def test_create_meeting_rate_limit(self, client):
        """Test that meeting creation rate limiting works (20 per minute)."""
        payload = {"title": "Weekly sync", "dates": ["2024-05-01"], "start": "10:00", "end": "10:30"}

        for i in range(20):
            response = client.post("/api/v1/meetings", json=payload)
            assert response.status_code == 200, f"Request {i+1} should succeed under 20/min limit"

        response = client.post("/api/v1/meetings", json=payload)
        assert response.status_code == 429, "Request 21 should be rate limited with 429 status"
