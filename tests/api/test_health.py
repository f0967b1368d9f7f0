"""
Tests for the health check endpoint.
"""


def test_health_check_returns_200(client):
    response = client.get("/health")
    assert response.status_code == 200


def test_health_check_identifies_service(client):
    data = client.get("/health").json()
    assert data["service"] == "bookkeeping-engine"


def test_health_check_reaches_test_database(client):
    """
    The test database is always reachable, so the check should
    report it healthy and the service as a whole healthy too.
    """
    data = client.get("/health").json()
    assert data["database"] == "healthy"
    assert data["status"] == "healthy"
