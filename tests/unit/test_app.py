def test_root_returns_message(client):
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Employee Records API"


def test_health_returns_status(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["version"] == "0.1.0"
    assert "services" in data


def test_each_client_starts_with_an_empty_store(client):
    response = client.get("/api/v1/employees")
    assert response.status_code == 200
    assert response.json() == {}


def test_debug_flag_comes_from_settings():
    from app.core.config import settings
    from app.main import app

    assert app.debug is settings.DEBUG
    assert app.debug is False
