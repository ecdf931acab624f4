from fastapi.testclient import TestClient

from ewaste_api.models.user import User


def test_register_success(client: TestClient):
    """Test successful user registration."""
    response = client.post(
        "/register",
        json={"name": "Ana", "email": "ana@example.com", "password": "securepassword123"},
    )

    assert response.status_code == 200
    assert response.json() == {"message": "User registered successfully"}


def test_register_missing_field(client: TestClient):
    response = client.post("/register", json={"name": "Ana", "email": "ana@example.com"})

    assert response.status_code == 400


def test_register_duplicate_email(client: TestClient, test_user: User):
    """Duplicate emails fail in the store and come back as a generic 500."""
    response = client.post(
        "/register",
        json={"name": "Other", "email": test_user.email, "password": "password123"},
    )

    assert response.status_code == 500
    assert "password_hash" not in response.text


def test_login_success(client: TestClient, test_user: User):
    """Test successful login."""
    response = client.post(
        "/login",
        json={"email": test_user.email, "password": "testpassword"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Login successful"
    assert data["user"] == {"id": test_user.id, "name": test_user.name, "email": test_user.email}


def test_login_wrong_password(client: TestClient, test_user: User):
    response = client.post(
        "/login",
        json={"email": test_user.email, "password": "wrongpassword"},
    )

    assert response.status_code == 401
    assert response.json()["error"] == "Invalid credentials"


def test_login_unknown_email(client: TestClient):
    response = client.post(
        "/login",
        json={"email": "nobody@example.com", "password": "whatever"},
    )

    assert response.status_code == 401


def test_login_missing_field(client: TestClient):
    response = client.post("/login", json={"email": "ana@example.com"})

    assert response.status_code == 400


def test_health(client: TestClient):
    assert client.get("/health").status_code == 200
