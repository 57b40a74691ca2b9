from httpx import AsyncClient


async def register_and_login(
    client: AsyncClient,
    username: str = "alice_01",
    email: str = "alice@example.com",
    password: str = "SecurePass123!",
) -> str:
    """Create an account through the API and return a fresh session token"""
    response = await client.post("/auth/register", json={
        "username": username,
        "email": email,
        "password": password,
        "confirm_password": password,
    })
    assert response.status_code == 201

    response = await client.post("/auth/login", json={
        "username": username,
        "password": password,
    })
    assert response.status_code == 201
    return response.json()["session_token"]
