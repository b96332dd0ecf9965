import pytest


@pytest.mark.asyncio
async def test_signup_login_me_logout(app_client, signup):
    headers = await signup("farmer@example.com", "secret1")

    me = await app_client.get("/auth/me", headers=headers)
    assert me.status_code == 200
    assert me.json()["email"] == "farmer@example.com"

    res = await app_client.post(
        "/auth/login",
        json={"email": "farmer@example.com", "password": "secret1", "from": "/equipment/4"},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["redirect"] == "/equipment/4"
    assert body["token_type"] == "bearer"
    assert res.headers.get("cache-control") == "no-store"

    res = await app_client.post("/auth/logout", headers=headers)
    assert res.status_code == 204
    assert (await app_client.get("/auth/me", headers=headers)).status_code == 401
    # idempotent
    assert (await app_client.post("/auth/logout", headers=headers)).status_code == 204


@pytest.mark.asyncio
async def test_login_redirect_defaults_to_home(app_client, signup):
    await signup("a@b.co", "secret1")
    for origin in (None, "https://evil.example/", "//evil.example"):
        payload = {"email": "a@b.co", "password": "secret1"}
        if origin is not None:
            payload["from"] = origin
        res = await app_client.post("/auth/login", json=payload)
        assert res.json()["redirect"] == "/"


@pytest.mark.asyncio
async def test_login_rejects_bad_credentials(app_client, signup):
    await signup("a@b.co", "secret1")
    res = await app_client.post("/auth/login", json={"email": "a@b.co", "password": "nope123"})
    assert res.status_code == 401
    assert res.json()["detail"].startswith("Failed to log in")


@pytest.mark.asyncio
async def test_signup_validation_is_400(app_client):
    res = await app_client.post(
        "/auth/signup",
        json={"name": "Ravi", "email": "a@b.co", "password": "secret1", "confirm_password": "x"},
    )
    assert res.status_code == 400
    assert res.json() == {"detail": "Passwords do not match"}

    res = await app_client.post("/auth/login", json={"email": "a@b.co"})
    assert res.status_code == 400
    assert res.json() == {"detail": "Please enter both email and password"}


@pytest.mark.asyncio
async def test_me_without_token_is_401(app_client):
    res = await app_client.get("/auth/me")
    assert res.status_code == 401
    res = await app_client.get("/auth/me", headers={"Authorization": "Basic abc"})
    assert res.status_code == 401


@pytest.mark.asyncio
async def test_forgot_password(app_client):
    res = await app_client.post("/auth/forgot-password", json={"email": "a@b.co"})
    assert res.status_code == 202
    res = await app_client.post("/auth/forgot-password", json={"email": "bad"})
    assert res.status_code == 400


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "origin",
    [
        "/\\evil.example",
        "/\\/evil.example",
        "/\t/evil.example",
        "/\n/evil.example",
        "javascript:alert(1)",
    ],
)
async def test_login_redirect_rejects_offsite_paths(app_client, signup, origin):
    await signup("a@b.co", "secret1")
    res = await app_client.post(
        "/auth/login", json={"email": "a@b.co", "password": "secret1", "from": origin}
    )
    assert res.status_code == 200
    assert res.json()["redirect"] == "/"


@pytest.mark.asyncio
async def test_login_redirect_keeps_query_string(app_client, signup):
    await signup("a@b.co", "secret1")
    res = await app_client.post(
        "/auth/login",
        json={"email": "a@b.co", "password": "secret1", "from": "/equipment?category=haulage"},
    )
    assert res.json()["redirect"] == "/equipment?category=haulage"
