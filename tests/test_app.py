"""Smoke tests for the web shell wired from the repository configuration."""

from httpx import AsyncClient


async def test_health_returns_environment(client: AsyncClient) -> None:
    """GET /health returns 200, status ok and the configured environment."""
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "env": "development"}


async def test_readiness_without_valkey_client_is_503(client: AsyncClient) -> None:
    """Lifespan does not run under ASGITransport, so no Valkey client exists."""
    response = await client.get("/health/ready")
    assert response.status_code == 503
    assert response.json()["status"] == "not_ready"


async def test_home_page_renders_with_layout(client: AsyncClient) -> None:
    response = await client.get("/")
    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert "Welcome" in response.text
    assert '<nav class="nav">' in response.text
    assert "/css/site.css" in response.text


async def test_nav_and_auth_pages(client: AsyncClient) -> None:
    for url, heading in [
        ("/about", "About"),
        ("/contact", "Contact"),
        ("/support", "Support"),
        ("/auth/login", "Log in"),
        ("/auth/register", "Register"),
    ]:
        response = await client.get(url)
        assert response.status_code == 200, url
        assert f"<h1>{heading}</h1>" in response.text


async def test_static_files_are_served(client: AsyncClient) -> None:
    response = await client.get("/css/site.css")
    assert response.status_code == 200
    assert "text/css" in response.headers["content-type"]


async def test_unknown_url_renders_not_found_page(client: AsyncClient) -> None:
    response = await client.get("/no/such/page")
    assert response.status_code == 404
    assert "Not Found" in response.text
    assert "/no/such/page" in response.text


async def test_security_headers_are_set(client: AsyncClient) -> None:
    response = await client.get("/")
    assert response.headers["x-content-type-options"] == "nosniff"
    assert "default-src 'self'" in response.headers["content-security-policy"]
    assert "strict-transport-security" not in response.headers


async def test_body_over_limit_is_rejected(client: AsyncClient) -> None:
    """common.ini sets bodyLimit = 100kb."""
    response = await client.post("/contact", content=b"x" * (100 * 1024 + 1))
    assert response.status_code == 413
    assert response.json()["error"] == "PAYLOAD_TOO_LARGE"
