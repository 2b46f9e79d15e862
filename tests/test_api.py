"""Tests for HTTP endpoints."""

import pytest

from shortlink.database.memory import InMemoryLinkStore
from shortlink.errors import StorageUnavailableError
from shortlink.service import ShortLinkService
from web_app import create_app
from httpx import ASGITransport, AsyncClient


class BrokenStore(InMemoryLinkStore):
    """Store that fails every round-trip."""

    async def insert(self, identifier, long_url):
        raise StorageUnavailableError("password authentication failed for user 'shortlink'")

    async def fetch_and_increment(self, identifier):
        raise StorageUnavailableError("password authentication failed for user 'shortlink'")

    async def health_check(self):
        return False


async def make_client(service, config):
    app = create_app(service_instance=service, config=config)
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver")


@pytest.mark.asyncio
class TestShortenEndpoint:
    """Test POST /."""

    async def test_shorten_url(self, client, sample_urls):
        response = await client.post("/", json={"url": sample_urls[0]})

        assert response.status_code == 201
        data = response.json()
        assert data["clicks"] == 0
        assert data["url"].startswith("http://testserver/")
        assert len(data["url"].rsplit("/", 1)[1]) == 6

    async def test_shorten_same_url_twice(self, client, store, sample_urls):
        first = await client.post("/", json={"url": sample_urls[0]})
        second = await client.post("/", json={"url": sample_urls[0]})

        assert first.status_code == 201
        assert second.status_code == 422
        assert "already been shortened" in second.json()["error"]
        assert len(store) == 1

    async def test_shorten_missing_url(self, client):
        response = await client.post("/", json={"link": "https://example.com"})

        assert response.status_code == 400
        assert "error" in response.json()

    async def test_shorten_empty_url(self, client):
        response = await client.post("/", json={"url": ""})

        assert response.status_code == 400
        assert "error" in response.json()

    async def test_shorten_blank_url(self, client):
        response = await client.post("/", json={"url": "   "})

        assert response.status_code == 400
        assert response.json()["error"].startswith("Invalid URL")

    async def test_shorten_url_with_nul(self, client, store):
        response = await client.post("/", json={"url": "https://example.com/\u0000x"})

        assert response.status_code == 400
        assert "control characters" in response.json()["error"]
        assert len(store) == 0

    async def test_shorten_multibyte_url_too_long(self, client, store):
        response = await client.post("/", json={"url": "https://example.com/" + "\u00e9" * 1500})

        assert response.status_code == 400
        assert "too long" in response.json()["error"]
        assert len(store) == 0

    async def test_shorten_storage_failure(self, config):
        """Storage errors return a generic 500 with no internal detail."""
        client = await make_client(ShortLinkService(store=BrokenStore()), config)
        async with client:
            response = await client.post("/", json={"url": "https://example.com/a"})

        assert response.status_code == 500
        assert response.json() == {"error": "internal server error"}

    async def test_shorten_exhausted(self, config, store, scripted_generator):
        await store.insert("AAAAAA", "https://example.com/existing")
        service = ShortLinkService(
            store=store,
            generator=scripted_generator(["AAAAAA"]),
            max_insert_attempts=3,
        )

        client = await make_client(service, config)
        async with client:
            response = await client.post("/", json={"url": "https://example.com/new"})

        assert response.status_code == 503
        assert "error" in response.json()


@pytest.mark.asyncio
class TestRedirectEndpoint:
    """Test GET /{identifier}."""

    async def test_round_trip(self, client):
        """Shorten, follow the redirect, and see one click."""
        create = await client.post("/", json={"url": "https://example.com/a"})
        identifier = create.json()["url"].rsplit("/", 1)[1]

        info = await client.get(f"/api/links/{identifier}")
        assert info.json()["clicks"] == 0

        response = await client.get(f"/{identifier}", follow_redirects=False)
        assert response.status_code == 308
        assert response.headers["location"] == "https://example.com/a"

        info = await client.get(f"/api/links/{identifier}")
        assert info.json()["clicks"] == 1

    async def test_redirect_location_is_ascii(self, client):
        """Spaces and non-ASCII characters are encoded; the stored URL is not."""
        long_url = "https://\u4f8b\u3048.jp/a b/\u00fc"
        create = await client.post("/", json={"url": long_url})
        identifier = create.json()["url"].rsplit("/", 1)[1]

        response = await client.get(f"/{identifier}", follow_redirects=False)

        assert response.status_code == 308
        assert response.headers["location"] == "https://xn--r8jz45g.jp/a%20b/%C3%BC"
        info = await client.get(f"/api/links/{identifier}")
        assert info.json()["url"] == long_url

    async def test_redirect_not_found(self, client, sample_urls):
        for url in sample_urls:
            await client.post("/", json={"url": url})

        response = await client.get("/zzzzzz", follow_redirects=False)

        assert response.status_code == 404
        assert "not found" in response.json()["error"]

    async def test_redirect_malformed_identifier(self, client):
        response = await client.get("/favicon.ico", follow_redirects=False)

        assert response.status_code == 404

    async def test_redirect_storage_failure(self, config):
        client = await make_client(ShortLinkService(store=BrokenStore()), config)
        async with client:
            response = await client.get("/abc123", follow_redirects=False)

        assert response.status_code == 500
        assert response.json() == {"error": "internal server error"}


@pytest.mark.asyncio
class TestOperationalEndpoints:
    """Test /api endpoints."""

    async def test_get_link_info(self, client, sample_urls):
        create = await client.post("/", json={"url": sample_urls[0]})
        short_url = create.json()["url"]
        identifier = short_url.rsplit("/", 1)[1]

        response = await client.get(f"/api/links/{identifier}")

        assert response.status_code == 200
        data = response.json()
        assert data["identifier"] == identifier
        assert data["url"] == sample_urls[0]
        assert data["short_url"] == short_url
        assert data["clicks"] == 0
        assert data["created_at"] is not None

    async def test_get_link_info_not_found(self, client):
        response = await client.get("/api/links/nonexistent")

        assert response.status_code == 404
        assert "error" in response.json()

    async def test_health_check(self, client):
        response = await client.get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["database"] == "healthy"
        assert "timestamp" in data

    async def test_health_check_unhealthy(self, config):
        client = await make_client(ShortLinkService(store=BrokenStore()), config)
        async with client:
            response = await client.get("/api/health")

        assert response.status_code == 200
        assert response.json()["status"] == "unhealthy"
