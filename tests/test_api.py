"""Tests for HTTP routes."""

import logging

import pytest
from httpx import ASGITransport, AsyncClient

from ito.errors import StorageUnavailable
from web_app import create_app


@pytest.mark.asyncio
class TestWebRoutes:
    """Test the web routes."""
    
    async def test_homepage_empty(self, client):
        response = await client.get("/")
        
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "No links yet." in response.text
    
    async def test_favicon(self, client):
        response = await client.get("/favicon.ico")
        
        assert response.status_code == 204
        assert response.content == b""
    
    async def test_create_link_redirects_home(self, client, manager):
        response = await client.post(
            "/links",
            data={"alias": "foo", "target_url": "https://example.com"},
        )
        
        assert response.status_code == 303
        assert response.headers["location"] == "/"
        links = await manager.list_links()
        assert [(link.alias, link.target_url) for link in links] == [("foo", "https://example.com")]
    
    async def test_create_duplicate_alias(self, client):
        await client.post("/links", data={"alias": "dup", "target_url": "https://a.example.com"})
        
        response = await client.post("/links", data={"alias": "dup", "target_url": "https://b.example.com"})
        
        assert response.status_code == 400
        assert response.text == "Error: alias 'dup' already exists"
    
    async def test_create_invalid_url(self, client, manager):
        response = await client.post("/links", data={"alias": "bad", "target_url": "not a url"})
        
        assert response.status_code == 400
        assert response.text.startswith("Error: invalid URL")
        assert await manager.list_links() == []
    
    async def test_create_invalid_alias(self, client):
        response = await client.post("/links", data={"alias": "favicon.ico", "target_url": "https://example.com"})
        
        assert response.status_code == 400
        assert "reserved" in response.text
    
    async def test_create_missing_field(self, client):
        response = await client.post("/links", data={"alias": "only-alias"})
        
        assert response.status_code == 400
        assert "target_url" in response.text
    
    async def test_redirect(self, client, manager):
        await manager.create("gh", "https://github.com/user/repo")
        
        response = await client.get("/gh")
        
        assert response.status_code == 302
        assert response.headers["location"] == "https://github.com/user/repo"
    
    async def test_redirect_unknown_alias(self, client):
        response = await client.get("/nonexistent")
        
        assert response.status_code == 404
        assert response.text == "Error: alias 'nonexistent' not found"
    
    async def test_links_path_is_a_valid_alias(self, client, manager):
        await manager.create("links", "https://example.com/links")
        
        response = await client.get("/links")
        
        assert response.status_code == 302
        assert response.headers["location"] == "https://example.com/links"
    
    async def test_delete_link(self, client, manager):
        link = await manager.create("gone", "https://example.com")
        
        response = await client.delete(f"/links/{link.id}")
        
        assert response.status_code == 200
        assert await manager.list_links() == []
        assert (await client.get("/gone")).status_code == 404
    
    async def test_delete_missing_link(self, client):
        response = await client.delete("/links/424242")
        
        assert response.status_code == 200
    
    async def test_delete_non_integer_id(self, client):
        response = await client.delete("/links/abc")
        
        assert response.status_code == 400
        assert response.text.startswith("Error:")
    
    async def test_delete_out_of_range_id(self, client, manager):
        await manager.create("keep", "https://keep.example.com")
        
        response = await client.delete("/links/99999999999999999999")
        
        assert response.status_code == 400
        assert response.text.startswith("Error: link_id")
        assert len(await manager.list_links()) == 1
    
    async def test_unrouted_path_is_plain_text(self, client):
        response = await client.get("/a/b")
        
        assert response.status_code == 404
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == "Error: Not Found"
    
    async def test_wrong_method_is_plain_text(self, client):
        response = await client.post("/")
        
        assert response.status_code == 405
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == "Error: Method Not Allowed"
    
    async def test_homepage_lists_links(self, client, manager):
        await manager.create("one", "https://one.example.com")
        await manager.create("two", "https://two.example.com")
        
        response = await client.get("/")
        
        assert response.status_code == 200
        assert 'href="/one"' in response.text
        assert 'href="/two"' in response.text
        assert "https://two.example.com" in response.text
    
    async def test_requests_are_logged(self, client, caplog):
        with caplog.at_level(logging.INFO, logger="ito.web"):
            await client.get("/favicon.ico")
            await client.get("/unknown-alias")
        
        assert "GET /favicon.ico -> 204" in caplog.text
        assert "GET /unknown-alias -> 404" in caplog.text


class FailingStore:
    """Store stand-in whose every call fails like a broken database."""
    
    async def list_links(self):
        raise StorageUnavailable("storage error: disk I/O error")
    
    async def find_by_alias(self, alias):
        raise StorageUnavailable("storage error: disk I/O error")


@pytest.mark.asyncio
class TestErrorResponses:
    """Test that internal failures surface as generic 500s."""
    
    async def test_storage_failure_on_list(self, config):
        app = create_app(store=FailingStore(), config=config)
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://testserver") as client:
            response = await client.get("/")
        
        assert response.status_code == 500
        assert response.text == "Error: internal server error"
    
    async def test_storage_failure_on_redirect(self, config):
        app = create_app(store=FailingStore(), config=config)
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://testserver") as client:
            response = await client.get("/foo")
        
        assert response.status_code == 500
        assert "disk I/O" not in response.text
    
    async def test_render_failure(self, app, monkeypatch):
        def broken_render(links):
            raise RuntimeError("template exploded")
        
        monkeypatch.setattr("web_app.web.routes.render_links", broken_render)
        transport = ASGITransport(app=app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://testserver") as client:
            response = await client.get("/")
        
        assert response.status_code == 500
        assert response.text == "Error: internal server error"
