"""Tests for the client route table and the page handler."""

import pytest
from httpx import AsyncClient

from app.frontend import router as router_module
from app.frontend.router import ROUTES, RouteRecord, Router, load_component, router


@pytest.mark.parametrize(
    "location, name, layout",
    [
        ("/admin", "adminIndex", "admin"),
        ("/admin/", "adminIndex", "admin"),
        ("/", "Index", "home"),
        ("", "Index", "home"),
        ("/about", "About", "home"),
        ("/about?ref=footer", "About", "home"),
        ("/#/about", "About", "home"),
        ("#/admin", "adminIndex", "admin"),
        ("/About", "About", "home"),
        ("/ADMIN", "adminIndex", "admin"),
    ],
)
def test_resolve(location, name, layout):
    match = router.resolve(location)
    assert match is not None
    assert match.name == name
    assert match.layout == layout
    assert [r.name for r in match.matched][0] == layout


@pytest.mark.parametrize("location", ["/nope", "/admin/about", "/about/more"])
def test_unknown_locations(location):
    assert router.resolve(location) is None


def test_layout_roots_are_exclusive():
    roots = {r.name for r in ROUTES}
    assert roots == {"admin", "home"}
    for location in ("/", "/about", "/admin"):
        chain = router.resolve(location).matched
        assert sum(1 for r in chain if r.name in roots) == 1


def test_by_name():
    assert router.by_name("About").path == "about"
    assert router.by_name("missing") is None


def test_components_load_lazily(monkeypatch):
    monkeypatch.setattr(router_module, "_component_cache", {})

    match = router.resolve("/about")
    assert router_module.loaded_components() == set()

    html = match.render()
    assert router_module.loaded_components() == {
        "app.frontend.layouts.default:DefaultLayout",
        "app.frontend.views.about:AboutView",
    }
    assert 'class="layout-default"' in html
    assert 'class="view-about"' in html


def test_bad_component_reference():
    with pytest.raises(ValueError):
        load_component("app.frontend.views.about")


def test_dynamic_segments():
    table = Router(
        [
            RouteRecord(
                path="/products/:id",
                name="product",
                component="app.frontend.views.home:HomeView",
            )
        ]
    )
    match = table.resolve("/products/42")
    assert match.params == {"id": "42"}
    assert table.resolve("/products") is None


@pytest.mark.asyncio
async def test_admin_page(async_client: AsyncClient):
    resp = await async_client.get("/admin")
    assert resp.status_code == 200
    assert resp.headers["x-route-layout"] == "admin"
    assert resp.headers["x-route-name"] == "adminIndex"
    assert 'class="layout-admin"' in resp.text
    assert 'class="view-admin-home"' in resp.text


@pytest.mark.asyncio
@pytest.mark.parametrize("path, view", [("/", "view-home"), ("/about", "view-about")])
async def test_default_pages(async_client: AsyncClient, path, view):
    resp = await async_client.get(path)
    assert resp.status_code == 200
    assert resp.headers["x-route-layout"] == "home"
    assert 'class="layout-default"' in resp.text
    assert f'class="{view}"' in resp.text
    assert "layout-admin" not in resp.text


@pytest.mark.asyncio
async def test_unknown_page_is_404(async_client: AsyncClient):
    resp = await async_client.get("/does-not-exist")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Page not found"
