"""
Client route table — two layout roots with lazily imported components.

Each :class:`RouteRecord` names its component by import path
(``"package.module:Attribute"``).  Nothing is imported until a location
first resolves to that record; loaded components are cached for the life
of the process.

``/admin`` and ``/`` are mutually exclusive roots: every match starts at
exactly one of them, and ``RouteMatch.layout`` tells you which.
"""

from __future__ import annotations

import importlib
import logging
from typing import Any, Protocol

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

_component_cache: dict[str, Any] = {}


class Component(Protocol):
    def render(self, outlet: str = "") -> str: ...


class RouteRecord(BaseModel):
    path: str
    name: str
    component: str
    children: list[RouteRecord] = Field(default_factory=list)

    def load_component(self) -> Component:
        return load_component(self.component)


class RouteMatch(BaseModel):
    path: str
    name: str
    matched: list[RouteRecord]
    params: dict[str, str] = Field(default_factory=dict)

    @property
    def layout(self) -> str:
        return self.matched[0].name

    def render(self) -> str:
        """Render innermost view first, wrapping it in each parent in turn."""
        html = ""
        for record in reversed(self.matched):
            html = record.load_component().render(html)
        return html


def load_component(ref: str) -> Component:
    """Import ``module:attr`` on first use and return an instance of it."""
    if ref not in _component_cache:
        module_name, _, attr = ref.partition(":")
        if not attr:
            raise ValueError(f"Component reference must be 'module:attr', got {ref!r}")
        module = importlib.import_module(module_name)
        _component_cache[ref] = getattr(module, attr)
        logger.debug("Loaded component %s", ref)
    return _component_cache[ref]()


def loaded_components() -> set[str]:
    return set(_component_cache)


def _join(parent: str, child: str) -> str:
    if not child:
        return parent
    if child.startswith("/"):
        return child
    return parent.rstrip("/") + "/" + child


def _split(path: str) -> list[str]:
    return [seg for seg in path.split("/") if seg]


def normalise_location(location: str) -> str:
    """Reduce a browser location to a route path.

    Hash-history locations (``/#/about``, ``#/about``) resolve by their
    fragment; query strings and trailing slashes are dropped.
    """
    if "#" in location:
        location = location.split("#", 1)[1]
    location = location.split("?", 1)[0]
    if not location.startswith("/"):
        location = "/" + location
    if len(location) > 1:
        location = location.rstrip("/") or "/"
    return location


class Router:
    def __init__(self, routes: list[RouteRecord]) -> None:
        self.routes = routes
        # Depth-first with children ahead of their parent, so the most
        # nested record wins when a child shares its parent's path.
        self._flat: list[tuple[list[str], list[RouteRecord]]] = []
        for record in routes:
            self._flatten(record, "", [])

    def _flatten(self, record: RouteRecord, parent_path: str, chain: list[RouteRecord]) -> None:
        full = _join(parent_path, record.path)
        chain = [*chain, record]
        for child in record.children:
            self._flatten(child, full, chain)
        self._flat.append((_split(full), chain))

    def resolve(self, location: str) -> RouteMatch | None:
        path = normalise_location(location)
        segments = _split(path)
        for pattern, chain in self._flat:
            params = _match(pattern, segments)
            if params is not None:
                return RouteMatch(path=path, name=chain[-1].name, matched=chain, params=params)
        return None

    def by_name(self, name: str) -> RouteRecord | None:
        for _, chain in self._flat:
            if chain[-1].name == name:
                return chain[-1]
        return None


def _match(pattern: list[str], segments: list[str]) -> dict[str, str] | None:
    if len(pattern) != len(segments):
        return None
    params: dict[str, str] = {}
    for expected, actual in zip(pattern, segments):
        if expected.startswith(":"):
            params[expected[1:]] = actual
        elif expected.casefold() != actual.casefold():
            return None
    return params


ROUTES: list[RouteRecord] = [
    RouteRecord(
        path="/admin",
        name="admin",
        component="app.frontend.layouts.admin:AdminLayout",
        children=[
            RouteRecord(
                path="",
                name="adminIndex",
                component="app.frontend.views.admin_home:AdminHomeView",
            ),
        ],
    ),
    RouteRecord(
        path="/",
        name="home",
        component="app.frontend.layouts.default:DefaultLayout",
        children=[
            RouteRecord(
                path="",
                name="Index",
                component="app.frontend.views.home:HomeView",
            ),
            RouteRecord(
                path="about",
                name="About",
                component="app.frontend.views.about:AboutView",
            ),
        ],
    ),
]

router = Router(ROUTES)
