"""
Catch-all page handler — resolves the request path against the route
table and renders the matched layout / view chain.

Must be included after every API router.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException
from fastapi.responses import HTMLResponse

from app.frontend.router import router as route_table

router = APIRouter(tags=["pages"])


@router.get("/{full_path:path}", response_class=HTMLResponse, include_in_schema=False)
async def render_page(full_path: str) -> HTMLResponse:
    match = route_table.resolve(full_path)
    if match is None:
        raise HTTPException(status_code=404, detail="Page not found")
    return HTMLResponse(
        match.render(),
        headers={"X-Route-Name": match.name, "X-Route-Layout": match.layout},
    )
