"""Web interface routes implementation."""

from fastapi import APIRouter, Request, Form, Path, Response, status
from fastapi.responses import HTMLResponse, RedirectResponse

from ito.database.sqlite import MAX_LINK_ID, MIN_LINK_ID
from ..presentation import render_links

router = APIRouter()


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def homepage(request: Request):
    """Serve the list of links."""
    manager = request.app.state.manager
    links = await manager.list_links()
    return HTMLResponse(content=render_links(links))


@router.get("/favicon.ico", include_in_schema=False)
async def favicon():
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{alias}", include_in_schema=False)
async def redirect_to_target(request: Request, alias: str):
    """Redirect to the target URL of an alias."""
    resolver = request.app.state.resolver
    
    # NotFound is turned into a 404 by the error handlers
    target_url = await resolver.resolve(alias)
    
    return RedirectResponse(url=target_url, status_code=status.HTTP_302_FOUND)


@router.post("/links", include_in_schema=False)
async def create_link(
    request: Request,
    alias: str = Form(...),
    target_url: str = Form(...),
):
    """Handle form submission to create a link."""
    manager = request.app.state.manager
    
    await manager.create(alias=alias, target_url=target_url)
    
    return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)


@router.delete("/links/{link_id}", include_in_schema=False)
async def delete_link(
    request: Request,
    link_id: int = Path(..., ge=MIN_LINK_ID, le=MAX_LINK_ID),
):
    """Delete a link by id; missing ids are ignored."""
    manager = request.app.state.manager
    await manager.delete(link_id)
    return Response(status_code=status.HTTP_200_OK)
