"""Resource Routes — the five CRUD actions for every registered resource.

Invariants:
    - {resource} must be registered (UnknownResourceError → 404 otherwise)
    - Query string and JSON body are the action params; `type` selects the view
"""

from fastapi import APIRouter, Depends

from crudkit.api.dependencies import get_action_templates
from crudkit.services.action_templates import ActionTemplates

router = APIRouter(tags=["resources"])


@router.get("/{resource}")
async def index(actions: ActionTemplates = Depends(get_action_templates)):
    """List records; params filter, `sort`/`limit`/`offset` page."""
    return await actions.index()


@router.post("/{resource}", status_code=201)
async def create(actions: ActionTemplates = Depends(get_action_templates)):
    """Create a record from the request body."""
    return await actions.create()


@router.get("/{resource}/{id}")
async def show(actions: ActionTemplates = Depends(get_action_templates)):
    return await actions.show()


@router.api_route("/{resource}/{id}", methods=["PATCH", "PUT"])
async def update(actions: ActionTemplates = Depends(get_action_templates)):
    return await actions.update()


@router.delete("/{resource}/{id}")
async def destroy(actions: ActionTemplates = Depends(get_action_templates)):
    return await actions.destroy()
