from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..deps import get_role_store
from ..storage.base import RoleStore, StorageError

router = APIRouter(tags=["roles"])


@router.get("/roles")
def list_roles(
    q: Optional[str] = Query(default=None, description="full-text search over title/description/skills/company"),
    limit: int = Query(20, ge=1, le=200),
    roles: RoleStore = Depends(get_role_store),
):
    try:
        items = roles.search_roles(q, limit) if q and q.strip() else roles.list_recent_roles(limit)
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return {"ok": True, "count": len(items), "items": [r.model_dump(mode="json") for r in items]}


@router.get("/roles/{role_id}")
def get_role(role_id: str, roles: RoleStore = Depends(get_role_store)):
    try:
        role = roles.get_role(role_id)
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))
    if role is None:
        raise HTTPException(status_code=404, detail="Role not found")
    return role.model_dump(mode="json")
