# services/recommend/app/routers/recommendations.py
from fastapi import APIRouter, Depends, HTTPException

from ..deps import current_user_id, get_recommender, get_resource_store
from ..recommender import Recommender
from ..storage.base import ResourceStore, StorageError

router = APIRouter(tags=["recommendations"])


@router.get("/recommendations")
def get_recommendations(
    user_id: str = Depends(current_user_id),
    recommender: Recommender = Depends(get_recommender),
):
    """Ordered roles for the caller, most relevant first (at most 10)."""
    try:
        roles = recommender.recommend(user_id)
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return [r.model_dump(mode="json") for r in roles]


@router.get("/resources/{skill_name:path}")
@router.get("/recommendations/resources/{skill_name:path}")
def get_skill_resource(skill_name: str, resources: ResourceStore = Depends(get_resource_store)):
    try:
        resource = resources.find_resource(skill_name)
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))
    if resource is None:
        raise HTTPException(status_code=404, detail="Resource not found for this skill.")
    return resource.model_dump(mode="json")
