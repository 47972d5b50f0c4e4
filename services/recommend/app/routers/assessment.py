from fastapi import APIRouter, Depends, HTTPException

from schemas.models import AssessmentIn, Profile
from ..deps import current_user_id, get_profile_store
from ..storage.base import ProfileStore, StorageError

router = APIRouter(tags=["assessment"])


@router.post("/assessment", status_code=201)
def submit_assessment(
    body: AssessmentIn,
    user_id: str = Depends(current_user_id),
    profiles: ProfileStore = Depends(get_profile_store),
):
    """Create or replace the caller's assessment."""
    profile = Profile(user_id=user_id, **body.model_dump())
    try:
        saved = profiles.save_profile(profile)
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return saved.model_dump(mode="json")


@router.get("/assessment")
def get_assessment(
    user_id: str = Depends(current_user_id),
    profiles: ProfileStore = Depends(get_profile_store),
):
    try:
        profile = profiles.get_profile(user_id)
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))
    if profile is None:
        raise HTTPException(status_code=404, detail="Assessment not found. Please complete it first.")
    return profile.model_dump(mode="json")
