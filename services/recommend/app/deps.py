from typing import Optional

from fastapi import Depends, Header, HTTPException, Request

from .config import Settings, settings
from .llm_client import LLMClient
from .primary_ranker import PrimaryRanker
from .recommender import Recommender
from .sampling import build_sampler
from .storage.base import ProfileStore, ResourceStore, RoleStore


def get_settings() -> Settings:
    return settings


def current_user_id(x_user_id: Optional[str] = Header(default=None)) -> str:
    """Authenticated user id, set by the auth gateway in front of this service."""
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(status_code=401, detail="Not authorized, no user")
    return x_user_id.strip()


def get_profile_store(request: Request) -> ProfileStore:
    return request.app.state.stores.profiles


def get_role_store(request: Request) -> RoleStore:
    return request.app.state.stores.roles


def get_resource_store(request: Request) -> ResourceStore:
    return request.app.state.stores.resources


def get_llm_client(request: Request) -> LLMClient:
    return request.app.state.llm


def get_recommender(
    profiles: ProfileStore = Depends(get_profile_store),
    roles: RoleStore = Depends(get_role_store),
    llm: LLMClient = Depends(get_llm_client),
    cfg: Settings = Depends(get_settings),
) -> Recommender:
    primary = None
    if llm.enabled:
        primary = PrimaryRanker(
            llm,
            roles,
            sampler=build_sampler(cfg.SAMPLE_SEED),
            sample_size=cfg.AI_SAMPLE_SIZE,
            top_k=cfg.AI_TOP_K,
        )
    return Recommender(
        profiles,
        roles,
        primary,
        max_results=cfg.MAX_RECOMMENDATIONS,
        fallback_catalog_limit=cfg.FALLBACK_CATALOG_LIMIT,
    )
