import logging
from typing import List, Optional

from schemas.models import Role
from .primary_ranker import PrimaryRanker
from .rules import rank_by_skill_overlap
from .storage.base import ProfileStore, RoleStore

logger = logging.getLogger("recommend.recommender")


class Recommender:
    """
    Picks the recommendation strategy for one user:

    - no assessment (or no skills): most recently posted roles, no ranking;
    - otherwise the AI ranker, and the skill-overlap scorer whenever the AI
      result is unusable. One attempt each, no retries.
    """

    def __init__(self, profiles: ProfileStore, roles: RoleStore, primary: Optional[PrimaryRanker],
                 max_results: int = 10, fallback_catalog_limit: int = 0):
        self.profiles = profiles
        self.roles = roles
        self.primary = primary
        self.max_results = max_results
        self.fallback_catalog_limit = fallback_catalog_limit

    def recommend(self, user_id: str) -> List[Role]:
        profile = self.profiles.get_profile(user_id)
        if profile is None or not profile.skills:
            logger.info("No assessment on file; returning recent roles", extra={"user_id": user_id})
            return self.roles.list_recent_roles(self.max_results)

        if self.primary is not None:
            ranking = self.primary.rank(profile)
            if ranking.ok:
                logger.info("AI ranking used", extra={"user_id": user_id, "count": len(ranking.roles)})
                return ranking.roles[:self.max_results]
            reason = ranking.failure or "empty"
        else:
            reason = "disabled"

        logger.info("AI ranking unavailable; using skill-overlap fallback",
                    extra={"user_id": user_id, "reason": reason})
        catalog = self.roles.list_all_roles(self.fallback_catalog_limit)
        return rank_by_skill_overlap(profile, catalog, limit=self.max_results)
