from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Literal, Optional

from schemas.models import Profile, Role
from .llm_client import LLMClient, LLMError, LLMTimeout
from .sampling import CatalogSampler, StoreSampler
from .storage.base import RoleStore
from .utils.json_parse import parse_string_array

logger = logging.getLogger("recommend.primary_ranker")

FailureReason = Literal["timeout", "unavailable", "malformed", "catalog_mismatch"]

SYSTEM_PROMPT = (
    "You match students to internship roles.\n"
    "- Respond with ONLY a JSON array of roleId strings (no prose, no code fences).\n"
    "- Only use roleIds that appear in the provided list."
)

_PROMPT_TEMPLATE = """Analyze the following student profile and the list of available internship roles.

Student Profile:
- Skills: {skills}
- Interests: {interests}
- Qualification: {qualification}
- Field of Study: {field_of_study}
- Preferred Sectors: {sectors}
- Location Preference: {location}

Available Roles Sample:
{roles}

Based on skill relevance, interests, and qualifications, identify the top {top_k} most relevant roles for this student.
Return ONLY a valid JSON array of at most {top_k} "roleId" strings, best match first. Do not include any other text, explanations, or markdown formatting.
Example format: ["role123", "role456", "role789"]"""


@dataclass
class AiRanking:
    """Either resolved roles in model order, or the reason the AI result was discarded."""
    roles: List[Role] = field(default_factory=list)
    failure: Optional[FailureReason] = None

    @property
    def ok(self) -> bool:
        return self.failure is None and bool(self.roles)


def _join(values: List[str]) -> str:
    return ", ".join(values) if values else "None"


def role_summary(role: Role) -> str:
    return f'roleId: "{role.role_id}", title: "{role.title}", skills: [{", ".join(role.skills_required)}]'


def build_prompt(profile: Profile, sample: List[Role], top_k: int = 5) -> str:
    return _PROMPT_TEMPLATE.format(
        skills=_join(profile.skills),
        interests=_join(profile.interests),
        qualification=profile.qualification or "Not specified",
        field_of_study=profile.field_of_study or "Not specified",
        sectors=_join(profile.preferred_sectors),
        location=profile.location_preference,
        roles="\n".join(role_summary(r) for r in sample),
        top_k=top_k,
    )


def order_by_ids(ids: List[str], roles: List[Role]) -> List[Role]:
    """Re-sort looked-up roles to follow ids; ids with no role are dropped."""
    by_id = {r.role_id: r for r in roles}
    return [by_id[i] for i in ids if i in by_id]


class PrimaryRanker:
    """
    Asks the LLM for the top-k role ids over a sampled slice of the catalog.

    Soft-fail: LLM problems come back as AiRanking.failure, never as exceptions.
    Storage errors are not caught here.
    """

    def __init__(self, llm: LLMClient, roles: RoleStore, sampler: CatalogSampler | None = None,
                 sample_size: int = 50, top_k: int = 5):
        self.llm = llm
        self.roles = roles
        self.sampler = sampler or StoreSampler()
        self.sample_size = sample_size
        self.top_k = top_k

    def rank(self, profile: Profile) -> AiRanking:
        sample = self.sampler.sample(self.roles, self.sample_size)
        prompt = build_prompt(profile, sample, self.top_k)

        try:
            raw = self.llm.generate_text(prompt, system=SYSTEM_PROMPT, temperature=0.2,
                                         name="recommend.primary_ranker")
        except LLMTimeout as e:
            logger.warning("AI ranking timed out", extra={"user_id": profile.user_id, "error": str(e)})
            return AiRanking(failure="timeout")
        except LLMError as e:
            logger.warning("AI ranking unavailable", extra={"user_id": profile.user_id, "error": str(e)})
            return AiRanking(failure="unavailable")

        ids = parse_string_array(raw)
        if ids is None:
            logger.warning("AI ranking returned malformed output",
                           extra={"user_id": profile.user_id, "raw_preview": (raw or "")[:200]})
            return AiRanking(failure="malformed")

        # de-dup, keep model order, cap at top_k
        ids = list(dict.fromkeys(ids))[:self.top_k]
        resolved = order_by_ids(ids, self.roles.find_roles_by_ids(ids))
        if not resolved:
            logger.warning("AI ranking matched no catalog roles", extra={"user_id": profile.user_id, "ids": ids})
            return AiRanking(failure="catalog_mismatch")
        return AiRanking(roles=resolved)
