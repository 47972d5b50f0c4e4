from typing import Iterable, List, Set

from schemas.models import Profile, Role, ScoredRole, unique_strings

def normalize_skills(skills: Iterable[str] | None) -> Set[str]:
    if not skills:
        return set()
    return {s.strip().lower() for s in skills if s and isinstance(s, str) and s.strip()}

def score_role(candidate_skills: Set[str], skills_required: List[str]) -> float:
    # simple overlap: share of the role's (distinct) required skills the candidate has
    required = normalize_skills(skills_required)
    if not required:
        return 0.0
    hits = len(required & candidate_skills)
    return float(round(hits / len(required), 4))

def missing_skills(candidate_skills: Set[str], skills_required: List[str]) -> List[str]:
    return [s for s in unique_strings(skills_required) if s.lower() not in candidate_skills]

def rank_by_skill_overlap(profile: Profile, catalog: List[Role], limit: int = 10) -> List[ScoredRole]:
    """
    Deterministic fallback ranking. Highest score first; equal scores keep
    catalog order (sorted() is stable, also with reverse=True).
    """
    cand = normalize_skills(profile.skills)
    scored = [
        ScoredRole(
            **role.model_dump(),
            score=score_role(cand, role.skills_required),
            missing_skills=missing_skills(cand, role.skills_required),
        )
        for role in catalog
    ]
    scored = sorted(scored, key=lambda r: r.score, reverse=True)
    return scored[:max(0, limit)]
