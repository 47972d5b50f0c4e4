import pytest
import requests

from schemas.models import Profile, ScoredRole
from app.primary_ranker import PrimaryRanker
from app.recommender import Recommender
from app.rules import rank_by_skill_overlap
from app.storage.base import StorageError
from fakes import BrokenRoleStore, MemoryProfileStore, MemoryRoleStore, make_role


def build(profile, roles, llm=None):
    profiles = MemoryProfileStore([profile] if profile else [])
    primary = PrimaryRanker(llm, roles) if llm is not None else None
    return Recommender(profiles, roles, primary)


@pytest.fixture
def fifteen_roles():
    # posted out of order so "recent" differs from catalog order
    days = [5, 14, 0, 9, 3, 12, 7, 1, 11, 2, 13, 6, 10, 4, 8]
    return MemoryRoleStore([make_role(f"p{d}", ["Python"], day=d) for d in days])


@pytest.mark.parametrize("profile", [None, Profile(user_id="u1", skills=[])])
def test_no_skills_returns_recent_roles_without_ranking(fifteen_roles, canned_llm, profile):
    llm = canned_llm('["p1"]')
    result = build(profile, fifteen_roles, llm).recommend("u1")

    assert [r.role_id for r in result] == [f"p{d}" for d in range(14, 4, -1)]
    assert not any(isinstance(r, ScoredRole) for r in result)
    assert llm.provider.calls == 0
    assert fifteen_roles.sample_sizes == []


def test_ai_result_used_in_model_order(catalog, canned_llm, skilled_profile):
    rec = build(skilled_profile, MemoryRoleStore(catalog), canned_llm('["r1", "r9", "zzz"]'))
    result = rec.recommend("u1")
    assert [r.role_id for r in result] == ["r1", "r9"]


@pytest.mark.parametrize("reply", [
    "Sorry, I cannot help with that.",
    '["unknown"]',
    requests.Timeout("deadline"),
    requests.ConnectionError("refused"),
    pytest.param("[" * 200000, id="deeply-nested"),
])
def test_unusable_ai_result_equals_direct_fallback(catalog, canned_llm, skilled_profile, reply):
    roles = MemoryRoleStore(catalog)
    result = build(skilled_profile, roles, canned_llm(reply)).recommend("u1")
    assert result == rank_by_skill_overlap(skilled_profile, catalog)


def test_without_ai_ranker_falls_back(catalog, skilled_profile):
    result = build(skilled_profile, MemoryRoleStore(catalog)).recommend("u1")
    assert [r.role_id for r in result] == ["r1", "r2", "r3", "r9"]
    assert result[0].score == pytest.approx(0.667, abs=1e-3)


def test_end_to_end_fallback_example(canned_llm):
    profile = Profile(user_id="u1", skills=["JavaScript", "React"])
    roles = MemoryRoleStore([
        make_role("A", ["JavaScript", "React", "Node.js"]),
        make_role("B", ["Python"]),
    ])
    result = build(profile, roles, canned_llm(requests.Timeout())).recommend("u1")

    assert [r.role_id for r in result] == ["A", "B"]
    assert [r.score for r in result] == [pytest.approx(0.667, abs=1e-3), 0.0]


def test_no_retry_after_ai_failure(catalog, canned_llm, skilled_profile):
    llm = canned_llm("not json")
    build(skilled_profile, MemoryRoleStore(catalog), llm).recommend("u1")
    assert llm.provider.calls == 1


def test_idempotent_with_deterministic_ranker(catalog, canned_llm, skilled_profile):
    for reply in ('["r9", "r2"]', "garbage"):
        rec = build(skilled_profile, MemoryRoleStore(catalog), canned_llm(reply))
        assert rec.recommend("u1") == rec.recommend("u1")


def test_fallback_respects_catalog_limit(skilled_profile):
    roles = MemoryRoleStore([make_role("low", ["Python"]), make_role("high", ["JavaScript"])])
    rec = Recommender(MemoryProfileStore([skilled_profile]), roles, None, fallback_catalog_limit=1)
    assert [r.role_id for r in rec.recommend("u1")] == ["low"]


def test_fallback_scores_whole_catalog_by_default(skilled_profile):
    catalog = [make_role(f"n{i}", ["Cobol"]) for i in range(600)] + [make_role("match", ["JavaScript"])]
    roles = MemoryRoleStore(catalog)
    result = Recommender(MemoryProfileStore([skilled_profile]), roles, None).recommend("u1")

    assert result[0].role_id == "match"
    assert result == rank_by_skill_overlap(skilled_profile, catalog)


def test_recommendations_capped_at_max_results(skilled_profile):
    roles = MemoryRoleStore([make_role(f"j{i}", ["JavaScript"]) for i in range(25)])
    rec = Recommender(MemoryProfileStore([skilled_profile]), roles, None)
    assert len(rec.recommend("u1")) == 10


def test_storage_failure_propagates(skilled_profile):
    with pytest.raises(StorageError):
        build(skilled_profile, BrokenRoleStore()).recommend("u1")


def test_recommender_does_not_mutate_profile(catalog, canned_llm, skilled_profile):
    profiles = MemoryProfileStore([skilled_profile])
    before = skilled_profile.model_dump()
    Recommender(profiles, MemoryRoleStore(catalog), PrimaryRanker(canned_llm("x"), MemoryRoleStore(catalog))).recommend("u1")
    assert profiles.get_profile("u1").model_dump() == before
