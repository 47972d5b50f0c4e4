from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from schemas.models import Profile, Role, SkillResource
from app.llm_client import LLMClient
from app.storage.base import ProfileStore, RoleStore
from fakes import CannedProvider, MemoryProfileStore, MemoryResourceStore, MemoryRoleStore, Stores, make_role


@pytest.fixture(autouse=True)
def _no_tracing(monkeypatch):
    monkeypatch.delenv("LANGFUSE_PUBLIC_KEY", raising=False)
    monkeypatch.delenv("LANGFUSE_SECRET_KEY", raising=False)


@pytest.fixture
def catalog() -> List[Role]:
    return [
        make_role("r1", ["JavaScript", "React", "Node.js"], day=1),
        make_role("r2", ["Python"], day=2),
        make_role("r3", [], day=3),
        make_role("r9", ["Figma", "Prototyping"], day=4),
    ]


@pytest.fixture
def skilled_profile() -> Profile:
    return Profile(user_id="u1", skills=["JavaScript", "React"], interests=["Web Development"],
                   qualification="B.Tech", preferred_sectors=["IT"])


@pytest.fixture
def canned_llm():
    """canned_llm(*replies) -> LLMClient backed by a CannedProvider."""
    def _make(*replies):
        return LLMClient(CannedProvider(replies), model="test-model", timeout_s=1.0)
    return _make


@pytest.fixture
def resources() -> MemoryResourceStore:
    return MemoryResourceStore([
        SkillResource(skill_name="JavaScript", docs_link="https://developer.mozilla.org/en-US/docs/Web/JavaScript"),
        SkillResource(skill_name="Node.js", docs_link="https://nodejs.org/en/docs"),
    ])


@pytest.fixture
def api(catalog, resources):
    """api(llm=None, roles=None, profiles=None) -> TestClient wired to in-memory stores."""
    from app.main import app

    def _make(llm: Optional[LLMClient] = None, roles: Optional[RoleStore] = None,
              profiles: Optional[ProfileStore] = None) -> TestClient:
        app.state.stores = Stores(
            profiles if profiles is not None else MemoryProfileStore(),
            roles if roles is not None else MemoryRoleStore(catalog),
            resources,
        )
        app.state.llm = llm if llm is not None else LLMClient(None)
        return TestClient(app)

    yield _make
    app.state.stores = None
    app.state.llm = None
