import json

from app.seed import load_catalog, seed_catalog
from fakes import MemoryResourceStore, MemoryRoleStore


def test_bundled_catalog_seeds_stores():
    roles, resources = MemoryRoleStore(), MemoryResourceStore()
    n_roles, n_res = seed_catalog(load_catalog(), roles, resources)

    assert n_roles == len(roles.data) == 6
    assert n_res == 9
    assert roles.get_role("swe001").skills_required == ["JavaScript", "React", "Node.js", "MongoDB"]
    assert resources.find_resource("rest apis").skill_name == "REST APIs"


def test_seeding_twice_upserts(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({
        "roles": [{"role_id": "x1", "title": "Data Intern", "company": "Acme", "skills_required": ["SQL"]}],
        "skill_resources": [{"skill_name": "SQL", "docs_link": "https://sqlbolt.com"}],
    }), encoding="utf-8")
    roles, resources = MemoryRoleStore(), MemoryResourceStore()

    seed_catalog(load_catalog(str(path)), roles, resources)
    seed_catalog(load_catalog(str(path)), roles, resources)

    assert [r.role_id for r in roles.data] == ["x1"]
    assert list(resources.data) == ["SQL"]
