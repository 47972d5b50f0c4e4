"""Load the sample role catalog and skill resources into Mongo.

    python -m app.seed              # bundled catalog, upsert
    python -m app.seed --reset      # empty roles/resources first
    python -m app.seed --path my_catalog.json
"""
import argparse
import json
import logging
import sys
from typing import Optional, Tuple

from schemas import load_seed
from schemas.models import Role, SkillResource
from .config import settings
from .storage.base import ResourceStore, RoleStore

logger = logging.getLogger("recommend.seed")


def load_catalog(path: Optional[str] = None) -> dict:
    if not path:
        return load_seed("catalog")
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def seed_catalog(data: dict, roles: RoleStore, resources: ResourceStore) -> Tuple[int, int]:
    n_roles = roles.upsert_roles(Role(**r) for r in data.get("roles", []))
    n_res = resources.upsert_resources(SkillResource(**s) for s in data.get("skill_resources", []))
    return n_roles, n_res


def main(argv=None) -> int:
    from .storage.mongo_store import connect_stores

    parser = argparse.ArgumentParser(description="Seed the Arise role catalog")
    parser.add_argument("--path", help="JSON file with 'roles' and 'skill_resources' (default: bundled sample)")
    parser.add_argument("--reset", action="store_true", help="delete existing roles and resources first")
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.LOG_LEVEL.upper(), stream=sys.stdout,
                        format="%(asctime)s %(levelname)s %(name)s %(message)s")

    stores = connect_stores(settings.MONGO_URI, settings.MONGO_DB)
    if args.reset:
        stores.reset_catalog()
    n_roles, n_res = seed_catalog(load_catalog(args.path), stores.roles, stores.resources)
    logger.info("Data seeded", extra={"roles": n_roles, "skill_resources": n_res})
    print(f"Seeded {n_roles} roles and {n_res} skill resources into {settings.MONGO_DB}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
