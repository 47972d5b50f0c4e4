# services/recommend/app/storage/mongo_store.py
import logging
import re
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from pymongo import ASCENDING, DESCENDING, TEXT, MongoClient, UpdateOne
from pymongo.database import Database
from pymongo.errors import PyMongoError

from schemas.models import Profile, Role, SkillResource
from .base import ProfileStore, ResourceStore, RoleStore, StorageError

logger = logging.getLogger("recommend.storage")


@contextmanager
def _guard(op: str):
    try:
        yield
    except PyMongoError as e:
        logger.error("Mongo operation failed", extra={"op": op, "error": str(e)})
        raise StorageError(f"{op} failed: {e}") from e


def mongo(uri: str, dbname: str) -> Database:
    cli = MongoClient(uri)
    db = cli.get_database(dbname)

    # indexes (idempotent)
    with _guard("create_indexes"):
        db.profiles.create_index([("user_id", ASCENDING)], unique=True)
        db.roles.create_index([("role_id", ASCENDING)], unique=True)
        db.roles.create_index([("date_posted", DESCENDING)])
        db.roles.create_index(
            [("title", TEXT), ("description", TEXT), ("skills_required", TEXT), ("company", TEXT)],
            name="roles_text",
        )
        db.skill_resources.create_index([("skill_name", ASCENDING)], unique=True)
    return db


class MongoProfileStore(ProfileStore):
    def __init__(self, db: Database):
        self.col = db.profiles

    def get_profile(self, user_id: str) -> Optional[Profile]:
        with _guard("get_profile"):
            doc = self.col.find_one({"user_id": user_id}, projection={"_id": False})
        return Profile(**doc) if doc else None

    def save_profile(self, profile: Profile) -> Profile:
        doc = profile.model_copy(update={"updated_at": datetime.now(timezone.utc)})
        with _guard("save_profile"):
            # one assessment per user; upsert replaces it wholesale
            self.col.replace_one({"user_id": profile.user_id}, doc.model_dump(), upsert=True)
        return doc


class MongoRoleStore(RoleStore):
    def __init__(self, db: Database):
        self.col = db.roles

    def sample_roles(self, n: int) -> List[Role]:
        with _guard("sample_roles"):
            docs = list(self.col.aggregate([{"$sample": {"size": n}}, {"$project": {"_id": False}}]))
        return [Role(**d) for d in docs]

    def list_all_roles(self, limit: int = 0) -> List[Role]:
        with _guard("list_all_roles"):
            cursor = self.col.find({}, projection={"_id": False}).sort("_id", ASCENDING).limit(limit)
            docs = list(cursor)
        return [Role(**d) for d in docs]

    def list_recent_roles(self, limit: int) -> List[Role]:
        with _guard("list_recent_roles"):
            cursor = self.col.find({}, projection={"_id": False}).sort("date_posted", DESCENDING).limit(limit)
            docs = list(cursor)
        return [Role(**d) for d in docs]

    def find_roles_by_ids(self, ids: List[str]) -> List[Role]:
        if not ids:
            return []
        with _guard("find_roles_by_ids"):
            docs = list(self.col.find({"role_id": {"$in": list(ids)}}, projection={"_id": False}))
        return [Role(**d) for d in docs]

    def get_role(self, role_id: str) -> Optional[Role]:
        with _guard("get_role"):
            doc = self.col.find_one({"role_id": role_id}, projection={"_id": False})
        return Role(**doc) if doc else None

    def search_roles(self, query: str, limit: int) -> List[Role]:
        with _guard("search_roles"):
            cursor = (
                self.col
                .find({"$text": {"$search": query}},
                      projection={"_id": False, "score": {"$meta": "textScore"}})
                .sort([("score", {"$meta": "textScore"})])
                .limit(limit)
            )
            docs = list(cursor)
        return [Role(**d) for d in docs]

    def upsert_roles(self, roles: Iterable[Role]) -> int:
        ops = [
            UpdateOne({"role_id": r.role_id}, {"$set": r.model_dump()}, upsert=True)
            for r in roles
        ]
        if not ops:
            return 0
        with _guard("upsert_roles"):
            self.col.bulk_write(ops)
        return len(ops)


class MongoResourceStore(ResourceStore):
    def __init__(self, db: Database):
        self.col = db.skill_resources

    def find_resource(self, skill_name: str) -> Optional[SkillResource]:
        pattern = f"^{re.escape(skill_name.strip())}$"
        with _guard("find_resource"):
            doc = self.col.find_one(
                {"skill_name": {"$regex": pattern, "$options": "i"}},
                projection={"_id": False},
            )
        return SkillResource(**doc) if doc else None

    def upsert_resources(self, resources: Iterable[SkillResource]) -> int:
        ops = [
            UpdateOne({"skill_name": r.skill_name}, {"$set": r.model_dump()}, upsert=True)
            for r in resources
        ]
        if not ops:
            return 0
        with _guard("upsert_resources"):
            self.col.bulk_write(ops)
        return len(ops)


@dataclass
class MongoStores:
    db: Database
    profiles: MongoProfileStore
    roles: MongoRoleStore
    resources: MongoResourceStore

    def reset_catalog(self) -> None:
        with _guard("reset_catalog"):
            self.db.roles.delete_many({})
            self.db.skill_resources.delete_many({})


def connect_stores(uri: str, dbname: str) -> MongoStores:
    db = mongo(uri, dbname)
    return MongoStores(
        db=db,
        profiles=MongoProfileStore(db),
        roles=MongoRoleStore(db),
        resources=MongoResourceStore(db),
    )
