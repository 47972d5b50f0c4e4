from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from schemas.models import Profile, Role, SkillResource


class StorageError(RuntimeError):
    """A profile/catalog/resource store could not be reached or queried."""


class ProfileStore(ABC):
    @abstractmethod
    def get_profile(self, user_id: str) -> Optional[Profile]:
        """Return the stored assessment for a user, or None."""

    @abstractmethod
    def save_profile(self, profile: Profile) -> Profile:
        """Create or overwrite the user's assessment wholesale."""


class RoleStore(ABC):
    @abstractmethod
    def sample_roles(self, n: int) -> List[Role]:
        """Uniform random sample of up to n roles."""

    @abstractmethod
    def list_all_roles(self, limit: int = 0) -> List[Role]:
        """Catalog order; limit=0 returns everything."""

    @abstractmethod
    def list_recent_roles(self, limit: int) -> List[Role]:
        """Newest first by date_posted."""

    @abstractmethod
    def find_roles_by_ids(self, ids: List[str]) -> List[Role]:
        """Roles whose role_id is in ids, in no particular order."""

    @abstractmethod
    def get_role(self, role_id: str) -> Optional[Role]: ...

    @abstractmethod
    def search_roles(self, query: str, limit: int) -> List[Role]: ...

    @abstractmethod
    def upsert_roles(self, roles: Iterable[Role]) -> int: ...


class ResourceStore(ABC):
    @abstractmethod
    def find_resource(self, skill_name: str) -> Optional[SkillResource]:
        """Case-insensitive exact match on skill_name."""

    @abstractmethod
    def upsert_resources(self, resources: Iterable[SkillResource]) -> int: ...
