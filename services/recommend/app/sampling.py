import random
from abc import ABC, abstractmethod
from typing import List, Optional

from schemas.models import Role
from .storage.base import RoleStore


class CatalogSampler(ABC):
    """Picks the subset of the catalog the AI ranker gets to see."""

    @abstractmethod
    def sample(self, roles: RoleStore, n: int) -> List[Role]: ...


class StoreSampler(CatalogSampler):
    """Server-side uniform sample ($sample in Mongo)."""

    def sample(self, roles: RoleStore, n: int) -> List[Role]:
        return roles.sample_roles(n)


class SeededSampler(CatalogSampler):
    """Reproducible sample over the full catalog."""

    def __init__(self, seed: int):
        self.seed = seed

    def sample(self, roles: RoleStore, n: int) -> List[Role]:
        catalog = roles.list_all_roles(0)
        # fresh RNG per call: same seed + same catalog -> same sample
        rng = random.Random(self.seed)
        return rng.sample(catalog, min(n, len(catalog)))


def build_sampler(seed: Optional[int]) -> CatalogSampler:
    return SeededSampler(seed) if seed is not None else StoreSampler()
