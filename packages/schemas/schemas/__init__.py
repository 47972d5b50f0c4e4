from importlib.resources import files
import json

from .models import (
    AssessmentIn, ChatReply, ChatRequest, ChatTurn, Profile, Role, ScoredRole, SkillResource,
)

__all__ = [
    "AssessmentIn", "ChatReply", "ChatRequest", "ChatTurn", "Profile", "Role", "ScoredRole",
    "SkillResource", "load_seed",
]


def load_seed(name: str = "catalog") -> dict:
    """
    Load a bundled seed file by name (without extension) from this package folder.
    Example: load_seed("catalog") -> {"roles": [...], "skill_resources": [...]}
    """
    p = files(__package__) / f"{name}.seed.json"
    return json.loads(p.read_text(encoding="utf-8"))
