# packages/schemas/schemas/models.py
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional, Literal
from datetime import datetime, timezone

# ----- Common -----
LocationPreference = Literal["Work from Home", "In-office", "Hybrid"]
DurationPreference = Literal["1 Month", "2 Months", "3 Months", "6 Months"]
StipendExpectation = Literal["Any", "Paid", "10k+", "20k+"]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def unique_strings(values: Optional[List[str]]) -> List[str]:
    """Trim, drop blanks and de-duplicate case-insensitively (first spelling wins)."""
    if isinstance(values, str):
        values = [values]
    seen = set()
    out: List[str] = []
    for v in values or []:
        if not isinstance(v, str):
            continue
        s = v.strip()
        if not s or s.lower() in seen:
            continue
        seen.add(s.lower())
        out.append(s)
    return out


# =========================
#  Assessment / Profile
# =========================
class AssessmentIn(BaseModel):
    """Assessment form as submitted by the student."""
    skills: List[str] = []
    interests: List[str] = []                         # e.g. AI, Web Development, Marketing
    qualification: Optional[str] = None               # e.g. B.Tech, MBA
    field_of_study: Optional[str] = None              # e.g. Computer Science
    preferred_sectors: List[str] = []                 # e.g. IT, Healthcare, Finance
    location_preference: LocationPreference = "Hybrid"
    state_preference: List[str] = []
    city_preference: List[str] = []
    duration_preference: DurationPreference = "3 Months"
    stipend_expectation: StipendExpectation = "Any"

    @field_validator(
        "skills", "interests", "preferred_sectors", "state_preference", "city_preference",
        mode="before",
    )
    @classmethod
    def _dedupe(cls, v):
        return unique_strings(v)


class Profile(AssessmentIn):
    """Stored assessment; one per user, overwritten wholesale on submission."""
    user_id: str
    updated_at: Optional[datetime] = None


# =========================
#  Role catalog
# =========================
class Role(BaseModel):
    role_id: str
    title: str
    company: str
    location: Optional[str] = None
    stipend: Optional[str] = None
    duration: Optional[str] = None
    description: Optional[str] = None
    skills_required: List[str] = []
    apply_link: Optional[str] = None
    date_posted: datetime = Field(default_factory=_utcnow)


class ScoredRole(Role):
    """Transient projection of a Role for one recommendation response."""
    score: float = 0.0
    missing_skills: List[str] = []


# =========================
#  Learning resources
# =========================
class SkillResource(BaseModel):
    skill_name: str
    youtube_link: Optional[str] = None
    docs_link: Optional[str] = None
    practice_link: Optional[str] = None

    @field_validator("skill_name")
    @classmethod
    def _strip(cls, v: str) -> str:
        return v.strip()


# =========================
#  Chat
# =========================
class ChatTurn(BaseModel):
    role: Literal["user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    prompt: str = Field(min_length=1)
    history: List[ChatTurn] = []


class ChatReply(BaseModel):
    reply: str
