import json
import re
from typing import List, Optional

_FENCE = re.compile(r"^```[a-zA-Z]*\s*|\s*```$")


def strip_code_fences(raw: str) -> str:
    """Remove a markdown code fence (```json ... ```) wrapped around a model answer."""
    out = (raw or "").strip()
    if out.startswith("```"):
        out = _FENCE.sub("", out).strip()
    return out


def parse_string_array(raw: str) -> Optional[List[str]]:
    """Strict JSON parse into a list of strings; None if the text is anything else."""
    try:
        data = json.loads(strip_code_fences(raw))
    except (ValueError, RecursionError):
        # RecursionError: pathologically nested input
        return None
    if not isinstance(data, list):
        return None
    if not all(isinstance(x, str) for x in data):
        return None
    return data
