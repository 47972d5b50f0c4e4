from urllib.parse import quote
import requests
from ui_lib.config import ARISE_BASE_URL, ARISE_USER_ID, HTTP_TIMEOUT_S

def _headers(user_id: str | None) -> dict:
    return {"X-User-Id": user_id or ARISE_USER_ID}

def get_assessment(user_id: str | None = None) -> dict | None:
    r = requests.get(f"{ARISE_BASE_URL}/assessment", headers=_headers(user_id),
                     timeout=HTTP_TIMEOUT_S)
    if r.status_code == 404:
        return None
    r.raise_for_status()
    return r.json()

def submit_assessment(assessment: dict, user_id: str | None = None) -> dict:
    r = requests.post(f"{ARISE_BASE_URL}/assessment", json=assessment,
                      headers=_headers(user_id), timeout=HTTP_TIMEOUT_S)
    r.raise_for_status()
    return r.json()

def recommendations(user_id: str | None = None) -> list[dict]:
    r = requests.get(f"{ARISE_BASE_URL}/recommendations", headers=_headers(user_id),
                     timeout=HTTP_TIMEOUT_S)
    r.raise_for_status()
    return r.json()

def skill_resource(skill_name: str) -> dict | None:
    r = requests.get(f"{ARISE_BASE_URL}/resources/{quote(skill_name, safe='')}",
                     timeout=HTTP_TIMEOUT_S)
    if r.status_code == 404:
        return None
    r.raise_for_status()
    return r.json()

def chat(prompt: str, history: list[tuple[str, str]], user_id: str | None = None) -> str:
    payload = {"prompt": prompt,
               "history": [{"role": role, "content": content} for role, content in history]}
    r = requests.post(f"{ARISE_BASE_URL}/chatbot", json=payload, headers=_headers(user_id),
                      timeout=HTTP_TIMEOUT_S)
    r.raise_for_status()
    return r.json().get("reply", "")
