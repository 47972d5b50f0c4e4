from typing import Tuple
import requests
from .base import BaseProvider, request_timeout

class GeminiProvider(BaseProvider):
    """Google Generative Language REST API (generateContent)."""
    name = "gemini"

    def __init__(self, api_key: str,
                 base_url: str = "https://generativelanguage.googleapis.com/v1beta"):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")

    def _headers(self):
        return {"x-goog-api-key": self.api_key}

    def generate(self, *, model, prompt, system, json_mode, max_tokens,
                 temperature, timeout_s) -> Tuple[str, str]:
        url = f"{self.base_url}/models/{model}:generateContent"
        payload = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
        }
        if system:
            payload["systemInstruction"] = {"parts": [{"text": system}]}

        gen_cfg = {}
        if max_tokens is not None: gen_cfg["maxOutputTokens"] = max_tokens
        if temperature is not None: gen_cfg["temperature"] = temperature
        if json_mode: gen_cfg["responseMimeType"] = "application/json"
        if gen_cfg:
            payload["generationConfig"] = gen_cfg

        r = requests.post(url, headers=self._headers(), json=payload, timeout=request_timeout(timeout_s))
        r.raise_for_status()
        data = r.json()
        candidate = data["candidates"][0]
        text = "".join(p.get("text", "") for p in candidate["content"]["parts"])
        return text, candidate.get("finishReason", "STOP")
