from typing import Tuple
import requests
from .base import BaseProvider, request_timeout

class OpenAIProvider(BaseProvider):
    name = "openai"

    def __init__(self, api_key: str, base_url: str = "https://api.openai.com/v1"):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")

    def _headers(self):
        return {"Authorization": f"Bearer {self.api_key}"}

    def generate(self, *, model, prompt, system, json_mode, max_tokens,
                 temperature, timeout_s) -> Tuple[str, str]:
        url = f"{self.base_url}/chat/completions"
        msgs = []
        if system:
            msgs.append({"role": "system", "content": system})
        msgs.append({"role": "user", "content": prompt})

        payload = {
            "model": model,
            "messages": msgs,
            "stream": False
        }
        if max_tokens is not None: payload["max_tokens"] = max_tokens
        if temperature is not None: payload["temperature"] = temperature

        # JSON mode only accepts objects; array answers rely on the prompt instead
        if json_mode:
            payload["response_format"] = {"type": "json_object"}

        r = requests.post(url, headers=self._headers(), json=payload, timeout=request_timeout(timeout_s))
        r.raise_for_status()
        data = r.json()
        text = data["choices"][0]["message"]["content"]
        finish = data["choices"][0].get("finish_reason", "stop")
        return text, finish
