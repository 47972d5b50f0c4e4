from typing import Tuple
import requests
from .base import BaseProvider, request_timeout

class OllamaProvider(BaseProvider):
    name = "ollama"

    def __init__(self, endpoint: str = "http://ollama:11434"):
        self.endpoint = endpoint.rstrip("/")

    def _options(self, max_tokens, temperature):
        opts = {}
        if temperature is not None: opts["temperature"] = temperature
        if max_tokens is not None: opts["num_predict"] = max_tokens
        return opts

    def generate(self, *, model, prompt, system, json_mode, max_tokens,
                 temperature, timeout_s) -> Tuple[str, str]:
        url = f"{self.endpoint}/api/generate"
        prompt_text = prompt if not system else f"System:\n{system}\n\nUser:\n{prompt}"
        payload = {
            "model": model,
            "prompt": prompt_text,
            "stream": False,
            "options": self._options(max_tokens, temperature)
        }
        if json_mode:
            # basic JSON guard
            payload["format"] = "json"

        r = requests.post(url, json=payload, timeout=request_timeout(timeout_s))
        r.raise_for_status()
        data = r.json()
        return data.get("response",""), data.get("done_reason","stop")
