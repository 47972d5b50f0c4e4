import logging
import time
from typing import Optional

import requests

from .config import Settings
from .observability.langfuse import end_safe, generation, update_safe
from .providers import BaseProvider, GeminiProvider, OllamaProvider, OpenAIProvider

logger = logging.getLogger("recommend.llm_client")


class LLMError(RuntimeError):
    """The generative-AI call did not produce text."""


class LLMTimeout(LLMError):
    pass


class LLMUnavailable(LLMError):
    pass


class LLMClient:
    def __init__(self, provider: Optional[BaseProvider], model: str = "", timeout_s: float = 20.0):
        self.provider = provider
        self.model = model
        self.timeout_s = timeout_s

    @property
    def enabled(self) -> bool:
        return self.provider is not None and bool(self.model)

    def generate_text(self, prompt: str, system: Optional[str] = None, *,
                      json_mode: bool = False, temperature: Optional[float] = None,
                      max_tokens: Optional[int] = None, name: str = "llm.generate_text") -> str:
        if not self.enabled:
            raise LLMUnavailable("LLM disabled (no provider/model configured)")

        gen = generation(name=name, model=self.model, prompt=prompt, system=system or "",
                         provider=self.provider.name)
        t0 = time.monotonic()
        try:
            text, finish = self.provider.generate(
                model=self.model,
                prompt=prompt,
                system=system,
                json_mode=json_mode,
                max_tokens=max_tokens,
                temperature=temperature,
                timeout_s=self.timeout_s,
            )
        except requests.Timeout as e:
            update_safe(gen, level="ERROR", status_message="timeout")
            raise LLMTimeout(f"{self.provider.name} timed out after {self.timeout_s}s") from e
        except requests.RequestException as e:
            update_safe(gen, level="ERROR", status_message=str(e))
            raise LLMUnavailable(f"{self.provider.name} request failed: {e}") from e
        except (KeyError, IndexError, TypeError, ValueError, AttributeError) as e:
            # 2xx with an unexpected body
            update_safe(gen, level="ERROR", status_message="bad payload")
            raise LLMUnavailable(f"{self.provider.name} returned an unexpected payload") from e
        else:
            update_safe(gen, output=text)
        finally:
            end_safe(gen)

        logger.info(
            "LLM call: response",
            extra={
                "llm_provider": self.provider.name,
                "llm_model": self.model,
                "latency_ms": int((time.monotonic() - t0) * 1000),
                "finish_reason": finish,
                "chars": len(text or ""),
            },
        )
        return text or ""


def build_provider(settings: Settings) -> Optional[BaseProvider]:
    kind = (settings.LLM_PROVIDER or "").strip().lower()
    if kind == "gemini" and settings.GEMINI_API_KEY:
        return GeminiProvider(settings.GEMINI_API_KEY, settings.GEMINI_BASE_URL)
    if kind == "openai" and settings.OPENAI_API_KEY:
        return OpenAIProvider(settings.OPENAI_API_KEY, settings.OPENAI_BASE_URL)
    if kind == "ollama":
        return OllamaProvider(settings.OLLAMA_ENDPOINT)
    return None


def build_llm_client(settings: Settings) -> LLMClient:
    provider = build_provider(settings)
    if provider is None:
        logger.warning("No LLM provider configured; AI ranking and chat are disabled",
                       extra={"llm_provider": settings.LLM_PROVIDER})
    return LLMClient(provider, settings.LLM_MODEL, settings.LLM_TIMEOUT_S)
