import pytest
import requests

from app.config import Settings
from app.llm_client import LLMClient, LLMTimeout, LLMUnavailable, build_llm_client, build_provider
from app.providers import GeminiProvider, OllamaProvider, OpenAIProvider
from app.providers.base import request_timeout


class FakeResponse:
    def __init__(self, payload, status=200):
        self.payload = payload
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        return self.payload


@pytest.fixture
def post(monkeypatch):
    """post(response_or_exc) -> list that records (url, kwargs) of each requests.post call."""
    def _install(result):
        calls = []

        def fake_post(url, **kwargs):
            calls.append((url, kwargs))
            if isinstance(result, Exception):
                raise result
            return result

        monkeypatch.setattr(requests, "post", fake_post)
        return calls
    return _install


def test_gemini_request_and_parse(post):
    calls = post(FakeResponse({"candidates": [{"content": {"parts": [{"text": '["a"]'}]},
                                              "finishReason": "STOP"}]}))
    client = LLMClient(GeminiProvider("k", "https://gl.example/v1beta"), "gemini-1.5-flash", timeout_s=7)

    assert client.generate_text("rank", system="be terse", temperature=0.2) == '["a"]'
    url, kw = calls[0]
    assert url == "https://gl.example/v1beta/models/gemini-1.5-flash:generateContent"
    assert kw["headers"] == {"x-goog-api-key": "k"}
    assert kw["timeout"] == (1.75, 5.25)
    assert kw["json"]["systemInstruction"] == {"parts": [{"text": "be terse"}]}
    assert kw["json"]["generationConfig"] == {"temperature": 0.2}


def test_openai_request_and_parse(post):
    calls = post(FakeResponse({"choices": [{"message": {"content": "hi"}, "finish_reason": "stop"}]}))
    client = LLMClient(OpenAIProvider("sk", "https://oa.example/v1/"), "gpt-4o-mini")

    assert client.generate_text("hello", system="sys") == "hi"
    url, kw = calls[0]
    assert url == "https://oa.example/v1/chat/completions"
    assert kw["json"]["messages"][0] == {"role": "system", "content": "sys"}
    assert kw["headers"]["Authorization"] == "Bearer sk"


def test_ollama_request_and_parse(post):
    calls = post(FakeResponse({"response": "ok", "done_reason": "stop"}))
    client = LLMClient(OllamaProvider("http://ollama:11434"), "llama3.2")

    assert client.generate_text("q") == "ok"
    assert calls[0][0] == "http://ollama:11434/api/generate"
    assert calls[0][1]["json"]["stream"] is False


def test_timeout_maps_to_llm_timeout(post):
    post(requests.Timeout("read timed out"))
    with pytest.raises(LLMTimeout):
        LLMClient(OllamaProvider(), "m").generate_text("q")


def test_non_2xx_maps_to_unavailable(post):
    post(FakeResponse({}, status=503))
    with pytest.raises(LLMUnavailable):
        LLMClient(OpenAIProvider("sk"), "m").generate_text("q")


def test_unexpected_payload_maps_to_unavailable(post):
    post(FakeResponse({"candidates": []}))
    with pytest.raises(LLMUnavailable):
        LLMClient(GeminiProvider("k"), "m").generate_text("q")


@pytest.mark.parametrize("payload", [["not", "an", "object"], "text", None])
def test_non_object_json_body_maps_to_unavailable(post, payload):
    post(FakeResponse(payload))
    with pytest.raises(LLMUnavailable):
        LLMClient(OllamaProvider(), "m").generate_text("q")


@pytest.mark.parametrize("total", [1.0, 7, 20.0, 60.0])
def test_request_timeout_stays_within_budget(total):
    connect, read = request_timeout(total)
    assert 0 < connect <= 3.05
    assert connect + read == pytest.approx(total)


def test_disabled_client():
    client = LLMClient(None, "m")
    assert not client.enabled
    with pytest.raises(LLMUnavailable):
        client.generate_text("q")


@pytest.mark.parametrize("kwargs,expected", [
    ({"LLM_PROVIDER": "gemini", "GEMINI_API_KEY": "k"}, GeminiProvider),
    ({"LLM_PROVIDER": "openai", "OPENAI_API_KEY": "sk"}, OpenAIProvider),
    ({"LLM_PROVIDER": "ollama"}, OllamaProvider),
    ({"LLM_PROVIDER": "gemini", "GEMINI_API_KEY": ""}, type(None)),
    ({"LLM_PROVIDER": ""}, type(None)),
])
def test_build_provider(kwargs, expected):
    assert isinstance(build_provider(Settings(**kwargs)), expected)


def test_build_llm_client_uses_timeout_and_model():
    client = build_llm_client(Settings(LLM_PROVIDER="ollama", LLM_MODEL="llama3.2", LLM_TIMEOUT_S=3))
    assert client.enabled
    assert client.model == "llama3.2"
    assert client.timeout_s == 3
