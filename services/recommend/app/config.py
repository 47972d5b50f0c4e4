from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    APP_NAME: str = "Recommendation Service"
    HOST: str = "0.0.0.0"
    PORT: int = 8006
    LOG_LEVEL: str = "info"
    ALLOWED_ORIGINS: str = "http://localhost:8501"

    # Mongo
    MONGO_URI: str = "mongodb://mongo:27017"
    MONGO_DB: str = "arise"

    # LLM ("gemini" | "openai" | "ollama"); empty disables the AI ranker
    LLM_PROVIDER: str = "gemini"
    LLM_MODEL: str = "gemini-1.5-flash"
    # split into (connect, read) for requests; the read part bounds each socket read,
    # so a server trickling bytes can still stretch a call past this
    LLM_TIMEOUT_S: float = 20.0
    GEMINI_API_KEY: str = ""
    GEMINI_BASE_URL: str = "https://generativelanguage.googleapis.com/v1beta"
    OPENAI_API_KEY: str = ""
    OPENAI_BASE_URL: str = "https://api.openai.com/v1"
    OLLAMA_ENDPOINT: str = "http://ollama:11434"

    # Recommendation knobs
    AI_SAMPLE_SIZE: int = 50
    AI_TOP_K: int = 5
    MAX_RECOMMENDATIONS: int = 10
    FALLBACK_CATALOG_LIMIT: int = 0     # 0 = whole catalog; >0 caps roles scored by the fallback
    SAMPLE_SEED: Optional[int] = None   # set for reproducible AI context sampling

    model_config = SettingsConfigDict(env_prefix="RECO_", env_file=".env", extra="ignore")

    @property
    def allowed_origins_list(self) -> List[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]

settings = Settings()
