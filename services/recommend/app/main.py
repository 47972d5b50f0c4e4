import logging, sys

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .llm_client import build_llm_client
from .routers import assessment, chatbot, recommendations, roles
from .storage.mongo_store import connect_stores

def setup_logging():
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        stream=sys.stdout,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

setup_logging()

app = FastAPI(title=settings.APP_NAME)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.on_event("startup")
def _startup():
    # already wired (tests, embedding apps) -> keep
    if getattr(app.state, "stores", None) is None:
        app.state.stores = connect_stores(settings.MONGO_URI, settings.MONGO_DB)
    if getattr(app.state, "llm", None) is None:
        app.state.llm = build_llm_client(settings)

app.include_router(recommendations.router)
app.include_router(assessment.router)
app.include_router(roles.router)
app.include_router(chatbot.router)

@app.get("/healthz")
def healthz():
    return {"ok": True, "service": settings.APP_NAME}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL)
