from __future__ import annotations
import os, logging
from typing import Any, Optional
from langfuse import Langfuse

logger = logging.getLogger("recommend.observability")

# cached client
_LF: Optional[Langfuse] = None

def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name)
    return v if (v is not None and v != "") else default

def enabled() -> bool:
    return bool(_env("LANGFUSE_PUBLIC_KEY") and _env("LANGFUSE_SECRET_KEY"))

def lf() -> Langfuse:
    """Get a singleton Langfuse client (env-only; no settings dependency)."""
    global _LF
    if _LF is None:
        _LF = Langfuse(
            public_key=_env("LANGFUSE_PUBLIC_KEY"),
            secret_key=_env("LANGFUSE_SECRET_KEY"),
            host=_env("LANGFUSE_HOST", "https://cloud.langfuse.com"),
            enabled=enabled(),
        )
    return _LF

def generation(
    name: str,
    model: str,
    prompt: str,
    system: str = "",
    **meta,
) -> Any:
    """Open a Langfuse generation; returns None when tracing is off or unreachable."""
    if not enabled():
        return None
    try:
        return lf().generation(
            name=name,
            model=model or "unknown",
            input={"system": system, "prompt": prompt},
            metadata=meta or {},
        )
    except Exception as e:
        logger.warning("langfuse generation failed", extra={"error": str(e)})
        return None

def update_safe(obj: Any, **kw):
    if obj is None:
        return
    try:
        obj.update(**kw)
    except Exception as e:
        logger.debug("langfuse update failed", extra={"error": str(e)})

def end_safe(obj: Any):
    if obj is None:
        return
    try:
        obj.end()
    except Exception as e:
        logger.debug("langfuse end failed", extra={"error": str(e)})
