import logging

from fastapi import APIRouter, Depends, HTTPException

from schemas.models import ChatReply, ChatRequest
from ..deps import current_user_id, get_llm_client
from ..llm_client import LLMClient, LLMError

router = APIRouter(tags=["chatbot"])
logger = logging.getLogger("recommend.chatbot")

SYSTEM_INSTRUCTION = (
    "You are Arise, a friendly and expert AI career assistant for students in India. "
    "Give clear, encouraging, and actionable advice on career development, job searching, "
    "resume building, and interview skills. Always answer in Markdown, using headings, "
    "bold text, and lists where appropriate. Never use HTML tags."
)

MAX_HISTORY_TURNS = 20


def build_chat_prompt(req: ChatRequest) -> str:
    lines = []
    for turn in req.history[-MAX_HISTORY_TURNS:]:
        speaker = "USER" if turn.role == "user" else "ASSISTANT"
        lines.append(f"{speaker}: {turn.content}")
    lines.append(f"USER QUESTION: {req.prompt}")
    return "\n\n".join(lines)


@router.post("/chatbot", response_model=ChatReply)
def chatbot(
    req: ChatRequest,
    user_id: str = Depends(current_user_id),
    llm: LLMClient = Depends(get_llm_client),
):
    """Stateless passthrough; the client sends the conversation so far."""
    try:
        text = llm.generate_text(build_chat_prompt(req), system=SYSTEM_INSTRUCTION,
                                 name="recommend.chatbot")
    except LLMError as e:
        logger.warning("chatbot LLM call failed", extra={"user_id": user_id, "error": str(e)})
        raise HTTPException(status_code=502, detail="Career assistant is unavailable right now.")
    return ChatReply(reply=text)
