def split_csv(text: str | None) -> list[str]:
    """'Python, SQL ,, Excel' -> ['Python', 'SQL', 'Excel']"""
    return [p.strip() for p in (text or "").split(",") if p.strip()]

def join_csv(values: list[str] | None) -> str:
    return ", ".join(values or [])

def score_label(score: float | None) -> str:
    if score is None:
        return "Recently posted"
    return f"{round(score * 100)}% skill match"
