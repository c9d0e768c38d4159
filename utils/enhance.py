import re

ENHANCE_PREFIX = "Results-driven professional with a strong focus on impact."
SHORT_TEXT_LIMIT = 80

# First to last double quote, newlines included
_QUOTED = re.compile(r'"(.*)"', re.DOTALL)
_WHITESPACE = re.compile(r"\s+")


def enhance_text(prompt) -> str:
    """Deterministic placeholder for the AI enhancement endpoints.

    Prompts usually look like ``enhance my summary: "..."``, so the quoted part
    is used when present. Short results get a stock opening sentence.
    """
    prompt = "" if prompt is None else str(prompt)
    match = _QUOTED.search(prompt)
    base = (match.group(1) if match else prompt).strip()
    if not base:
        return ""

    cleaned = _WHITESPACE.sub(" ", base).strip()
    if len(cleaned) < SHORT_TEXT_LIMIT:
        return f"{ENHANCE_PREFIX} {cleaned}"
    return cleaned
