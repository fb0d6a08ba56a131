"""
Local Reply Generator — the offline "AI" used when the backend is off or down.

Plain keyword matching against a fixed priority list. The first rule whose
keywords appear in the (lower-cased) input wins.
"""

from __future__ import annotations

from typing import List, Tuple

IDEAS_REPLY = (
    "Project ideas:\n"
    "• Volcano\n"
    "• Space / planets\n"
    "• Sharks\n"
    "• Robots\n"
    "• Magnets\n"
    "• Electricity\n"
    "\n"
    "Tell me what you like and I’ll help you plan it."
)

PLAN_REPLY = (
    "Project Plan:\n"
    "1) Pick topic\n"
    "2) Find 3–5 facts\n"
    "3) Write an outline\n"
    "4) Make poster/slides\n"
    "5) Practice 2 times\n"
    "6) Present 😎"
)

CHECKLIST_REPLY = (
    "Checklist:\n"
    "☐ Title\n"
    "☐ 3 facts\n"
    "☐ 2 pictures\n"
    "☐ Conclusion\n"
    "☐ Practice speech\n"
    "\n"
    "Want me to turn your topic into a custom checklist?"
)

WRITING_REPLY = (
    "Paragraph starter:\n"
    "\"My project is about ____. It is important because ____. "
    "One interesting fact is ____. Another cool fact is ____.\""
)

PRACTICE_REPLY = (
    "Practice mode: I’ll ask you 3 questions.\n"
    "1) What is your topic?\n"
    "2) What’s your coolest fact?\n"
    "3) Why should people care?\n"
    "\n"
    "Answer #1 first!"
)

DEFAULT_REPLY = (
    "Tell me your topic (like ‘volcano’ or ‘space’) and what you need: "
    "plan / checklist / writing / practice."
)

# Order matters: first match wins.
REPLY_RULES: List[Tuple[Tuple[str, ...], str]] = [
    (("idea", "topic"), IDEAS_REPLY),
    (("plan", "steps"), PLAN_REPLY),
    (("checklist",), CHECKLIST_REPLY),
    (("write", "paragraph"), WRITING_REPLY),
    (("practice", "questions"), PRACTICE_REPLY),
]


def generate_local_reply(text: str) -> str:
    """Return the canned suggestion for ``text``. Never empty."""
    lower = text.lower()
    for keywords, reply in REPLY_RULES:
        if any(k in lower for k in keywords):
            return reply
    return DEFAULT_REPLY
