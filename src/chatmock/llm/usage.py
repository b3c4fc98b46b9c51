"""Token usage estimation for mock responses.

Mock replies never touch a tokenizer; usage is derived from text length
with a fixed ~4 bytes/token heuristic so the numbers are deterministic.
"""

from __future__ import annotations

from collections.abc import Iterable

from chatmock.models.schemas import Message, Usage

_BYTES_PER_TOKEN = 4


def estimate_tokens(messages: Iterable[Message]) -> int:
    """Estimate tokens for the combined content of *messages*.

    Lengths are summed across messages (UTF-8 bytes, no separator) and the
    heuristic is applied once to the total: empty → 0, under four bytes →
    1, otherwise ``total // 4``.
    """
    total = sum(len(m.content.encode("utf-8")) for m in messages)
    if total == 0:
        return 0
    if total < _BYTES_PER_TOKEN:
        return 1
    return total // _BYTES_PER_TOKEN


def estimate_usage(prompt: Iterable[Message], reply: str) -> Usage:
    """Build a :class:`Usage` for a prompt/reply pair."""
    prompt_tokens = estimate_tokens(prompt)
    completion_tokens = estimate_tokens([Message(role="assistant", content=reply)])
    return Usage(
        prompt_tokens=prompt_tokens,
        completion_tokens=completion_tokens,
        total_tokens=prompt_tokens + completion_tokens,
    )
