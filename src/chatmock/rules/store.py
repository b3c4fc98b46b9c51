"""Rule store — canned replies for the mock responder."""

from __future__ import annotations

import threading
from collections.abc import Iterable

from pydantic import BaseModel


class Rule(BaseModel):
    """Reply with *reply* when the message contains *contains* (any case)."""

    contains: str = ""
    reply: str = ""

    model_config = {"frozen": True}


class RuleStore:
    """Ordered list of rules; the first matching rule wins."""

    def __init__(self, seed: Iterable[Rule] | None = None) -> None:
        self._rules: tuple[Rule, ...] = tuple(seed or ())
        self._write_lock = threading.Lock()

    def match(self, content: str) -> str | None:
        """Return the reply of the first rule contained in *content*, if any."""
        lowered = content.lower()
        for rule in self._rules:
            if rule.contains.lower() in lowered:
                return rule.reply
        return None

    def set(self, rules: Iterable[Rule]) -> None:
        snapshot = tuple(rules)
        with self._write_lock:
            self._rules = snapshot

    def all(self) -> list[Rule]:
        return list(self._rules)
