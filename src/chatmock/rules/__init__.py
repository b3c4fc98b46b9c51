"""Substring rules backing the mock responder."""

from chatmock.rules.store import Rule, RuleStore

__all__ = ["Rule", "RuleStore"]
