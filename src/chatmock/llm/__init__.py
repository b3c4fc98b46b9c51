"""Routing and protocol translation for upstream chat providers."""

from chatmock.llm.base import BaseTranslator
from chatmock.llm.router import ModelRouter, RouteMatch

__all__ = ["BaseTranslator", "ModelRouter", "RouteMatch"]
