from __future__ import annotations

import logging
from typing import List, Tuple

from .errors import ComponentTreeError
from .model import Diagnostic

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
	"error": logging.ERROR,
	"warning": logging.WARNING,
	"info": logging.INFO,
}


class Diagnostics:
	"""Collects problems found during a build instead of printing them."""

	def __init__(self) -> None:
		self._items: List[Diagnostic] = []

	def report(self, error: ComponentTreeError, scope: str) -> Diagnostic:
		diagnostic = Diagnostic(
			severity=error.severity,
			scope=scope,
			message=str(error),
			code=type(error).__name__,
		)
		self._items.append(diagnostic)
		logger.log(_LOG_LEVELS[diagnostic.severity], "%s: %s", scope, diagnostic.message)
		return diagnostic

	@property
	def items(self) -> Tuple[Diagnostic, ...]:
		return tuple(self._items)

	def __iter__(self):
		return iter(self._items)
