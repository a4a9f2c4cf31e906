"""Template evaluation."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from grizzly.core.errors import EvaluationError

logger = logging.getLogger(__name__)


class Evaluator(Protocol):
    def evaluate(self, filename: str, snippet: str) -> str:
        """Evaluate ``snippet`` as if it lived at ``filename``; return JSON text."""
        ...


class JsonnetEvaluator:
    """Evaluates Jsonnet through the ``jsonnet`` Python binding.

    Library paths are resolved relative to the directory of the evaluated
    file, so ``vendor`` and ``lib`` next to the template are importable.
    """

    def __init__(self, jsonnet_paths: list[str] | None = None):
        self.jsonnet_paths = jsonnet_paths or ["vendor", "lib", "."]

    def _jpathdir(self, filename: str) -> list[str]:
        base = Path(filename).resolve().parent
        return [str(base / p) for p in self.jsonnet_paths]

    def evaluate(self, filename: str, snippet: str) -> str:
        import _jsonnet

        jpathdir = self._jpathdir(filename)
        logger.debug("Evaluating %s (jpath: %s)", filename, ", ".join(jpathdir))
        try:
            return _jsonnet.evaluate_snippet(filename, snippet, jpathdir=jpathdir)
        except RuntimeError as e:
            raise EvaluationError(f"Failed to evaluate {filename}: {e}") from e
