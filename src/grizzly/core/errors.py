"""Error taxonomy shared by the pipeline and providers."""

from __future__ import annotations


class GrizzlyError(Exception):
    """Base class for all errors raised by grizzly."""


class NotFoundError(GrizzlyError):
    """The remote resource does not exist."""


class PreviewNotSupportedError(GrizzlyError):
    """The provider has no non-destructive preview mutation."""


class ProviderNotFoundError(GrizzlyError):
    """No provider is registered for the requested path or kind."""


class EvaluationError(GrizzlyError):
    """The template could not be evaluated."""


class DecodeError(GrizzlyError):
    """The evaluated template was not a JSON object."""


class ParseError(GrizzlyError):
    """A provider could not turn its branch into resources."""


class ProviderError(GrizzlyError):
    """A provider call (fetch, add, update, preview) failed."""

    def __init__(self, message: str, kind: str | None = None, uid: str | None = None):
        self.kind = kind
        self.uid = uid
        if kind and uid:
            message = f"{kind}/{uid}: {message}"
        super().__init__(message)
