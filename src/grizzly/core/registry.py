"""Provider registry: maps template paths to providers."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from grizzly.core.errors import ProviderNotFoundError
from grizzly.core.provider import Provider

logger = logging.getLogger(__name__)

_PLACEHOLDER_SCRIPT = """
local src = import {template};
src + {{
{fields}
}}
"""


class ProviderRegistry:
    """Registered providers, keyed by the JSON path each one consumes."""

    def __init__(self, providers: list[Provider] | None = None):
        self._providers: dict[str, Provider] = {}
        for provider in providers or []:
            self.register(provider)

    def register(self, provider: Provider) -> None:
        """Register a provider.

        Raises:
            ValueError: If the provider's path is claimed by another provider.
        """
        path = provider.json_path
        if not path:
            raise ValueError(f"Provider {provider!r} does not declare a JSON path")
        existing = self._providers.get(path)
        if existing is not None and existing is not provider:
            raise ValueError(
                f"Path '{path}' is already claimed by provider '{existing.name}'. "
                f"Cannot register '{provider.name}'."
            )
        self._providers[path] = provider
        logger.debug("Registered provider %s (path: %s)", provider.name, path)

    def get_provider(self, path: str) -> Provider:
        provider = self._providers.get(path)
        if provider is None:
            available = ", ".join(self._providers) or "none"
            raise ProviderNotFoundError(
                f"No provider registered for path '{path}'. Available paths: {available}"
            )
        return provider

    def get_provider_by_kind(self, kind: str) -> Provider:
        """Look up a provider by kind (case-insensitive) or by JSON path."""
        if kind in self._providers:
            return self._providers[kind]
        for provider in self._providers.values():
            if provider.kind.lower() == kind.lower():
                return provider
        available = ", ".join(p.kind for p in self._providers.values()) or "none"
        raise ProviderNotFoundError(f"Unknown resource kind '{kind}'. Available kinds: {available}")

    def provider_list(self) -> list[Provider]:
        return list(self._providers.values())

    def has_provider(self, path: str) -> bool:
        return path in self._providers

    def placeholder_script(self, template_file: str | Path) -> str:
        """Wrap the template so every provider's branch exists and is visible.

        Each registered path gets an empty object merged in with ``+:::``, so
        templates that define no resources of a kind still produce that
        branch, and hidden (``::``) branches are forced into the output.
        """
        fields = "\n".join(
            f"  {json.dumps(p.json_path)}+::: {{}}," for p in self.provider_list()
        )
        template = json.dumps(Path(template_file).name)
        return _PLACEHOLDER_SCRIPT.format(template=template, fields=fields)
