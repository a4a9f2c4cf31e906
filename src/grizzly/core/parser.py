"""Evaluate a template and extract typed resources through providers."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from grizzly.config.settings import Config
from grizzly.core.errors import DecodeError, GrizzlyError, ParseError, ProviderNotFoundError
from grizzly.models.resource import ResourceList

logger = logging.getLogger(__name__)


def evaluate(config: Config, template_file: str | Path) -> dict:
    """Evaluate the template with every provider branch present."""
    filename = str(template_file)
    script = config.registry.placeholder_script(filename)
    output = config.evaluator.evaluate(filename, script)
    try:
        data = json.loads(output)
    except (TypeError, ValueError) as e:
        raise DecodeError(f"Evaluated {filename} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise DecodeError(f"Evaluated {filename} is not an object (got {type(data).__name__})")
    return data


def parse(config: Config, template_file: str | Path) -> ResourceList:
    """Parse a template into resources. All-or-nothing: any error aborts."""
    data = evaluate(config, template_file)

    resources = ResourceList()
    for path, branch in data.items():
        logger.debug("Checking path %s", path)
        try:
            provider = config.registry.get_provider(path)
        except ProviderNotFoundError:
            logger.info("Skipping unregistered path %s", path)
            continue
        try:
            parsed = provider.parse(branch)
        except GrizzlyError:
            raise
        except Exception as e:
            raise ParseError(f"{provider.kind} ({path}): {e}") from e
        resources.merge(parsed)
    return resources
