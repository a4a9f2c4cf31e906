"""Re-apply a template whenever files under a directory are written."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable, Iterator, Set as AbstractSet
from pathlib import Path

from watchfiles import Change, DefaultFilter, watch

from grizzly.config.settings import Config
from grizzly.core.applier import apply_resource
from grizzly.core.parser import parse
from grizzly.models.results import ApplyResult

logger = logging.getLogger(__name__)

Changes = AbstractSet[tuple[Change, str]]
WatchFunction = Callable[..., Iterator[Changes]]

RESTART_DELAY = 1.0


class WriteFilter(DefaultFilter):
    """Only file writes trigger a run; editors saving atomically show up as ``added``.

    Paths the default filter ignores (VCS directories, caches, swap and backup
    files) never trigger one.
    """

    def __call__(self, change: Change, path: str) -> bool:
        return change in (Change.modified, Change.added) and super().__call__(change, path)


is_write = WriteFilter()


class Watcher:
    """Watches ``watch_dir`` and applies ``template_file`` on every write.

    Runs are fail-soft: parse errors and per-resource apply errors are logged
    and the watcher keeps going. ``stop_event`` ends the loop; without it the
    loop runs until the process is interrupted.
    """

    def __init__(
        self,
        config: Config,
        watch_dir: str | Path,
        template_file: str | Path,
        targets: Iterable[str] | None = None,
        stop_event: threading.Event | None = None,
        on_result: Callable[[ApplyResult], None] | None = None,
        watch_fn: WatchFunction = watch,
    ):
        self.config = config
        self.watch_dir = Path(watch_dir)
        self.template_file = Path(template_file)
        self.targets = list(targets or [])
        self.stop_event = stop_event or threading.Event()
        self.on_result = on_result
        self._watch_fn = watch_fn

    def stop(self) -> None:
        self.stop_event.set()

    def run(self) -> None:
        """Block, running the pipeline for each batch of changes, until stopped."""
        if not self.watch_dir.exists():
            raise FileNotFoundError(f"Watch directory {self.watch_dir} does not exist")

        logger.info("Watching %s for changes", self.watch_dir)
        while not self.stop_event.is_set():
            try:
                for changes in self._watch_fn(
                    self.watch_dir,
                    watch_filter=is_write,
                    stop_event=self.stop_event,
                    raise_interrupt=False,
                ):
                    self.handle_changes(changes)
                    if self.stop_event.is_set():
                        break
                else:
                    # The watcher ended on its own (stop event or interrupt).
                    return
            except (OSError, RuntimeError) as e:
                logger.error("Watch error: %s", e)
                self.stop_event.wait(RESTART_DELAY)

    def handle_changes(self, changes: Changes) -> list[ApplyResult]:
        """Run parse then apply once. Errors are logged, never raised."""
        for change, path in sorted(changes, key=lambda c: c[1]):
            logger.debug("%s: %s", change.name, path)
        logger.info("Changes detected. Applying %s", self.template_file)

        try:
            resources = parse(self.config, self.template_file)
        except Exception as e:
            logger.error("Error parsing %s: %s", self.template_file, e)
            return []

        results: list[ApplyResult] = []
        for resource in resources.targeted(self.targets):
            try:
                result = apply_resource(resource)
            except Exception as e:
                logger.error("Error applying %s: %s", resource.identity, e)
                continue
            results.append(result)
            if self.on_result:
                self.on_result(result)
        return results
