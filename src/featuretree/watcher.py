"""File system watcher for reloading the hierarchy document."""

import logging
import threading
from pathlib import Path
from typing import Callable

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

logger = logging.getLogger(__name__)


class HierarchyEventHandler(FileSystemEventHandler):
    """Handler for changes to one hierarchy file, with debouncing."""

    def __init__(
        self,
        path: Path,
        on_change: Callable[[], None],
        debounce_seconds: float = 0.5,
    ):
        super().__init__()
        self.path = path.resolve()
        self.on_change = on_change
        self.debounce_seconds = debounce_seconds
        self._lock = threading.Lock()
        self._timer: threading.Timer | None = None

    def _is_target(self, path: str | bytes) -> bool:
        """Check if an event path refers to the watched file."""
        if isinstance(path, bytes):
            path = path.decode()
        return Path(path).resolve() == self.path

    def _schedule_update(self) -> None:
        """Schedule a debounced change notification."""
        logger.debug("Hierarchy change detected: %s", self.path)
        with self._lock:
            if self._timer:
                self._timer.cancel()

            self._timer = threading.Timer(
                self.debounce_seconds,
                self._fire,
            )
            self._timer.daemon = True
            self._timer.start()

    def _fire(self) -> None:
        with self._lock:
            self._timer = None
        logger.info("Hierarchy file changed: %s", self.path)
        self.on_change()

    def cancel(self) -> None:
        """Drop any pending notification."""
        with self._lock:
            if self._timer:
                self._timer.cancel()
                self._timer = None

    def on_created(self, event: FileSystemEvent) -> None:
        if not event.is_directory and self._is_target(event.src_path):
            self._schedule_update()

    def on_modified(self, event: FileSystemEvent) -> None:
        if not event.is_directory and self._is_target(event.src_path):
            self._schedule_update()

    def on_moved(self, event: FileSystemEvent) -> None:
        """Editors often save by renaming a temp file over the original."""
        if not event.is_directory and self._is_target(event.dest_path):
            self._schedule_update()


class HierarchyWatcher:
    """Watches the hierarchy file's directory for changes to that file."""

    def __init__(
        self,
        path: Path,
        on_change: Callable[[], None],
        debounce_seconds: float = 0.5,
    ):
        self.path = path
        self.on_change = on_change
        self.debounce_seconds = debounce_seconds
        self._observer: Observer | None = None
        self._handler: HierarchyEventHandler | None = None

    def start(self) -> None:
        """Start watching the hierarchy file."""
        if self._observer is not None:
            return  # Already running

        self._handler = HierarchyEventHandler(
            self.path,
            self.on_change,
            self.debounce_seconds,
        )

        self._observer = Observer()
        self._observer.schedule(
            self._handler,
            str(self.path.resolve().parent),
            recursive=False,
        )
        self._observer.daemon = True
        self._observer.start()
        logger.info("Hierarchy watcher started: %s", self.path)

    def stop(self) -> None:
        """Stop watching."""
        if self._observer is not None:
            self._observer.stop()
            self._observer.join(timeout=1.0)
            self._observer = None
        if self._handler is not None:
            self._handler.cancel()
            self._handler = None

    def __enter__(self) -> "HierarchyWatcher":
        self.start()
        return self

    def __exit__(self, *args) -> None:
        self.stop()
