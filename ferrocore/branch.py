"""Tracking the current git branch of the working directory."""

from __future__ import annotations

import logging
import subprocess
import threading
from pathlib import Path

from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

from ferrocore.job_manager import EventLoopProxy

log = logging.getLogger(__name__)

DEBOUNCE_SECONDS = 1.0


def _git(args: list[str], cwd) -> str | None:
    try:
        result = subprocess.run(
            ["git", *args], cwd=cwd, capture_output=True, check=False
        )
    except OSError as err:
        log.error("%s", err)
        return None
    if result.returncode != 0:
        return None
    return result.stdout.decode("utf-8", errors="replace").strip()


def get_current_branch(cwd=None) -> str | None:
    """Name of the checked-out branch, or None outside a repository."""
    return _git(["branch", "--show-current"], cwd)


def get_git_directory(cwd=None) -> str | None:
    """Path of the repository's ``.git`` directory, or None."""
    top = _git(["rev-parse", "--show-toplevel"], cwd)
    if top is None:
        return None
    return f"{top}/.git"


class _GitDirHandler(FileSystemEventHandler):
    def __init__(self, callback) -> None:
        super().__init__()
        self._callback = callback

    def on_any_event(self, event) -> None:
        self._callback()


class BranchWatcher:
    """Keeps the current branch name up to date as the git directory changes."""

    def __init__(self, proxy: EventLoopProxy, cwd: str | Path | None = None) -> None:
        self._proxy = proxy
        self._cwd = cwd
        self._branch: str | None = None
        self._lock = threading.Lock()
        self._timer: threading.Timer | None = None
        self._observer = None

        git_dir = get_git_directory(cwd)
        if git_dir is not None:
            observer = Observer()
            try:
                observer.schedule(
                    _GitDirHandler(self._on_fs_event), git_dir, recursive=False
                )
                observer.start()
            except OSError as err:
                log.error("Error starting branch watcher %s", err)
            else:
                self._observer = observer

        self.force_reload()

    def _on_fs_event(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = threading.Timer(DEBOUNCE_SECONDS, self._refresh_from_watch)
            self._timer.daemon = True
            self._timer.start()

    def _refresh_from_watch(self) -> None:
        branch = get_current_branch(self._cwd)
        if branch is None:
            return
        with self._lock:
            if self._branch is not None and self._branch != branch:
                log.info("Git branch changed from `%s` to `%s`", self._branch, branch)
            self._branch = branch
        self._proxy.request_render()

    def current_branch(self) -> str | None:
        with self._lock:
            return self._branch

    def force_reload(self) -> None:
        """Look up the branch again on a background thread."""
        proxy = self._proxy.dup()

        def reload() -> None:
            branch = get_current_branch(self._cwd)
            if branch is not None:
                with self._lock:
                    self._branch = branch
                proxy.request_render()

        threading.Thread(target=reload, name="branch-reload", daemon=True).start()

    def close(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
        if self._observer is not None:
            self._observer.stop()
            self._observer.join()
            self._observer = None