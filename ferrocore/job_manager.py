"""Background jobs that report progress and a final result to the event loop."""

from __future__ import annotations

import enum
import queue
import threading
from dataclasses import dataclass, field
from typing import Any, Callable


class ControlFlowKind(enum.Enum):
    POLL = "poll"
    WAIT = "wait"
    EXIT = "exit"
    WAIT_MAX = "wait_max"


@dataclass(frozen=True)
class EventLoopControlFlow:
    """What the event loop should do next; ``timeout`` is used by WAIT_MAX."""

    kind: ControlFlowKind
    timeout: float | None = None

    @classmethod
    def wait_max(cls, seconds: float) -> EventLoopControlFlow:
        if seconds < 0:
            raise ValueError("wait duration cannot be negative")
        return cls(ControlFlowKind.WAIT_MAX, seconds)


@dataclass
class EventLoopProxy:
    """A thread-safe handle for sending events and render requests to the loop."""

    events: queue.Queue = field(default_factory=queue.Queue)
    render_requested: threading.Event = field(default_factory=threading.Event)

    def send(self, event: Any) -> None:
        self.events.put(event)

    def request_render(self) -> None:
        self.render_requested.set()

    def dup(self) -> EventLoopProxy:
        """Another proxy feeding the same event loop."""
        return EventLoopProxy(self.events, self.render_requested)


class JobPending(Exception):
    """Nothing has been received from the job yet."""


@dataclass(frozen=True)
class Progress:
    value: Any


@dataclass(frozen=True)
class End:
    value: Any


@dataclass(frozen=True)
class _Failure:
    error: BaseException


class Progressor:
    """Handed to a job so it can report intermediate results."""

    def __init__(self, sink: queue.Queue) -> None:
        self._sink = sink

    def make_progress(self, value: Any) -> None:
        self._sink.put(value)


class JobHandle:
    """The caller's side of a running job."""

    def __init__(
        self, end: queue.Queue, progress: queue.Queue, killed: threading.Event
    ) -> None:
        self._end = end
        self._progress = progress
        self._killed = killed
        self._finished = False

    def _take_end(self) -> Any:
        try:
            item = self._end.get_nowait()
        except queue.Empty:
            raise JobPending() from None
        self._finished = True
        if isinstance(item, _Failure):
            raise item.error
        return item

    def try_recv(self) -> Any:
        """Return the job's result, or raise JobPending if it is not done."""
        return self._take_end()

    def poll_progress(self) -> Progress | End:
        """Return pending progress first, then the final result."""
        try:
            return Progress(self._progress.get_nowait())
        except queue.Empty:
            pass
        return End(self._take_end())

    def kill(self) -> None:
        self._killed.set()

    def is_finished(self) -> bool:
        return self._finished


class JobManager:
    """Runs foreground jobs on threads; all are joined when it is closed."""

    def __init__(self, proxy: EventLoopProxy) -> None:
        self._proxy = proxy
        self._threads: list[threading.Thread] = []

    def poll_jobs(self) -> None:
        """Join and forget threads whose jobs have finished."""
        done = [t for t in self._threads if not t.is_alive()]
        for thread in done:
            thread.join()
        self._threads = [t for t in self._threads if t not in done]

    def spawn_foreground_job(
        self,
        func: Callable[[threading.Event, Progressor, Any], Any],
        job_input: Any,
    ) -> JobHandle:
        """Run ``func(killed, progressor, job_input)`` on a new thread."""
        killed = threading.Event()
        end: queue.Queue = queue.Queue()
        progress: queue.Queue = queue.Queue()
        proxy = self._proxy.dup()

        def run() -> None:
            try:
                output = func(killed, Progressor(progress), job_input)
            except BaseException as exc:
                end.put(_Failure(exc))
            else:
                end.put(output)
            proxy.request_render()

        thread = threading.Thread(target=run, name="foreground-job")
        thread.start()
        self._threads.append(thread)
        return JobHandle(end, progress, killed)

    def close(self) -> None:
        """Wait for every job to finish."""
        threads, self._threads = self._threads, []
        for thread in threads:
            thread.join()

    def __enter__(self) -> JobManager:
        return self

    def __exit__(self, *args) -> None:
        self.close()