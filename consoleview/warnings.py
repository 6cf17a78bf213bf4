"""Lints that flag suspicious task behaviour, and tracking of how many tasks have each."""

from __future__ import annotations

import enum
import time
import weakref
from typing import Callable, Generic, Protocol, TypeVar

from consoleview.timefmt import format_duration_debug

T = TypeVar("T")

_NANOS_PER_MILLI = 1_000_000


class TaskLike(Protocol):
    """The view of a task that the warnings inspect."""

    is_blocking: bool
    is_completed: bool
    is_running: bool
    is_awakened: bool
    self_wake_percent: int
    waker_count: int
    total_polls: int
    size_bytes: int | None
    original_size_bytes: int | None

    def busy(self, now: int) -> int:
        """Nanoseconds spent busy up to `now` (nanoseconds since the epoch)."""
        ...


class Verdict(enum.Enum):
    """The result of checking one entity for one warning."""

    OK = enum.auto()
    WARN = enum.auto()
    RECHECK = enum.auto()


class Warn(Protocol[T]):
    """Detection and description of one kind of warning."""

    def check(self, task: T) -> Verdict: ...

    def format(self, task: T) -> str: ...

    def summary(self) -> str: ...


class Lint(Generic[T]):
    """The outcome of a linter check.

    A warning lint keeps its linter's count raised for as long as it is
    held, so the entity that triggered the warning should keep it.
    """

    def __init__(self, verdict: Verdict, linter: Linter[T] | None = None) -> None:
        self.verdict = verdict
        self.linter = linter

    @property
    def is_warning(self) -> bool:
        return self.verdict is Verdict.WARN

    def format(self, task: T) -> str:
        if self.linter is None:
            raise ValueError("only a warning lint can be formatted")
        return self.linter.format(task)

    def summary(self) -> str:
        if self.linter is None:
            raise ValueError("only a warning lint has a summary")
        return self.linter.summary()

    def __repr__(self) -> str:
        return f"Lint({self.verdict.name})"


class Linter(Generic[T]):
    """Wraps a warning and counts the entities currently holding it."""

    def __init__(self, warning: Warn[T]) -> None:
        self._warning = warning
        self._holders: weakref.WeakSet[Lint[T]] = weakref.WeakSet()

    def check(self, task: T) -> Lint[T]:
        verdict = self._warning.check(task)
        if verdict is Verdict.WARN:
            lint = Lint(Verdict.WARN, self)
            self._holders.add(lint)
            return lint
        return Lint(verdict)

    def count(self) -> int:
        """Number of entities that currently hold this warning."""
        return len(self._holders)

    def format(self, task: T) -> str:
        if self._warning.check(task) is not Verdict.WARN:
            raise ValueError("tried to format a warning for a task that did not have it")
        return self._warning.format(task)

    def summary(self) -> str:
        return self._warning.summary()

    def __repr__(self) -> str:
        return f"Linter({self._warning!r})"


class SelfWakePercent:
    """Warns when a task wakes itself for more than a given share of its wakeups."""

    DEFAULT_PERCENT = 50

    def __init__(self, min_percent: int = DEFAULT_PERCENT) -> None:
        self.min_percent = min_percent
        self._description = f"tasks have woken themselves over {min_percent}% of the time"

    def summary(self) -> str:
        return self._description

    def check(self, task: TaskLike) -> Verdict:
        if task.is_blocking:
            return Verdict.OK
        return Verdict.WARN if task.self_wake_percent > self.min_percent else Verdict.OK

    def format(self, task: TaskLike) -> str:
        return (
            f"This task has woken itself for more than {self.min_percent}% "
            f"of its total wakeups ({task.self_wake_percent}%)"
        )

    def __repr__(self) -> str:
        return f"SelfWakePercent(min_percent={self.min_percent})"


class LostWaker:
    """Warns when an unfinished, idle task holds no wakers."""

    def __init__(self) -> None:
        self._description = "tasks have lost their wakers"
        self._message = "This task has lost its waker, and will never be woken again."

    def summary(self) -> str:
        return self._description

    def check(self, task: TaskLike) -> Verdict:
        if task.is_blocking:
            return Verdict.OK
        lost = (
            not task.is_completed
            and task.waker_count == 0
            and not task.is_running
            and not task.is_awakened
        )
        return Verdict.WARN if lost else Verdict.OK

    def format(self, task: TaskLike) -> str:
        return self._message

    def __repr__(self) -> str:
        return "LostWaker()"


class NeverYielded:
    """Warns when a running task has been busy since its first poll for too long.

    Durations are in nanoseconds; `clock` returns the current time in
    nanoseconds since the epoch.
    """

    DEFAULT_DURATION_NS = 1_000_000_000

    def __init__(
        self,
        min_duration_ns: int = DEFAULT_DURATION_NS,
        clock: Callable[[], int] = time.time_ns,
    ) -> None:
        self.min_duration_ns = min_duration_ns
        self._clock = clock
        self._description = (
            f"tasks have never yielded (threshold {min_duration_ns // _NANOS_PER_MILLI}ms)"
        )

    def summary(self) -> str:
        return self._description

    def check(self, task: TaskLike) -> Verdict:
        if task.is_blocking or not task.is_running:
            return Verdict.OK
        if task.total_polls > 1:
            return Verdict.OK
        # Short-lived tasks may simply not have had the chance to yield yet.
        if task.busy(self._clock()) >= self.min_duration_ns:
            return Verdict.WARN
        return Verdict.RECHECK

    def format(self, task: TaskLike) -> str:
        busy = format_duration_debug(task.busy(self._clock()))
        return f"This task has never yielded ({busy})"

    def __repr__(self) -> str:
        return f"NeverYielded(min_duration_ns={self.min_duration_ns})"


class AutoBoxedFuture:
    """Warns when the runtime boxed a task's future because of its size."""

    def summary(self) -> str:
        return "tasks have been boxed by the runtime due to their size"

    def check(self, task: TaskLike) -> Verdict:
        size, original = task.size_bytes, task.original_size_bytes
        if size is None or original is None:
            return Verdict.OK
        return Verdict.WARN if original != size else Verdict.OK

    def format(self, task: TaskLike) -> str:
        original = task.original_size_bytes
        boxed = task.size_bytes
        if original is None or boxed is None:
            raise ValueError("warning should not trigger if a size is unknown")
        return (
            "This task's future was auto-boxed by the runtime when spawning, due to its "
            f"size (originally {original} bytes, boxed size {boxed} bytes)"
        )

    def __repr__(self) -> str:
        return "AutoBoxedFuture()"


class LargeFuture:
    """Warns when a task's future occupies at least a given number of bytes."""

    DEFAULT_MIN_SIZE_BYTES = 1024

    def __init__(self, min_size: int = DEFAULT_MIN_SIZE_BYTES) -> None:
        self.min_size = min_size
        self._description = f"tasks are {min_size} bytes or larger"

    def summary(self) -> str:
        return self._description

    def check(self, task: TaskLike) -> Verdict:
        if task.is_blocking:
            return Verdict.OK
        if task.size_bytes is not None and task.size_bytes >= self.min_size:
            return Verdict.WARN
        return Verdict.OK

    def format(self, task: TaskLike) -> str:
        if task.size_bytes is None:
            raise ValueError("warning should not trigger if size is unknown")
        return f"This task occupies a large amount of stack space ({task.size_bytes} bytes)"

    def __repr__(self) -> str:
        return f"LargeFuture(min_size={self.min_size})"