"""Severity-filtered console logging and test-result reporting for the inference engine."""

from __future__ import annotations

import enum
import sys
import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, TextIO, Union

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

Clock = Callable[[], time.struct_time]


class Severity(enum.IntEnum):
    """Message severity; a lower value is more severe."""

    INTERNAL_ERROR = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    VERBOSE = 4


_PREFIXES = {
    Severity.INTERNAL_ERROR: "[F] ",
    Severity.ERROR: "[E] ",
    Severity.WARNING: "[W] ",
    Severity.INFO: "[I] ",
    Severity.VERBOSE: "[V] ",
}


def severity_prefix(severity: Union[Severity, int]) -> str:
    """The short tag placed in front of a message of the given severity."""
    return _PREFIXES[Severity(severity)]


class TestResult(enum.Enum):
    """State of a reported test."""

    RUNNING = "RUNNING"
    PASSED = "PASSED"
    FAILED = "FAILED"
    WAIVED = "WAIVED"


@dataclass
class TestAtom:
    """Handle describing a test whose start and end are reported."""

    __test__ = False

    started: bool
    name: str
    cmdline: str


def _timestamp(moment: time.struct_time) -> str:
    return (
        f"[{moment.tm_mon:02d}/{moment.tm_mday:02d}/{moment.tm_year:04d}-"
        f"{moment.tm_hour:02d}:{moment.tm_min:02d}:{moment.tm_sec:02d}] "
    )


class LogStreamConsumer:
    """Buffers text for one message and writes it out, tagged, when flushed.

    Messages at INFO or less severe go to standard output, the rest to
    standard error; the timestamp always goes to standard output.  Used as a
    context manager, any pending text is flushed on exit.
    """

    def __init__(
        self,
        reportable_severity: Severity,
        severity: Severity,
        *,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        clock: Clock = time.localtime,
    ) -> None:
        self.severity = Severity(severity)
        self.should_log = self.severity <= reportable_severity
        self._stdout = stdout
        self._stderr = stderr
        self._clock = clock
        self._prefix = severity_prefix(self.severity)
        self._buffer: List[str] = []

    def _out(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def _target(self) -> TextIO:
        if self.severity >= Severity.INFO:
            return self._out()
        return self._stderr if self._stderr is not None else sys.stderr

    @property
    def pending(self) -> str:
        """Text written but not yet flushed."""
        return "".join(self._buffer)

    def write(self, text: object) -> "LogStreamConsumer":
        """Append text to the message; returns the consumer for chaining."""
        self._buffer.append(str(text))
        return self

    def flush(self) -> None:
        """Emit the buffered text if this severity is reportable."""
        if not self.should_log:
            return
        out = self._out()
        out.write(_timestamp(self._clock()))
        target = self._target()
        target.write(self._prefix + self.pending)
        self._buffer.clear()
        target.flush()

    def set_reportable_severity(self, reportable_severity: Severity) -> None:
        self.should_log = self.severity <= reportable_severity

    def __enter__(self) -> "LogStreamConsumer":
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._buffer:
            self.flush()


class Logger:
    """Logs engine messages above a reportable severity and reports test results."""

    def __init__(
        self,
        severity: Severity = Severity.WARNING,
        *,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        clock: Clock = time.localtime,
    ) -> None:
        self.reportable_severity = Severity(severity)
        self.stdout = stdout
        self.stderr = stderr
        self.clock = clock

    def consumer(self, severity: Severity) -> LogStreamConsumer:
        """A message buffer of the given severity sharing this logger's streams."""
        return LogStreamConsumer(
            self.reportable_severity,
            severity,
            stdout=self.stdout,
            stderr=self.stderr,
            clock=self.clock,
        )

    def log(self, severity: Severity, msg: str) -> None:
        with self.consumer(severity) as stream:
            stream.write(f"[TRT] {msg}\n")
            stream.flush()

    @staticmethod
    def define_test(name: str, cmdline: Union[str, Sequence[str]]) -> TestAtom:
        """Describe a test; ``cmdline`` may be a string or a list of arguments."""
        if not isinstance(cmdline, str):
            cmdline = " ".join(str(arg) for arg in cmdline)
        return TestAtom(False, name, cmdline)

    def _report_result(self, atom: TestAtom, result: TestResult) -> None:
        out = self.stdout if self.stdout is not None else sys.stdout
        out.write(f"&&&& {result.value} {atom.name} # {atom.cmdline}\n")
        out.flush()

    def report_test_start(self, atom: TestAtom) -> None:
        if atom.started:
            raise RuntimeError(f"Test {atom.name} was already started")
        self._report_result(atom, TestResult.RUNNING)
        atom.started = True

    def report_test_end(self, atom: TestAtom, result: TestResult) -> None:
        if result is TestResult.RUNNING:
            raise ValueError("A finished test cannot be reported as running")
        if not atom.started:
            raise RuntimeError(f"Test {atom.name} was never started")
        self._report_result(atom, result)

    def report_pass(self, atom: TestAtom) -> int:
        self.report_test_end(atom, TestResult.PASSED)
        return EXIT_SUCCESS

    def report_fail(self, atom: TestAtom) -> int:
        self.report_test_end(atom, TestResult.FAILED)
        return EXIT_FAILURE

    def report_waive(self, atom: TestAtom) -> int:
        self.report_test_end(atom, TestResult.WAIVED)
        return EXIT_SUCCESS

    def report_test(self, atom: TestAtom, passed: bool) -> int:
        return self.report_pass(atom) if passed else self.report_fail(atom)


def log_verbose(logger: Logger) -> LogStreamConsumer:
    return logger.consumer(Severity.VERBOSE)


def log_info(logger: Logger) -> LogStreamConsumer:
    return logger.consumer(Severity.INFO)


def log_warn(logger: Logger) -> LogStreamConsumer:
    return logger.consumer(Severity.WARNING)


def log_error(logger: Logger) -> LogStreamConsumer:
    return logger.consumer(Severity.ERROR)


def log_fatal(logger: Logger) -> LogStreamConsumer:
    return logger.consumer(Severity.INTERNAL_ERROR)