import io
import time

import pytest

from perceptkit import trtlog

FIXED = time.struct_time((2021, 3, 5, 7, 8, 9, 4, 64, -1))
STAMP = "[03/05/2021-07:08:09] "


def make_logger(severity=trtlog.Severity.WARNING):
    out, err = io.StringIO(), io.StringIO()
    logger = trtlog.Logger(severity, stdout=out, stderr=err, clock=lambda: FIXED)
    return logger, out, err


@pytest.mark.parametrize(
    "severity, prefix",
    [
        (trtlog.Severity.INTERNAL_ERROR, "[F] "),
        (trtlog.Severity.ERROR, "[E] "),
        (trtlog.Severity.WARNING, "[W] "),
        (trtlog.Severity.INFO, "[I] "),
        (trtlog.Severity.VERBOSE, "[V] "),
    ],
)
def test_severity_prefix(severity, prefix):
    assert trtlog.severity_prefix(severity) == prefix


def test_severity_prefix_rejects_unknown_value():
    with pytest.raises(ValueError):
        trtlog.severity_prefix(42)


def test_severity_order_most_severe_first():
    prefixes = [trtlog.severity_prefix(s) for s in sorted(trtlog.Severity)]
    assert prefixes == ["[F] ", "[E] ", "[W] ", "[I] ", "[V] "]


def test_default_logger_suppresses_info():
    logger, out, err = make_logger()
    assert logger.reportable_severity is trtlog.Severity.WARNING
    logger.log(trtlog.Severity.INFO, "quiet")
    assert out.getvalue() == ""
    assert err.getvalue() == ""


def test_warning_goes_to_stderr_with_timestamp_on_stdout():
    logger, out, err = make_logger()
    logger.log(trtlog.Severity.WARNING, "hello")
    assert err.getvalue() == "[W] [TRT] hello\n"
    assert out.getvalue() == STAMP


def test_info_goes_to_stdout_when_reportable():
    logger, out, err = make_logger(trtlog.Severity.VERBOSE)
    logger.log(trtlog.Severity.INFO, "ready")
    assert out.getvalue() == STAMP + "[I] [TRT] ready\n"
    assert err.getvalue() == ""


def test_consumer_context_flushes_pending_text():
    logger, out, err = make_logger()
    with trtlog.log_error(logger) as stream:
        stream.write("bad ").write(3)
    assert err.getvalue() == "[E] bad 3"
    assert stream.pending == ""


def test_consumer_set_reportable_severity_enables_output():
    logger, out, err = make_logger(trtlog.Severity.ERROR)
    stream = trtlog.log_info(logger)
    stream.write("later")
    stream.flush()
    assert out.getvalue() == ""
    stream.set_reportable_severity(trtlog.Severity.INFO)
    stream.flush()
    assert out.getvalue() == STAMP + "[I] later"


@pytest.mark.parametrize(
    "factory, severity",
    [
        (trtlog.log_verbose, trtlog.Severity.VERBOSE),
        (trtlog.log_info, trtlog.Severity.INFO),
        (trtlog.log_warn, trtlog.Severity.WARNING),
        (trtlog.log_error, trtlog.Severity.ERROR),
        (trtlog.log_fatal, trtlog.Severity.INTERNAL_ERROR),
    ],
)
def test_log_factories_use_logger_threshold(factory, severity):
    logger, _, _ = make_logger()
    stream = factory(logger)
    assert stream.severity is severity
    assert stream.should_log == (severity <= trtlog.Severity.WARNING)


def test_define_test_joins_arguments():
    atom = trtlog.Logger.define_test("TensorRT.sample", ["prog", "--int8", "x"])
    assert atom.cmdline == "prog --int8 x"
    assert atom.name == "TensorRT.sample"
    assert atom.started is False


def test_start_then_pass_reports_both_lines():
    logger, out, _ = make_logger()
    atom = logger.define_test("TensorRT.sample", "prog --fp16")
    logger.report_test_start(atom)
    assert atom.started is True
    assert logger.report_pass(atom) == trtlog.EXIT_SUCCESS
    assert out.getvalue() == (
        "&&&& RUNNING TensorRT.sample # prog --fp16\n"
        "&&&& PASSED TensorRT.sample # prog --fp16\n"
    )


def test_report_test_false_fails():
    logger, out, _ = make_logger()
    atom = logger.define_test("t", "c")
    logger.report_test_start(atom)
    assert logger.report_test(atom, False) == trtlog.EXIT_FAILURE
    assert out.getvalue().splitlines()[-1] == "&&&& FAILED t # c"


def test_report_waive_returns_success():
    logger, out, _ = make_logger()
    atom = logger.define_test("t", "c")
    logger.report_test_start(atom)
    assert logger.report_waive(atom) == trtlog.EXIT_SUCCESS
    assert out.getvalue().splitlines()[-1] == "&&&& WAIVED t # c"


def test_end_without_start_raises():
    logger, _, _ = make_logger()
    atom = logger.define_test("t", "c")
    with pytest.raises(RuntimeError):
        logger.report_pass(atom)


def test_end_with_running_raises():
    logger, _, _ = make_logger()
    atom = logger.define_test("t", "c")
    logger.report_test_start(atom)
    with pytest.raises(ValueError):
        logger.report_test_end(atom, trtlog.TestResult.RUNNING)


def test_double_start_raises():
    logger, _, _ = make_logger()
    atom = logger.define_test("t", "c")
    logger.report_test_start(atom)
    with pytest.raises(RuntimeError):
        logger.report_test_start(atom)