import io

import pytest

from kata.verbosity import Logger, StderrLogger, VerbosityFilter, do_things, main


class RecordingLogger(Logger):
    def __init__(self):
        self.records = []

    def log(self, verbosity, message):
        self.records.append((verbosity, message))


def test_logger_is_abstract():
    with pytest.raises(TypeError):
        Logger()


def test_stderr_logger_format(capsys):
    StderrLogger().log(5, "FYI")
    assert capsys.readouterr().err == "verbosity=5: FYI\n"


def test_stderr_logger_to_stream():
    stream = io.StringIO()
    StderrLogger(stream).log(2, "Uhoh")
    assert stream.getvalue() == "verbosity=2: Uhoh\n"


def test_filter_drops_verbose_messages():
    inner = RecordingLogger()
    do_things(VerbosityFilter(3, inner))
    assert inner.records == [(2, "Uhoh")]


def test_filter_boundary_is_inclusive():
    inner = RecordingLogger()
    logger = VerbosityFilter(3, inner)
    logger.log(3, "at limit")
    logger.log(4, "above limit")
    assert inner.records == [(3, "at limit")]


def test_unfiltered_do_things_logs_both():
    inner = RecordingLogger()
    do_things(inner)
    assert inner.records == [(5, "FYI"), (2, "Uhoh")]


def test_main_writes_filtered_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().err == "verbosity=2: Uhoh\n"