import io
import json
import logging

from logistic_lab.utils.logging import JSONFormatter, configure_logging, get_logger
from logistic_lab.utils.profiling import track_time


def test_json_formatter_includes_context_fields():
    record = logging.LogRecord("lab", logging.INFO, __file__, 1, "hello %s", ("world",), None)
    record.component = "mle"
    record.n = 10
    payload = json.loads(JSONFormatter().format(record))
    assert payload["message"] == "hello world"
    assert payload["level"] == "INFO"
    assert payload["component"] == "mle"
    assert payload["n"] == 10


def test_configure_logging_writes_json_with_defaults():
    stream = io.StringIO()
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        configure_logging(run_id="run-1", component="test", stream=stream)
        logging.getLogger("logistic_lab.test").info("ready")
        payload = json.loads(stream.getvalue().strip())
        assert payload["run_id"] == "run-1"
        assert payload["component"] == "test"
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_get_logger_does_not_stack_filters():
    logger = get_logger("logistic_lab.stack", component="a")
    get_logger("logistic_lab.stack", component="a")
    assert len(logger.filters) == 1


def test_segment_timing_fields_reach_json_output():
    stream = io.StringIO()
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        configure_logging(component="test", stream=stream)
        with track_time("monte_carlo"):
            pass
        payload = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert payload["message"] == "Segment timing"
        assert payload["segment"] == "monte_carlo"
        assert {"wall_seconds", "cpu_seconds", "duration_ms"} <= set(payload)
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
