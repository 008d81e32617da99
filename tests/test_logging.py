import json
import logging

from pythonjsonlogger.json import JsonFormatter

from trainings.core.config import Settings
from trainings.core.logging import configure_logging


def test_json_output_merges_extra_fields():
    configure_logging(Settings(log_level="debug", log_format="json"))
    formatter = logging.getLogger("trainings").handlers[0].formatter
    record = logging.LogRecord(
        "trainings.repositories.trainings", logging.DEBUG, __file__, 10, "%s: %s", ("create_training", "ok"), None
    )
    record.operation = "create_training"
    record.training_id = 5

    payload = json.loads(formatter.format(record))

    assert payload["message"] == "create_training: ok"
    assert payload["level"] == "DEBUG"
    assert payload["logger"] == "trainings.repositories.trainings"
    assert payload["service"] == "trainings"
    assert payload["operation"] == "create_training"
    assert payload["training_id"] == 5


def test_configure_logging_installs_chosen_formatter():
    configure_logging(Settings(log_level="debug", log_format="json"))

    logger = logging.getLogger("trainings")
    assert logger.level == logging.DEBUG
    assert isinstance(logger.handlers[0].formatter, JsonFormatter)

    configure_logging(Settings(log_level="warning", log_format="text"))
    assert logger.level == logging.WARNING
    assert not isinstance(logger.handlers[0].formatter, JsonFormatter)
