"""Structured run logging (timestamp, algorithm, counts, etc.)."""

import logging
import logging.handlers
from pathlib import Path

LOG_FILE_PATH = Path(__file__).parent.parent.parent / "logs/finder.log"
_LOG_LEVEL = logging.INFO

_LOG_FORMAT = (
    "level=%(levelname)s | time=%(asctime)s | process=%(process)d | "
    "module=%(module)s | funcName=%(funcName)s | "
    "lineno=%(lineno)d | message=%(message)s"
)


def setup_logging(
    log_file: Path = LOG_FILE_PATH,
    level: int = _LOG_LEVEL,
) -> logging.Handler:
    """Direct the root logger to a rotating log file.

    Any handler already attached to the root logger is replaced.

    Args:
        log_file (Path): The file to write log records to.
        level (int): The minimum level of the records to keep.

    Returns:
        logging.Handler: The installed file handler.

    """
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    file_handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    formatter = logging.Formatter(_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    return file_handler


def log_run(
    time_stamp: str,
    algorithm: str,
    words_path: Path,
    word_count: int,
    concatenated_count: int,
    execution_time_ms: float,
) -> None:
    """Log the details of a finder run using the configured
    logging system.

    Args:
        time_stamp (str): The timestamp of the run.
        algorithm (str): The name of the algorithm used.
        words_path (Path): The word file the vocabulary came from.
        word_count (int): The number of distinct words examined.
        concatenated_count (int): The number of concatenated words found.
        execution_time_ms (float): The execution time in milliseconds.

    """
    # Use standard logging, the handlers will direct it appropriately
    logging.info(
        "Timestamp: %s, Algorithm: %s, Words file: '%s', Words: %d, "
        "Concatenated: %d, Execution Time: %.2f ms",
        time_stamp,
        algorithm,
        words_path,
        word_count,
        concatenated_count,
        execution_time_ms,
    )
