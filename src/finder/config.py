"""Configuration parser for the finder."""

from pathlib import Path
from typing import Optional, cast

from src.custom_data_structures.top_k.top_k import DEFAULT_TOP_K

ALGORITHM_CHOICES = ("dp", "trie")
DEFAULT_ALGORITHM = "trie"


class ConfigBoolParsingError(Exception):
    """Raised when the parsing of bool strings in
    the config file was not successful.
    """


class ConfigNotFoundError(Exception):
    """Raised when a required configuration setting is not provided."""


class ConfigValueError(Exception):
    """Raised when a configuration setting holds an unusable value."""


class FinderConfig:
    """A class to save finder configuration settings."""

    def __init__(
        self,
        words_path: Path,
        algorithm: str = DEFAULT_ALGORITHM,
        top_k: int = DEFAULT_TOP_K,
        log_details: bool = False,
    ) -> None:
        """Initialize the finder configuration.

        Args:
            words_path (Path): The path to the word file.
            algorithm (str): The algorithm to run, 'dp' or 'trie'.
            top_k (int): How many of the longest words to report.
            log_details (bool): Whether to write run details to the log.

        """
        self.words_path = words_path
        self.algorithm = algorithm
        self.top_k = top_k
        self.log_details = log_details

    def __repr__(self) -> str:
        """Return a string representation of the configuration object.

        Returns:
            str: A formatted string representing the configuration settings.

        """
        return f"""
                Finder configuration settings:
                Words path: {self.words_path}
                Algorithm: {self.algorithm}
                Top K: {self.top_k}
                Log details: {"YES" if self.log_details else "NO"}
            """


def parse_bool(key: str, val: str) -> bool:
    """Parse given values into boolean ones (True or False).

    Args:
        key (str): The key to parse the boolean for.
        val (str): The value to be parsed to boolean.

    Raises:
        ConfigBoolParsingError: If an error occured
        while parsing the value to boolean.

    Returns:
        bool: True or False depending on the output of the parser.

    """
    if val.strip().lower() in {"true", "1", "yes"}:
        return True
    if val.strip().lower() in {"false", "0", "no"}:
        return False

    raise ConfigBoolParsingError(
        f"Invalid boolean value for key '{key}' in the configuration file. "
        "Expected 'true', 'false', '1', '0', 'yes', or 'no' "
        "(case-insensitive).",
    )


def parse_algorithm(val: str) -> str:
    """Validate the name of the algorithm to run.

    Args:
        val (str): The algorithm name.

    Raises:
        ConfigValueError: If the name is not a known algorithm.

    Returns:
        str: The normalized algorithm name.

    """
    algorithm = val.strip().lower()
    if algorithm not in ALGORITHM_CHOICES:
        raise ConfigValueError(
            f"Invalid algorithm '{val}'. "
            f"Expected one of: {', '.join(ALGORITHM_CHOICES)}.",
        )
    return algorithm


def parse_top_k(val: str) -> int:
    """Parse the number of longest words to report.

    Args:
        val (str): The value to be parsed.

    Raises:
        ConfigValueError: If the value is not a positive integer.

    Returns:
        int: The parsed number.

    """
    try:
        top_k = int(val)
    except ValueError as e:
        raise ConfigValueError(
            f"Invalid value for 'top_k': '{val}' is not an integer.",
        ) from e

    if top_k < 1:
        raise ConfigValueError(
            f"Invalid value for 'top_k': expected a positive integer, "
            f"got {top_k}.",
        )
    return top_k


def load_config_file(config_file_path: Path) -> FinderConfig:
    """Load and parse the configuration file.

    Args:
        config_file_path (Path): Path to the config file.

    Raises:
        ConfigNotFoundError: If the word file path is missing.
        ConfigBoolParsingError: If a boolean setting is invalid.
        ConfigValueError: If the algorithm or top_k setting is invalid.
        FileNotFoundError: If the config file does not exist.

    Returns:
        FinderConfig: Parsed config object.

    """
    if not config_file_path.exists():
        raise FileNotFoundError(
            f"Missing required configuration file: '{config_file_path}'. "
            "Please ensure the file exists and the path is correct.",
        )

    words_path: Optional[Path] = None
    algorithm = DEFAULT_ALGORITHM
    top_k = DEFAULT_TOP_K
    log_details = False

    # Open and read the configuration file line by line
    with config_file_path.open("r", encoding="utf-8") as file:
        for line in file:
            line = line.strip()

            # Skip blank lines and comments
            if not line or line.startswith("#"):
                continue

            # Split the line into key and value
            key, sep, value = line.partition("=")
            if sep != "=":
                continue

            key = key.strip().lower()
            value = value.strip()

            # Parse and assign configuration values based on key
            if key == "wordspath":
                words_path = Path(value)
            elif key == "algorithm":
                algorithm = parse_algorithm(value)
            elif key == "top_k":
                top_k = parse_top_k(value)
            elif key == "log_details":
                log_details = parse_bool("log_details", value)

    if words_path is None:
        raise ConfigNotFoundError(
            "Missing required configuration: 'wordspath'. "
            "Please ensure the config file includes a valid line for "
            "'wordspath'.",
        )

    # Return a FinderConfig object with the parsed values
    return FinderConfig(
        cast("Path", words_path),
        algorithm,
        top_k,
        log_details,
    )
