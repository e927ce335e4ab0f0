"""Application configuration.

Settings come from dataclass defaults, then environment variables
(``AppConfig.from_env``), then command-line flags applied by the entry point.
"""

from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple
import logging
import os
import re

#: Pack sizes configured when nothing else is supplied
DEFAULT_PACK_SIZES: Tuple[int, ...] = (250, 500, 1000, 2000, 5000)

VALID_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def parse_pack_sizes(text: str) -> Tuple[int, ...]:
    """
    Parse a comma or whitespace separated list of pack sizes.

    Args:
        text: Input such as ``"250, 500,1000"``

    Returns:
        Parsed sizes in input order

    Raises:
        ValueError: If a token is not an integer
    """
    tokens = [token for token in re.split(r"[,\s]+", text.strip()) if token]
    try:
        return tuple(int(token) for token in tokens)
    except ValueError as e:
        raise ValueError(f"Invalid pack size list '{text}': {e}") from e


@dataclass
class AppConfig:
    """Configuration for the pack calculator service.

    Attributes:
        host: Interface the HTTP server binds to
        port: TCP port of the HTTP server
        log_level: Root logging level name
        default_pack_sizes: Pack sizes the repository starts with
    """
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"
    default_pack_sizes: Tuple[int, ...] = field(default=DEFAULT_PACK_SIZES)

    def __post_init__(self):
        """Validate configuration."""
        self.log_level = self.log_level.upper()
        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(VALID_LOG_LEVELS)}, got '{self.log_level}'"
            )
        if not (0 < self.port < 65536):
            raise ValueError(f"port must be between 1 and 65535, got {self.port}")

        self.default_pack_sizes = tuple(self.default_pack_sizes)
        invalid = [size for size in self.default_pack_sizes if size <= 0]
        if invalid:
            raise ValueError(f"default_pack_sizes must be positive, got {invalid}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppConfig":
        """Build configuration from environment variables.

        Recognised variables: ``HOST``, ``PORT``, ``LOG_LEVEL``, ``PACK_SIZES``.

        Args:
            environ: Mapping to read from (default: ``os.environ``)

        Returns:
            AppConfig with environment overrides applied
        """
        if environ is None:
            environ = os.environ

        kwargs = {}
        if environ.get("HOST"):
            kwargs["host"] = environ["HOST"]
        if environ.get("PORT"):
            try:
                kwargs["port"] = int(environ["PORT"])
            except ValueError as e:
                raise ValueError(f"PORT must be an integer, got '{environ['PORT']}'") from e
        if environ.get("LOG_LEVEL"):
            kwargs["log_level"] = environ["LOG_LEVEL"]
        if environ.get("PACK_SIZES"):
            kwargs["default_pack_sizes"] = parse_pack_sizes(environ["PACK_SIZES"])

        return cls(**kwargs)


def configure_logging(level: str = "INFO") -> None:
    """Install a root handler at the given level."""
    logging.basicConfig(level=getattr(logging, level.upper()), format=LOG_FORMAT)
