"""Logging configuration for the survey core.

To use this logging configuration, set the environment variable
SURVEY_CORE_LOG_CFG to the path of the logging configuration file.
The repo has a sample configuration file in the root directory.

"""

import logging
import logging.config
import os
from pathlib import Path

import tomli


def setup_logging():
    cfg_path = (
        os.getenv("SURVEY_CORE_LOG_CFG")
        or Path(__file__).parent.parent / "logging_config.toml"
    )

    cfg_path = Path(cfg_path)

    if not cfg_path.exists():
        core_logger = logging.getLogger("survey_core")
        for handler in core_logger.handlers[:]:
            core_logger.removeHandler(handler)
        core_logger.addHandler(logging.NullHandler())
        return

    if not cfg_path.is_file():
        raise FileNotFoundError(f"Logging config not found at {cfg_path}")

    with cfg_path.open("rb") as f:
        cfg = tomli.load(f)

    logging.config.dictConfig(cfg)
