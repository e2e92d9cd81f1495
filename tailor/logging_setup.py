# tailor/logging_setup.py
import logging


def setup_logging(level: str = "WARNING", fmt: str = "%(message)s") -> None:
    """Configure root logging for scripts and the dashboard"""
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")

    logging.basicConfig(level=numeric_level, format=fmt)
