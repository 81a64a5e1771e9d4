from argparse import ArgumentTypeError
from logging.config import dictConfig
from pathlib import Path
from typing import Optional

STDIN = "-"


def input_path(arg: str) -> Optional[Path]:
    if arg == STDIN:
        return None
    path = Path(arg)
    if not path.exists():
        raise ArgumentTypeError(f"'{arg}' does not exist")
    return path.resolve()


def dir_path(arg: str) -> Path:
    return Path(arg).resolve()


def configure_logging(verbose: bool = False) -> None:
    level = "WARNING" if verbose else "ERROR"
    dictConfig(
        {
            "version": 1,
            "formatters": {
                "simple": {"format": "%(levelname)-8s - %(message)s"},
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": "DEBUG",
                    "formatter": "simple",
                    "stream": "ext://sys.stderr",
                },
            },
            "loggers": {
                "unmtk": {
                    "level": level,
                    "handlers": ["console"],
                    "propagate": False,
                },
            },
            "disable_existing_loggers": False,
        }
    )
