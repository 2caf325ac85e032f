"""Catalog service configuration."""

import dataclasses
import logging.config
import os
from pathlib import Path

import dotenv
from singleton import Singleton

dotenv.load_dotenv()


@dataclasses.dataclass
class Settings(metaclass=Singleton):
    """Service config settings."""

    project_name: str = os.getenv("PROJECT_NAME", "mentor-catalog")
    base_dir: Path = Path(__file__).resolve().parent.parent
    debug: bool = os.getenv("DEBUG", default="false").lower() == "true"

    surrealdb_uri: str = os.getenv("SURREALDB_URI", "ws://surrealdb:8000/rpc")
    surrealdb_username: str = os.getenv("SURREALDB_USERNAME", "root")
    surrealdb_password: str = os.getenv("SURREALDB_PASSWORD", "root")
    surrealdb_namespace: str = os.getenv("SURREALDB_NAMESPACE", "catalog")
    surrealdb_database: str = os.getenv("SURREALDB_DATABASE", "default")

    page_max_limit: int = int(os.getenv("PAGE_MAX_LIMIT", default=100)) or 100
    search_default_limit: int = int(os.getenv("SEARCH_DEFAULT_LIMIT", default=20))
    slow_query_seconds: float = float(os.getenv("SLOW_QUERY_SECONDS", default=1.0))

    log_dir: Path = Path(os.getenv("LOG_DIR", str(base_dir / "logs")))

    @classmethod
    def get_log_config(cls, console_level: str = "INFO", **kwargs: object) -> dict:
        """
        Get the log configuration.

        Args:
            console_level: The level of the console log.
            **kwargs: Additional keyword arguments.

        """
        log_config = {
            "formatters": {
                "standard": {
                    "format": (
                        "[{levelname} {name} : {filename}:{lineno} : {asctime} "
                        "-> {funcName:10}] {message}"
                    ),
                    "style": "{",
                }
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": console_level,
                    "formatter": "standard",
                },
                "file": {
                    "class": "logging.FileHandler",
                    "level": "INFO",
                    "formatter": "standard",
                    "filename": str(cls.log_dir / "app.log"),
                },
            },
            "loggers": {
                "": {
                    "handlers": [
                        "console",
                        "file",
                    ],
                    "level": console_level,
                    "propagate": True,
                },
            },
            "version": 1,
        }
        return log_config

    @classmethod
    def config_logger(cls) -> None:
        """Configure the logger."""

        log_config = cls.get_log_config(
            console_level="DEBUG" if cls.debug else "INFO"
        )

        if log_config["handlers"].get("file"):
            cls.log_dir.mkdir(parents=True, exist_ok=True)

        logging.config.dictConfig(log_config)
