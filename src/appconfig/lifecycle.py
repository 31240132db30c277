"""Lifecycle Management: startup configuration loading and serving for appconfig."""

from __future__ import annotations

import sys
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

import uvicorn

from appconfig.config.env_file import read_environment
from appconfig.config.loader import load_config
from appconfig.config.service import ConfigService
from appconfig.config.settings import RuntimeSettings, load_runtime_settings
from appconfig.core.exceptions import ConfigurationError
from appconfig.core.structured_logger import configure_logging, get_logger
from appconfig.web.server import create_app

logger = get_logger("Lifecycle")


@dataclass(frozen=True)
class RuntimeContext:
    """Everything initialised at startup, handed to the serving layer."""

    settings: RuntimeSettings
    config: ConfigService


class Runtime:
    """Runtime orchestrator: one-shot configuration bootstrap, then serving."""

    def __init__(
        self,
        env_file: str | Path | None = None,
        environ: Mapping[str, str] | None = None,
        settings: RuntimeSettings | None = None,
    ):
        self.env_file = env_file
        self.environ = environ
        self.settings = settings
        self.context: RuntimeContext | None = None

    def bootstrap(self) -> RuntimeContext:
        """
        Load and validate configuration exactly once.

        Raises:
            ConfigurationError: If the environment does not satisfy the schema.
                Not handled here; the caller must abort startup.
        """
        if self.context is not None:
            logger.warning("Runtime already initialized")
            return self.context

        settings = self.settings or load_runtime_settings()
        env_file = self.env_file if self.env_file is not None else settings.env_file

        logger.info("Loading configuration", env_file=str(env_file))
        raw = read_environment(env_file, self.environ)
        service = ConfigService(load_config(raw))

        view = service.redacted()
        logger.debug(
            "Configuration loaded",
            environment=view["env"],
            port=view["port"],
            database=view["database"],
        )

        self.context = RuntimeContext(settings=settings, config=service)
        logger.info("Runtime bootstrap completed", environment=view["env"], port=view["port"])
        return self.context

    def serve(self) -> None:
        """Bootstrap if needed, then serve the app on the configured port."""
        context = self.bootstrap()
        app = create_app(context.config)
        uvicorn.run(
            app,
            host=context.settings.host,
            port=context.config.get("port"),
            log_level=context.settings.log_level.lower(),
        )


def bootstrap(
    env_file: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> RuntimeContext:
    """Load configuration once and return the runtime context."""
    return Runtime(env_file=env_file, environ=environ).bootstrap()


def run(env_file: str | Path | None = None, host: str | None = None) -> None:
    """Process entry point: abort with exit status 1 on invalid configuration."""
    try:
        settings = load_runtime_settings()
    except ConfigurationError as e:
        configure_logging()
        logger.critical("Invalid runtime settings", error=e.to_dict())
        sys.exit(1)

    configure_logging(settings.log_level, settings.log_format)
    if host is not None:
        settings = settings.model_copy(update={"host": host})

    runtime = Runtime(env_file=env_file, settings=settings)
    try:
        runtime.bootstrap()
    except ConfigurationError as e:
        logger.critical("Refusing to start: configuration is invalid", error=e.to_dict())
        sys.exit(1)

    runtime.serve()
