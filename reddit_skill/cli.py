"""Command-line interface for the Reddit voice skill."""

import asyncio
import logging
import logging.config
import sys
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from reddit_skill.config import Config
from reddit_skill.exceptions import RedditAPIError
from reddit_skill.formatter import strip_markup
from reddit_skill.monitoring.metrics import PrometheusExporter
from reddit_skill.resolver import UnsupportedTopicError, category_for, get_subreddit
from reddit_skill.skill.reddit_skill import RedditSkill

app = typer.Typer(help="Reddit voice skill - read subreddit posts out loud")

logger = logging.getLogger(__name__)


def setup_logging(log_level: str = "INFO") -> None:
    """
    Set up logging configuration.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    log_dir = Path("logs")
    log_dir.mkdir(exist_ok=True)

    log_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": log_level,
                "formatter": "standard",
                "stream": "ext://sys.stderr",
            },
            "file": {
                "class": "logging.handlers.RotatingFileHandler",
                "level": log_level,
                "formatter": "standard",
                "filename": "logs/reddit_skill.log",
                "maxBytes": 10485760,  # 10 MB
                "backupCount": 5,
                "encoding": "utf8",
            },
        },
        "loggers": {
            "": {
                "handlers": ["console", "file"],
                "level": log_level,
                "propagate": True
            },
            "asyncio": {
                "level": "WARNING",
            },
            "aiohttp": {
                "level": "WARNING",
            },
            "uvicorn.access": {
                "level": "WARNING",
            },
        }
    }

    logging.config.dictConfig(log_config)


def load_config(config_path: str) -> Config:
    """Load and validate configuration, exiting on errors."""
    config = Config.from_files(config_path)
    validation_errors = config.validate()

    if validation_errors:
        for error in validation_errors:
            logger.error(f"Configuration error: {error}")
        logger.critical("Invalid configuration, aborting")
        sys.exit(1)

    return config


@app.command()
def resolve(
    topic: Annotated[str, typer.Argument(help="Spoken topic, e.g. 'world news'")],
) -> None:
    """Print the subreddit path and category for a topic."""
    typer.echo(get_subreddit(topic))
    typer.echo(f"category: {category_for(topic)}")


@app.command()
def ask(
    topic: Annotated[str, typer.Argument(help="Spoken topic, e.g. 'world news'")],
    list_type: Annotated[Optional[str], typer.Option("--list-type", help="List type slot (top, new, hot)")] = None,
    config_path: Annotated[str, typer.Option("--config", "-c", help="Path to config file")] = "config.yaml",
    plain: Annotated[bool, typer.Option("--plain", help="Print plain text instead of SSML")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable verbose logging")] = False,
) -> None:
    """Fetch a topic from Reddit once and print what the skill would say."""
    config = load_config(config_path)
    setup_logging("DEBUG" if verbose else config.log_level)

    if list_type:
        logger.info(f"List type '{list_type}' is not applied to the request")

    skill = RedditSkill(config)
    try:
        speech = asyncio.run(skill.read_topic(topic))
    except UnsupportedTopicError as e:
        typer.echo(f"Unsupported topic: {e.topic!r}", err=True)
        raise typer.Exit(code=1)
    except RedditAPIError as e:
        typer.echo(f"Reddit request failed: {e.message}", err=True)
        raise typer.Exit(code=1)

    typer.echo(strip_markup(speech) if plain else speech)


@app.command()
def serve(
    host: Annotated[Optional[str], typer.Option("--host", help="Interface to bind")] = None,
    port: Annotated[Optional[int], typer.Option("--port", help="Port to listen on")] = None,
    config_path: Annotated[str, typer.Option("--config", "-c", help="Path to config file")] = "config.yaml",
) -> None:
    """Run the skill webhook server."""
    import uvicorn

    from reddit_skill.api.main import create_app

    config = load_config(config_path)
    setup_logging(config.log_level)

    exporter = None
    if config.monitoring.enable_prometheus:
        exporter = PrometheusExporter(config.monitoring.prometheus_port)
        exporter.start_server()

    bind_host = host or config.api.host
    bind_port = port or config.api.port
    logger.info(f"Serving skill on {bind_host}:{bind_port}")
    uvicorn.run(create_app(config, exporter=exporter), host=bind_host, port=bind_port, log_config=None)


if __name__ == "__main__":
    app()
