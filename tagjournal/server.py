"""Journal server — entry point: config, logging, tag index build, then serve."""

import argparse
import dataclasses
import logging
import os
import sys

from flask import Flask

from tagjournal.config import Config, load_config, load_yaml_config
from tagjournal.index import TagIndex
from tagjournal.store import LogStore
from tagjournal.web import create_app

logger = logging.getLogger(__name__)


def build_cli_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Personal journaling web service")
    parser.add_argument("--config", default=os.environ.get("CONFIG_PATH"),
                        help="Path to a YAML config file (default: $CONFIG_PATH)")
    parser.add_argument("--host", help="Bind address")
    parser.add_argument("--port", type=int, help="Bind port")
    parser.add_argument("--log-dir", help="Directory holding the monthly log files")
    parser.add_argument("--debug", action="store_true", default=None,
                        help="Enable the in-browser debug console")
    return parser


def resolve_config(args) -> Config:
    """YAML and environment first, then explicit command-line flags on top."""
    config = load_config(load_yaml_config(args.config))
    overrides = {
        "host": args.host,
        "port": args.port,
        "log_dir": args.log_dir,
        "debug": args.debug,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if overrides:
        config = dataclasses.replace(config, **overrides)
    return config


def build_app(config: Config) -> Flask:
    """Wire the store, the tag index and the Flask app.

    Raises OSError when the log directory cannot be read: the tag index has
    to be seeded before any request is served.
    """
    store = LogStore(config.log_dir, create=config.create_log_dir)
    index = TagIndex.build_from_store(store)
    logger.info("Loaded %d tag(s) from %s", len(index), config.log_dir)
    return create_app(store, index, config)


def main(argv=None):
    args = build_cli_parser().parse_args(argv)
    config = resolve_config(args)

    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s [journal] %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    try:
        app = build_app(config)
    except OSError as exc:
        logger.critical("Error while loading tags from %s: %s", config.log_dir, exc)
        sys.exit(1)

    logger.info("Starting server at %s:%d", config.host, config.port)
    app.run(host=config.host, port=config.port, threaded=True, use_reloader=False)


if __name__ == "__main__":
    main()
