"""Build an App from CLI arguments and the environment."""

import argparse
import sys

from wren.app import App
from wren.config import AppConfig
from wren.errors import ConfigurationError


def build_app(args: argparse.Namespace) -> App:
    """Create the App, exiting with status 1 on configuration errors."""
    try:
        config = AppConfig.from_env(
            host=getattr(args, "host", None),
            port=getattr(args, "port", None),
        )
        return App(config, base_dir=args.root)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
