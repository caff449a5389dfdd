"""``wren run`` — start the server."""

import argparse
import logging

from wren.cli._app import build_app


def run_server(args: argparse.Namespace) -> None:
    """Configure logging from the app config, then serve until interrupted."""
    app = build_app(args)

    logging.basicConfig(
        level=app.config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print(f"wren serving {app.base_dir} at http://{app.config.host}:{app.config.port}")
    app.run(reload=args.reload)
