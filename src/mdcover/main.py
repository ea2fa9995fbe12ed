"""
mdcover - MiniDisc cover creator backend
Main entry point: reads PORT, binds, and serves until killed.
"""

import os
import sys

from rich.console import Console
from werkzeug.serving import make_server

from .clients.musicbrainz import MusicBrainzClient
from .core import setup_logging
from .core.config import ServerConfig, as_dict
from .core.exceptions import ConfigurationError
from .core.validation import validate_and_raise
from .web.app import create_app

logger = setup_logging()
console = Console()


def main():
    """Main entry point."""
    logger.debug("Starting mdcover server")
    try:
        validate_and_raise(os.environ.get("PORT"))
        server_config = ServerConfig.from_env()
    except ConfigurationError as e:
        logger.critical(str(e))
        sys.exit(1)
    
    client = MusicBrainzClient()
    logger.debug(f"MusicBrainz config: {as_dict(client.config)}")
    app = create_app(client=client, static_dir=server_config.static_dir)
    
    console.print(f"Server starting on port {server_config.port}...")
    try:
        server = make_server(server_config.host, server_config.port, app, threaded=True)
    except (OSError, SystemExit) as e:
        # werkzeug exits on its own when the bind fails
        logger.critical(f"Cannot listen on {server_config.host}:{server_config.port}: {e}")
        sys.exit(1)
    
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.debug("Server interrupted by user")
    finally:
        server.server_close()
        logger.debug("Server shutting down")


if __name__ == "__main__":
    main()
