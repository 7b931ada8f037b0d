"""Run the link shortener HTTP service

Usage:
    python -m linkshortener [--env ENV] [--host HOST] [--port PORT]
"""

import argparse
import logging

from linkshortener.store import LinkStore
from linkshortener.router import RequestRouter
from linkshortener.server import create_app
from linkshortener.utils import initialize_logging, load_config, build_dao


logger = logging.getLogger('linkshortener')


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog='linkshortener', description='Map short codes to destination URLs and redirect to them.')
    parser.add_argument('--env', default=None, help='Configuration environment (defaults to APP_ENV or "local").')
    parser.add_argument('--host', default=None, help='Interface to listen on (overrides configuration).')
    parser.add_argument('--port', type=int, default=None, help='Port to listen on (overrides PORT and configuration).')
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    initialize_logging()

    config = load_config(args.env)
    host = args.host or config['server']['host']
    port = args.port or config['server']['port']

    store = LinkStore(build_dao(config))
    app = create_app(RequestRouter(store))

    logger.info('Server running on http://%s:%s', host, port, extra={'backend': config['active_backend']})
    app.run(host=host, port=port, threaded=True)


if __name__ == '__main__':
    main()
