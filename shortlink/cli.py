"""
Command-line interface for the short link service.

Usage:
    shortlink init-db
    shortlink shorten <url>
    shortlink resolve <identifier>
    shortlink info <identifier>
    shortlink health
"""

import argparse
import asyncio
import json
import sys
from typing import List, Optional

from config import Config
from .common.logging_config import setup_logging
from .common.url_builder import build_short_url
from .errors import ShortLinkError
from .service import ShortLinkService


class ShortLinkCLI:
    """Command-line interface for the short link service."""

    def __init__(self, config: Config, verbose: bool = False):
        """Initialize CLI."""
        self.config = config
        self.logger = setup_logging(level="DEBUG" if verbose else "WARNING")
        self.service: Optional[ShortLinkService] = None

    async def initialize(self):
        """Initialize store and service."""
        self.service = ShortLinkService.from_config(self.config, self.logger)

    async def cleanup(self):
        """Cleanup resources."""
        if self.service:
            await self.service.close()

    def _print(self, payload: dict, error: bool = False) -> int:
        print(json.dumps(payload, indent=2), file=sys.stderr if error else sys.stdout)
        return 1 if error else 0

    async def init_db(self) -> int:
        """Create the links table."""
        await self.service.store.ensure_schema()
        return self._print({"success": True, "message": "Schema is ready"})

    async def shorten(self, url: str) -> int:
        """Shorten a URL."""
        link = await self.service.shorten(url)
        return self._print({
            "success": True,
            "identifier": link.identifier,
            "url": build_short_url(link.identifier, self.config.base_url),
            "long_url": link.long_url,
            "clicks": link.clicks,
        })

    async def resolve(self, identifier: str) -> int:
        """Resolve an identifier, counting a click like a redirect does."""
        long_url = await self.service.resolve(identifier)
        return self._print({
            "success": True,
            "identifier": identifier,
            "long_url": long_url,
        })

    async def info(self, identifier: str) -> int:
        """Show a link without counting a click."""
        link = await self.service.get_link(identifier)
        if link is None:
            return self._print(
                {"success": False, "error": f"Short link '{identifier}' not found"},
                error=True,
            )
        return self._print({"success": True, **link.to_dict()})

    async def health(self) -> int:
        """Check store health."""
        health_status = await self.service.health_check()
        self._print({"success": True, "health": health_status})
        return 0 if health_status["overall"] else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shortlink",
        description="Shortlink CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Create the links table
  %(prog)s init-db

  # Shorten a URL
  %(prog)s shorten https://example.com/long/url

  # Resolve an identifier (counts a click)
  %(prog)s resolve aZ3kQ9

  # Show a link and its click count
  %(prog)s info aZ3kQ9
        """
    )

    parser.add_argument(
        "--db-url",
        default=None,
        help="Database URL (default: from DATABASE_URL env)"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    subparsers.add_parser("init-db", help="Create the links table")

    shorten_parser = subparsers.add_parser("shorten", help="Shorten a URL")
    shorten_parser.add_argument("url", help="URL to shorten")

    resolve_parser = subparsers.add_parser("resolve", help="Resolve an identifier")
    resolve_parser.add_argument("identifier", help="Identifier to resolve")

    info_parser = subparsers.add_parser("info", help="Show link information")
    info_parser.add_argument("identifier", help="Identifier to look up")

    subparsers.add_parser("health", help="Check store health")

    return parser


async def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    overrides = {"database_url": args.db_url} if args.db_url else {}
    cli = ShortLinkCLI(Config(**overrides), verbose=args.verbose)

    commands = {
        "init-db": lambda: cli.init_db(),
        "shorten": lambda: cli.shorten(args.url),
        "resolve": lambda: cli.resolve(args.identifier),
        "info": lambda: cli.info(args.identifier),
        "health": lambda: cli.health(),
    }

    try:
        await cli.initialize()
        return await commands[args.command]()
    except ShortLinkError as e:
        return cli._print({"success": False, "error": str(e)}, error=True)
    finally:
        await cli.cleanup()


def run():
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
