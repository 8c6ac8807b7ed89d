# chess_scripts/manage.py
"""CLI management interface: analyze an image, configure keys, run the server."""

from __future__ import annotations
import argparse
import asyncio
import logging

from chess_pgn import config
from chess_pgn.board import board_diagram
from chess_pgn.errors import MANUAL_COPY_HINT
from chess_pgn.lichess import open_analysis
from chess_pgn.navigators import BrowserNavigator, Navigator
from chess_reader import (
    AnalysisResult,
    JsonFileStore,
    ProviderConfig,
    PROVIDERS,
    analyze_chess_image,
)
from .api_key import setup_api_key
from .common import print_header, start_server

log = logging.getLogger("chess_scripts.manage")

BANNER = """
+----------------------------------------------------------+
|          Chessboard Image Analyzer                       |
|  Reads a chess position from an image and opens it       |
|  on the analysis board                                   |
+----------------------------------------------------------+
"""


def print_result(result: AnalysisResult) -> None:
    if not result.success:
        print_header("Analysis Failed")
        print(f"[{result.error_kind.value}] {result.error}")
        return

    print_header(f"Position ({result.provider})")
    if result.fen:
        print(f"FEN: {result.fen}\n")
        if result.warning:
            print(f"Warning: {result.warning}\n")
        else:
            print(board_diagram(result.fen) + "\n")
    print(result.pgn)


async def analyze_and_open(
    image: str,
    provider_config: ProviderConfig | None = None,
    preferred: str | None = None,
    navigator: Navigator | None = None,
) -> int:
    result = await analyze_chess_image(
        image,
        provider_config,
        store=JsonFileStore(config.CONFIG_STORE_PATH),
        preferred=preferred,
    )
    print_result(result)
    if not result.success:
        return 1
    if navigator is None:
        return 0

    try:
        link = await open_analysis(result.pgn, navigator)
    except Exception as e:
        log.warning(f"Opening analysis failed: {e}")
        print(f"\n{MANUAL_COPY_HINT}\n\n{result.pgn}")
        return 2

    print(f"\nOpened: {link.url}")
    return 0


def cmd_analyze(args) -> int:
    """Analyze one image and open it on the analysis site."""
    provider_config = None
    if args.api_key:
        provider_config = ProviderConfig(provider=args.provider or "openai", api_key=args.api_key)
    navigator = None if args.no_open else BrowserNavigator()
    return asyncio.run(analyze_and_open(args.image, provider_config, args.provider, navigator))


def cmd_env(args) -> int:
    """Setup API key only."""
    ok = setup_api_key(args.provider, interactive=not args.no_prompt, remember=args.remember)
    print("API key loaded:", "OK" if ok else "NOT FOUND")
    return 0 if ok else 1


def cmd_server(args) -> int:
    """Start server only."""
    return start_server(host=args.host, port=args.port, reload=args.reload)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Chessboard image analyzer")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("analyze", help="Read the position from an image")
    p.add_argument("image", help="Image file, base64 text or data URL")
    p.add_argument("--provider", choices=sorted(PROVIDERS), default=None)
    p.add_argument("--api-key", default="", help="Credential; defaults to settings/.env")
    p.add_argument("--no-open", action="store_true", help="Print the result only")
    p.set_defaults(func=cmd_analyze)

    p = sub.add_parser("env", help="Configure a provider API key")
    p.add_argument("--provider", choices=sorted(PROVIDERS), default="openai")
    p.add_argument("--no-prompt", action="store_true",
                   help="Don't prompt for API key; only read env/.env")
    p.add_argument("--remember", action="store_true",
                   help="Also store provider + key in the local settings file")
    p.set_defaults(func=cmd_env)

    p = sub.add_parser("server", help="Start the HTTP API")
    p.add_argument("--host", default="0.0.0.0")
    p.add_argument("--port", type=int, default=8000)
    p.add_argument("--reload", action="store_true")
    p.set_defaults(func=cmd_server)

    return parser


def main(argv=None) -> int:
    """CLI entry point."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] [%(name)s] %(message)s")
    print(BANNER)
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
