"""
DeckViewer: Flashcard Deck Renderer
-----------------------------------

Renders decks described by a manifest into standalone HTML pages.
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from deckviewer.config import Config
from deckviewer.deck import DeckRenderStatus, DeckSession
from deckviewer.errors import FetchError
from deckviewer.fetchers import create_fetcher
from deckviewer.models import DeckNode, RenderMode, load_manifest
from deckviewer.utils import deck_output_name, ensure_dir, setup_logger

logger = logging.getLogger("deckviewer.cli")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Render flashcard decks to HTML pages.",
        epilog=(
            "Decks share one page session, so each page also carries the "
            "stylesheets and libraries of decks rendered before it."
        ),
    )
    parser.add_argument("--source", default=Config.SOURCE, help="Deck directory or base URL")
    parser.add_argument("--manifest", default=Config.MANIFEST_FILE, help="Manifest path relative to the source")
    parser.add_argument("--mode", choices=[m.value for m in RenderMode], default=Config.RENDER_MODE)
    parser.add_argument(
        "--deck",
        action="append",
        default=[],
        help="Deck to render, by name path (e.g. IoT/01). Repeatable. Defaults to every deck.",
    )
    parser.add_argument("--output", default=Config.OUTPUT_DIR, help="Directory for rendered pages")
    parser.add_argument("--log-level", default=Config.LOG_LEVEL)
    return parser.parse_args(argv)


def select_nodes(manifest: DeckNode, wanted: List[str]) -> List[DeckNode]:
    """Resolve requested deck paths; every deck when none are requested."""
    if not wanted:
        return list(manifest.walk())
    nodes = []
    for path in wanted:
        node = manifest.find(path)
        if node is None:
            logger.error("Deck '%s' not found in manifest", path)
            continue
        nodes.append(node)
    return nodes


async def main(argv: Optional[List[str]] = None) -> bool:
    """Main entry point."""
    args = parse_args(argv)
    setup_logger("deckviewer", args.log_level)

    fetcher = create_fetcher(args.source)
    async with fetcher:
        try:
            manifest = load_manifest(await fetcher.fetch(args.manifest))
        except (FetchError, ValueError) as e:
            logger.error("Cannot load manifest %s: %s", args.manifest, e)
            return False

        nodes = select_nodes(manifest, args.deck)
        if not nodes:
            return False

        session = DeckSession(fetcher, manifest, render_mode=args.mode)
        await session.init()

        ensure_dir(args.output)
        success = len(nodes) == len(args.deck) or not args.deck
        for node in nodes:
            result = await session.select_deck(node)
            output_file = Path(args.output) / deck_output_name(node.path)
            output_file.write_text(session.render_page(), encoding="utf-8")
            logger.info("[%s] %s -> %s (%d cards)", result.status.value, node.path, output_file, result.card_count)
            if result.status is DeckRenderStatus.FAILED:
                success = False
        return success


def cli() -> None:
    """Console script entry point."""
    try:
        ok = asyncio.run(main())
        sys.exit(0 if ok else 1)
    except KeyboardInterrupt:
        print("\n[!] Aborted by user.")
        sys.exit(1)


if __name__ == "__main__":
    cli()
