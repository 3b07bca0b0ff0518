"""
Bulk ingestion of text files into the chunk store.

Usage:
    python -m ragchat.scripts.ingest_files ./docs
    python -m ragchat.scripts.ingest_files ./docs --pattern "*.md" --pattern "*.txt"

Purpose:
- Walk a directory for text documents
- Ingest each file through the same pipeline as POST /rag/ingest
- Use the file path relative to the directory as the chunk source

Dependencies: ragchat.api.deps, ragchat.configs
System role: Operator helper for seeding the knowledge base
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from ragchat.api.deps import ServiceCache
from ragchat.configs import Settings, get_settings
from ragchat.core.exceptions import RagChatException
from ragchat.observability.correlation import set_correlation_id
from ragchat.observability.logger import configure_logging

logger = logging.getLogger(__name__)

DEFAULT_PATTERNS = ("*.md", "*.txt")


class DirectoryIngester:
    """Ingest every matching file under a directory."""

    def __init__(self, root: Path, patterns: tuple[str, ...] = DEFAULT_PATTERNS):
        """
        Initialize ingester.

        Args:
            root: Directory to scan recursively
            patterns: Glob patterns selecting files to ingest
        """
        if not root.is_dir():
            raise FileNotFoundError(f"Directory not found: {root}")
        self.root = root
        self.patterns = patterns

    def discover(self) -> list[Path]:
        """Return matching files in a stable order."""
        files: set[Path] = set()
        for pattern in self.patterns:
            files.update(path for path in self.root.rglob(pattern) if path.is_file())
        return sorted(files)

    async def run(self, settings: Settings) -> tuple[int, int]:
        """
        Ingest all discovered files.

        A failing file is logged and skipped; the remaining files are still ingested.

        Returns:
            tuple[int, int]: (files ingested, chunks stored)
        """
        services = ServiceCache(settings)
        await services.startup()
        ingested = 0
        total_chunks = 0
        try:
            for path in self.discover():
                source = path.relative_to(self.root).as_posix()
                request_id = set_correlation_id()
                text = path.read_text(encoding="utf-8")
                try:
                    chunks = await services.ingest_service.ingest(source, text, request_id)
                except RagChatException as e:
                    logger.error(f"Failed to ingest {source}: {e.code} {e.message}")
                    continue
                ingested += 1
                total_chunks += chunks
                logger.info(f"Ingested {source}: {chunks} chunks")
        finally:
            await services.aclose()
        return ingested, total_chunks


def main():
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Ingest text files into the RAG chunk store")
    parser.add_argument("directory", type=Path, help="Directory containing documents")
    parser.add_argument(
        "--pattern",
        action="append",
        dest="patterns",
        help="Glob pattern to include (repeatable, default: *.md and *.txt)",
    )
    args = parser.parse_args()

    settings = get_settings()
    configure_logging(settings.log_level)

    try:
        ingester = DirectoryIngester(args.directory, tuple(args.patterns or DEFAULT_PATTERNS))
        files, chunks = asyncio.run(ingester.run(settings))
    except Exception as e:
        logger.error(f"Error: {e}")
        sys.exit(1)

    logger.info(f"Done: {files} files, {chunks} chunks")
    sys.exit(0)


if __name__ == "__main__":
    main()
