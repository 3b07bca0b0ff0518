"""
Paragraph-aware text chunker with sliding-window fallback.

Splits raw document text on blank lines, then windows any paragraph longer
than the configured maximum with a fixed overlap between windows.

Dependencies: ragchat.core.exceptions
System role: First stage of the ingestion pipeline
"""

import re

from ragchat.core.exceptions import InvalidConfigurationError

_PARAGRAPH_BREAK = re.compile(r"\n[ \t]*\n(?:[ \t]*\n)*")


class TextChunker:
    """Split text into bounded, possibly overlapping chunks."""

    def __init__(self, max_chars: int = 800, overlap_chars: int = 120) -> None:
        """
        Initialize chunker with window configuration.

        Args:
            max_chars: Maximum characters per chunk
            overlap_chars: Characters repeated at the start of the next window

        Raises:
            InvalidConfigurationError: If the window cannot advance
        """
        if max_chars <= 0 or overlap_chars < 0 or max_chars <= overlap_chars:
            raise InvalidConfigurationError(
                "Chunk max length must be positive and larger than the overlap",
                details={"max_chars": max_chars, "overlap_chars": overlap_chars},
            )
        self.max_chars = max_chars
        self.overlap_chars = overlap_chars

    def chunk(self, text: str) -> list[str]:
        """
        Chunk document text.

        Args:
            text: Raw document text

        Returns:
            list[str]: Non-empty chunks in document order
        """
        normalized = text.replace("\r\n", "\n").replace("\r", "\n")
        chunks: list[str] = []
        for paragraph in _PARAGRAPH_BREAK.split(normalized):
            paragraph = paragraph.strip()
            if not paragraph:
                continue
            if len(paragraph) <= self.max_chars:
                chunks.append(paragraph)
            else:
                chunks.extend(self._window(paragraph))
        return chunks

    def _window(self, segment: str) -> list[str]:
        windows = []
        step = self.max_chars - self.overlap_chars
        start = 0
        while True:
            end = min(len(segment), start + self.max_chars)
            window = segment[start:end]
            if window.strip():
                windows.append(window)
            if end >= len(segment):
                return windows
            start += step
