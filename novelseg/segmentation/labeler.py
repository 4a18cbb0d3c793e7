"""Chapter labeling: tag every line of a book with its chapter number."""

import logging
import re
from collections.abc import Iterable

from novelseg.config import SegmentationConfig
from novelseg.errors import InvalidInputError
from novelseg.models.line import LabeledLine, Line

logger = logging.getLogger(__name__)

RawLine = Line | tuple[str, str]


def coerce_line(item: object, index: int, positions: dict[str, int]) -> Line:
    """Turn a ``Line`` or a ``(book, text)`` pair into a validated Line.

    ``positions`` tracks how many lines each book has produced so far and
    is used to number lines supplied as bare pairs.

    Raises:
        InvalidInputError: If the item has no book or its text is not a string.
    """
    if isinstance(item, Line):
        book, text = item.book, item.text
    elif isinstance(item, tuple) and len(item) == 2:
        book, text = item
    else:
        raise InvalidInputError(
            f"Line {index}: expected a Line or a (book, text) pair, got {item!r}"
        )

    if not isinstance(book, str) or not book.strip():
        raise InvalidInputError(f"Line {index}: missing book for text {text!r}")
    if not isinstance(text, str):
        raise InvalidInputError(
            f"Line {index}: text must be a string, got {type(text).__name__}"
        )

    position = positions.get(book, 0)
    positions[book] = position + 1
    if isinstance(item, Line):
        return item
    return Line(book=book, text=text, position=position)


class ChapterLabeler:
    """Assigns chapter numbers to an ordered sequence of book lines.

    Each book keeps its own counter starting at 0. A line matching the
    heading pattern bumps the counter before it is labeled, so the heading
    belongs to the chapter it opens.

    Args:
        config: SegmentationConfig with the heading pattern and case
                sensitivity. Defaults are used when omitted.

    Raises:
        InvalidInputError: If the heading pattern is not a valid regex.
    """

    def __init__(self, config: SegmentationConfig | None = None) -> None:
        self._config = config or SegmentationConfig()
        flags = re.IGNORECASE if self._config.ignore_case else 0
        try:
            self._pattern = re.compile(self._config.heading_pattern, flags)
        except re.error as exc:
            raise InvalidInputError(
                f"Invalid heading pattern {self._config.heading_pattern!r}: {exc}"
            ) from exc

    @property
    def pattern(self) -> re.Pattern[str]:
        return self._pattern

    def is_heading(self, text: str) -> bool:
        """Check whether a line opens a new chapter.

        The default pattern only tests the first character after
        "chapter" and its whitespace against the numeral-like class
        ``[0-9ivxlc]``, so "Chapter ix" matches while "Chapter nine"
        and "chapterhouse" do not.
        """
        return self._pattern.search(text) is not None

    def label(self, lines: Iterable[RawLine]) -> list[LabeledLine]:
        """Label every line with its chapter number.

        Args:
            lines: Lines in reading order, with all lines of a book kept
                   together.

        Returns:
            One LabeledLine per input line, in the same order.

        Raises:
            InvalidInputError: If a line has no book or a non-string text.
        """
        counters: dict[str, int] = {}
        positions: dict[str, int] = {}
        labeled: list[LabeledLine] = []
        previous_book: str | None = None

        for index, item in enumerate(lines):
            line = coerce_line(item, index, positions)

            if line.book != previous_book and line.book in counters:
                logger.warning(
                    "Book %r reappears at line %d after other books; "
                    "continuing its chapter count from %d instead of restarting at 0",
                    line.book,
                    index,
                    counters[line.book],
                )
            previous_book = line.book

            chapter = counters.get(line.book, 0)
            if self.is_heading(line.text):
                chapter += 1
            counters[line.book] = chapter

            labeled.append(
                LabeledLine(
                    book=line.book,
                    text=line.text,
                    position=line.position,
                    chapter=chapter,
                )
            )

        for book, count in counters.items():
            logger.debug("Book %r: %d chapter headings detected", book, count)

        return labeled


def label_chapters(
    lines: Iterable[RawLine], config: SegmentationConfig | None = None
) -> list[LabeledLine]:
    """Label lines with chapter numbers using a one-off ChapterLabeler."""
    return ChapterLabeler(config).label(lines)
