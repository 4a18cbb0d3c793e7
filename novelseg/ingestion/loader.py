"""Book file loader producing line sequences for the segmenter."""

import logging
from collections.abc import Iterable
from pathlib import Path

import chardet

from novelseg.models.line import Line

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS: tuple[str, ...] = (".txt", ".md")


class CorpusLoader:
    """Reads plain text books, one book per file, into Line sequences.

    Args:
        extensions: File extensions picked up by ``load_directory``.
                    Every entry must be one of SUPPORTED_EXTENSIONS.
    """

    def __init__(self, extensions: Iterable[str] = (".txt",)) -> None:
        self._extensions = tuple(ext.lower() for ext in extensions)
        for ext in self._extensions:
            self._check_extension(ext)

    def load_directory(self, directory: str | Path) -> list[Line]:
        """Load every book file in a directory, sorted by filename.

        Args:
            directory: Directory containing the book files.

        Returns:
            Lines of all books, each book's lines kept together.

        Raises:
            FileNotFoundError: If the directory does not exist.
        """
        path = Path(directory)
        if not path.is_dir():
            raise FileNotFoundError(f"Corpus directory not found: {path}")

        files = sorted(
            f for f in path.iterdir() if f.is_file() and f.suffix.lower() in self._extensions
        )
        if not files:
            logger.warning("No book files found in %s", path)
            return []

        lines: list[Line] = []
        for file_path in files:
            lines.extend(self.load_file(file_path))
        return lines

    def load_file(self, file_path: str | Path, title: str | None = None) -> list[Line]:
        """Read a single book file into lines.

        Empty lines are kept; they count toward line positions and end up
        in the assembled documents.

        Args:
            file_path: Path to the book file.
            title: Book title. Derived from the filename when omitted.

        Returns:
            The book's lines in file order.

        Raises:
            FileNotFoundError: If file_path does not exist.
            ValueError: If the file extension is not supported.
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        self._check_extension(path.suffix.lower())

        book = title or self._title_from_path(path)
        text = self._read_text(path).lstrip("\ufeff")
        lines = [
            Line(book=book, text=raw, position=i)
            for i, raw in enumerate(text.splitlines())
        ]
        logger.debug("Loaded %d lines for %r from %s", len(lines), book, path)
        return lines

    def _check_extension(self, ext: str) -> None:
        if ext not in SUPPORTED_EXTENSIONS:
            raise ValueError(
                f"Unsupported file format: '{ext}'. "
                f"Supported: {', '.join(SUPPORTED_EXTENSIONS)}"
            )

    def _title_from_path(self, file_path: Path) -> str:
        """Build a book title from a filename, e.g. sense_and_sensibility.txt."""
        words = file_path.stem.replace("_", " ").replace("-", " ").split()
        return " ".join(word[:1].upper() + word[1:] for word in words) or file_path.stem

    def _read_text(self, file_path: Path) -> str:
        """Read a text file, detecting its encoding when it is not UTF-8.

        Args:
            file_path: Path to the text file.

        Returns:
            The file content as a string.
        """
        try:
            return file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            pass

        raw_bytes = file_path.read_bytes()
        detected = chardet.detect(raw_bytes)
        encoding = detected.get("encoding") or "utf-8"
        confidence = detected.get("confidence") or 0

        if confidence < 0.7:
            logger.warning(
                "Low confidence encoding detection for %s: %s (%.0f%%)",
                file_path,
                encoding,
                confidence * 100,
            )

        try:
            return raw_bytes.decode(encoding)
        except (UnicodeDecodeError, LookupError):
            logger.error("Failed to decode file: %s", file_path)
            return raw_bytes.decode("utf-8", errors="replace")
