"""SQLite database initialization and document persistence."""

import logging
import sqlite3
from pathlib import Path

from novelseg.models.document import Document, SegmentedCorpus

logger = logging.getLogger(__name__)


def get_connection(db_path: str | Path) -> sqlite3.Connection:
    """Create a connection to the SQLite database.

    Args:
        db_path: Path to the SQLite database file.

    Returns:
        A sqlite3 Connection with row_factory set to Row.
    """
    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")
    conn.execute("PRAGMA foreign_keys=ON")
    return conn


def initialize_database(db_path: str | Path) -> None:
    """Create the database schema if it doesn't exist.

    Args:
        db_path: Path to the SQLite database file.
    """
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    conn = get_connection(db_path)
    try:
        conn.executescript(
            """
            CREATE TABLE IF NOT EXISTS documents (
                book TEXT NOT NULL,
                chapter INTEGER NOT NULL,
                text TEXT NOT NULL,
                line_count INTEGER NOT NULL,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                PRIMARY KEY (book, chapter)
            );
            """
        )
        conn.commit()
    finally:
        conn.close()


def save_corpus(db_path: str | Path, corpus: SegmentedCorpus) -> int:
    """Replace the stored documents of every book in a corpus.

    All existing rows of a book present in ``corpus`` are deleted before its
    documents are inserted, so chapters that no longer exist do not linger.
    Books absent from ``corpus`` are left untouched.

    Args:
        db_path: Path to an initialized SQLite database.
        corpus: The documents to store.

    Returns:
        Number of documents written.
    """
    conn = get_connection(db_path)
    try:
        conn.executemany(
            "DELETE FROM documents WHERE book = ?",
            [(book,) for book in corpus.books()],
        )
        conn.executemany(
            """
            INSERT INTO documents (book, chapter, text, line_count)
            VALUES (?, ?, ?, ?)
            """,
            [(d.book, d.chapter, d.text, d.line_count) for d in corpus.documents],
        )
        conn.commit()
    except sqlite3.Error:
        conn.rollback()
        raise
    finally:
        conn.close()

    logger.info("Saved %d documents to %s", len(corpus), db_path)
    return len(corpus)


def load_corpus(db_path: str | Path, book: str | None = None) -> SegmentedCorpus:
    """Read stored documents back in insertion order.

    Args:
        db_path: Path to an initialized SQLite database.
        book: Only return documents of this book when given.

    Returns:
        A SegmentedCorpus of the stored documents.
    """
    query = "SELECT book, chapter, text, line_count FROM documents"
    params: tuple[str, ...] = ()
    if book is not None:
        query += " WHERE book = ?"
        params = (book,)
    query += " ORDER BY rowid"

    conn = get_connection(db_path)
    try:
        rows = conn.execute(query, params).fetchall()
    finally:
        conn.close()

    return SegmentedCorpus(
        documents=[
            Document(
                book=row["book"],
                chapter=row["chapter"],
                text=row["text"],
                line_count=row["line_count"],
            )
            for row in rows
        ]
    )
