"""Entry point: segment the novel corpus and store the chapter documents."""

import logging
from pathlib import Path

from novelseg.config import load_config
from novelseg.ingestion import CorpusLoader
from novelseg.segmentation import DocumentSegmenter
from novelseg.storage.database import initialize_database, save_corpus

logger = logging.getLogger(__name__)


def main() -> None:
    """Load the corpus directory, segment it, and persist the documents."""
    config = load_config()
    logging.basicConfig(
        level=config.app.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Ensure required directories exist
    Path(config.corpus.corpus_dir).mkdir(parents=True, exist_ok=True)

    initialize_database(config.storage.sqlite_path)

    loader = CorpusLoader(extensions=config.corpus.extensions)
    lines = loader.load_directory(config.corpus.corpus_dir)

    corpus = DocumentSegmenter(config.segmentation).segment(lines)
    for book in corpus.books():
        logger.info("%s: %d documents", book, len(corpus.for_book(book)))

    save_corpus(config.storage.sqlite_path, corpus)


if __name__ == "__main__":
    main()
