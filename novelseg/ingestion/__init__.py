"""Corpus ingestion: reading book files into lines."""

from novelseg.ingestion.loader import SUPPORTED_EXTENSIONS, CorpusLoader

__all__ = ["CorpusLoader", "SUPPORTED_EXTENSIONS"]
