"""SQLite persistence for segmented corpora."""
