"""
Corpus Loader

Reads the static news corpus from a JSON file once at process start.

Expected format
---------------
A JSON array of article objects, each carrying at least::

    {"title": "...", "url": "...", "full_text": "..."}

Any additional fields (dates, authors, ...) are ignored. Articles are numbered
by their position in the array, starting at 1.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Union

from pydantic import ValidationError

from .models import Document

logger = logging.getLogger("rag.corpus")


class CorpusError(RuntimeError):
    """Raised when the corpus source is missing or malformed."""


def parse_corpus(records: Any) -> List[Document]:
    """
    Convert raw decoded JSON into Documents, preserving order.

    Raises
    ------
    CorpusError
        If the payload is not a list of article objects.
    """
    if not isinstance(records, list):
        raise CorpusError("Corpus must be a JSON array of articles.")

    documents: List[Document] = []
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            raise CorpusError(f"Malformed article at index {index}: {record!r}")

        try:
            documents.append(
                Document(
                    identifier=index + 1,
                    title=record.get("title"),
                    url=record.get("url"),
                    full_text=record.get("full_text"),
                )
            )
        except ValidationError as exc:
            raise CorpusError(
                f"Invalid article at index {index}: {exc.error_count()} error(s)"
            ) from exc

    return documents


def load_corpus(path: Union[str, Path]) -> List[Document]:
    """
    Load and validate the corpus file.

    Parameters
    ----------
    path : str | Path
        Filesystem path to the JSON corpus.

    Returns
    -------
    List[Document]
        Articles in source order.

    Raises
    ------
    CorpusError
        If the file cannot be read or decoded, or has the wrong shape.
    """
    corpus_path = Path(path)

    try:
        raw = corpus_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CorpusError(f"Cannot read corpus file {corpus_path}: {exc}") from exc

    try:
        records = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise CorpusError(f"Corpus file {corpus_path} is not valid JSON") from exc

    documents = parse_corpus(records)
    logger.info("Loaded %d articles from %s", len(documents), corpus_path)
    return documents
