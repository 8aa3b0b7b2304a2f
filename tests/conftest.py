import os
from pathlib import Path

# Settings are instantiated at import time; seed required values first.
os.environ.setdefault("OPENAI_API_KEY", "test-openai-key")
os.environ.setdefault(
    "CORPUS_PATH",
    str(Path(__file__).resolve().parent.parent / "data" / "news.json"),
)

import pytest

from news_rag_server.corpus.models import Document, EmbeddedDocument


def make_documents(n):
    return [
        Document(
            identifier=i,
            title=f"Article {i}",
            url=f"https://news.example/{i}",
            full_text=f"doc{i}",
        )
        for i in range(1, n + 1)
    ]


def embed_all(documents, vectors):
    return [
        EmbeddedDocument(document=doc, embedding=vec)
        for doc, vec in zip(documents, vectors)
    ]


@pytest.fixture
def five_documents():
    return make_documents(5)
