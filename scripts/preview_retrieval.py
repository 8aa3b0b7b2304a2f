import argparse
import asyncio
import os
import sys

# Ensure src is in pythonpath
sys.path.append(os.path.join(os.path.dirname(__file__), "..", "src"))

from dotenv import load_dotenv
load_dotenv()

from news_rag_server.config import settings
from news_rag_server.corpus.loader import load_corpus
from news_rag_server.embeddings.embedder import Embedder
from news_rag_server.embeddings.cache import EmbeddingCache
from news_rag_server.llm.client import LLMClient
from news_rag_server.answering.handler import AnswerHandler
from news_rag_server.retrieval.context import assemble_context


async def main(question: str, show_context: bool):
    print(f"Loading corpus from {settings.corpus_path}...")
    documents = load_corpus(settings.corpus_path)
    print(f"Found {len(documents)} articles.")

    embedder = Embedder()
    cache = EmbeddingCache(documents, embedder)
    # The LLM client is never called; retrieve() stops before generation.
    handler = AnswerHandler(cache, embedder, LLMClient(), top_k=settings.top_k)

    print("Creating article embeddings and ranking (this may take time)...")
    selected = await handler.retrieve(question)
    print(f"Done. {cache.failed_count} article(s) without embedding.")

    print("\nSelected articles:")
    for r in selected:
        score = "n/a" if r.is_sentinel else f"{r.score:.4f}"
        print(f"  ARTIKEL {r.document.identifier} [{score}] {r.document.title}")

    if show_context:
        print("\n" + assemble_context(selected))


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Preview which articles ground a question.")
    parser.add_argument("question")
    parser.add_argument("--context", action="store_true", help="print the assembled context block")
    args = parser.parse_args()
    asyncio.run(main(args.question, args.context))
