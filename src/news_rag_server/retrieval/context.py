"""
Context Assembly

Renders the selected articles into the grounding block embedded in the system
prompt. Each section is labelled with the article's corpus number, which is
the number the model cites at the end of its answer.
"""

from __future__ import annotations

from typing import List, Sequence

from .ranker import RankedDocument

SECTION_DELIMITER = "\n\n---\n\n"


def render_section(ranked: RankedDocument) -> str:
    doc = ranked.document
    return (
        f"ARTIKEL {ranked.position + 1}:\n"
        f"JUDUL: {doc.title}\n"
        f"URL: {doc.url}\n"
        f"\n"
        f"{doc.full_text}"
    )


def assemble_context(ranked: Sequence[RankedDocument]) -> str:
    """
    Join the selected articles into one context block.

    Sections are emitted in ascending corpus position regardless of the order
    they are passed in. Only the given articles are rendered.
    """
    ordered: List[RankedDocument] = sorted(ranked, key=lambda r: r.position)
    return SECTION_DELIMITER.join(render_section(r) for r in ordered)
