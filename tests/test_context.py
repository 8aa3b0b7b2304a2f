from news_rag_server.retrieval.context import SECTION_DELIMITER, assemble_context
from news_rag_server.retrieval.ranker import rank
from conftest import embed_all


def _select(documents, vectors, query, k=3):
    return rank(query, embed_all(documents, vectors), k=k)


def test_sections_are_labelled_with_corpus_number(five_documents):
    selected = _select(
        five_documents,
        [[1, 0, 0], [0, 1, 0], [1, 0.1, 0], [0, 1, 1], [0, 0, 1]],
        [0, 1, 1],
    )

    context = assemble_context(selected)

    sections = context.split(SECTION_DELIMITER)
    assert len(sections) == 3
    assert sections[0].startswith("ARTIKEL 2:\nJUDUL: Article 2\nURL: https://news.example/2\n\ndoc2")
    assert sections[1].startswith("ARTIKEL 4:")
    assert sections[2].startswith("ARTIKEL 5:")


def test_only_selected_documents_are_rendered(five_documents):
    selected = _select(five_documents, [[1.0]] * 5, None)

    context = assemble_context(selected)

    for i in (1, 2, 3):
        assert f"JUDUL: Article {i}" in context
        assert f"URL: https://news.example/{i}" in context
    for i in (4, 5):
        assert f"Article {i}" not in context


def test_renders_in_position_order_whatever_the_input_order(five_documents):
    selected = _select(five_documents, [[1.0]] * 5, None)

    context = assemble_context(list(reversed(selected)))

    assert context.index("ARTIKEL 1:") < context.index("ARTIKEL 2:") < context.index("ARTIKEL 3:")


def test_empty_selection_renders_empty_block():
    assert assemble_context([]) == ""
