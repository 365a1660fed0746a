"""Shared test configuration and fixtures."""

import pytest

THREE_SENTENCE_PARAGRAPH = (
    "The quick brown fox jumps over the lazy dog near the river bank. "
    "A second sentence follows with a few more words to read. "
    "Finally the third sentence closes the paragraph neatly."
)

MULTI_PARAGRAPH_DOCUMENT = (
    "Chunking documents well matters.\n"
    "Retrieval quality depends on it: chunks that cut sentences in half lose meaning.\n"
    "\n"
    "The second paragraph is longer, and it rambles on; it has clauses, commas, "
    "and a question? It also has an exclamation! Then it ends.\n"
    "\n"
    "Supercalifragilisticexpialidociousandthensomemorewithoutanyspacesatall "
    "closes the document with one very long token."
)


@pytest.fixture()
def three_sentence_paragraph() -> str:
    """A 177 character paragraph made of three sentences."""
    return THREE_SENTENCE_PARAGRAPH


@pytest.fixture()
def multi_paragraph_document() -> str:
    """A document mixing paragraphs, lines, clauses and an unbreakable token."""
    return MULTI_PARAGRAPH_DOCUMENT
