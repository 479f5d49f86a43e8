"""Tests for lexical retrieval scoring and ranking."""

from pathlib import Path

from reffortune.rag.corpus import build_chunks
from reffortune.rag.retrieve.retriever import LexicalRetriever
from reffortune.rag.retrieve.text import MAX_QUERY_TOKENS, normalize, tokenize
from reffortune.rag.types import RagChunk


def make_chunk(
    index: int,
    text: str,
    *,
    kind: str = "example",
    system_id: str | None = None,
    intents: tuple[str, ...] = (),
) -> RagChunk:
    return RagChunk(
        chunk_id=f"{kind}:test.md:{index}",
        kind=kind,  # type: ignore[arg-type]
        title="",
        heading_path=(),
        text=text,
        source="test.md",
        system_id=system_id,
        intents=intents,
    )


class TestText:
    """Tests for query normalization and tokenization."""

    def test_normalize_lowercases_and_collapses_whitespace(self):
        assert normalize("  Tarot \n  LOVE  ") == "tarot love"

    def test_normalize_applies_nfkc(self):
        """Test that full-width Latin folds to ASCII."""
        assert normalize("ＴＡＲＯＴ") == "tarot"

    def test_tokenize_keeps_thai_and_ascii(self):
        """Test that punctuation splits tokens and Thai runs stay whole."""
        assert tokenize("ดวงราศีaries, ช่วงdaily!") == ["ดวงราศีaries", "ช่วงdaily"]

    def test_tokenize_caps_token_count(self):
        query = " ".join(f"t{i}" for i in range(MAX_QUERY_TOKENS + 10))
        assert len(tokenize(query)) == MAX_QUERY_TOKENS


class TestLexicalRetriever:
    """Tests for LexicalRetriever scoring."""

    def test_token_match_scores_two_per_token(self):
        retriever = LexicalRetriever([make_chunk(0, "tarot reading about love")])

        results = retriever.retrieve("tarot love")

        assert [item.score for item in results] == [4]

    def test_phrase_bonus(self):
        """Test that the full normalized query appearing verbatim adds 6."""
        retriever = LexicalRetriever([make_chunk(0, "a story of tarot love")])

        results = retriever.retrieve("tarot love")

        assert results[0].score == 2 + 2 + 6

    def test_short_phrase_gets_no_bonus(self):
        """Test that queries under 6 characters never earn the phrase bonus."""
        retriever = LexicalRetriever([make_chunk(0, "ab cd")])

        results = retriever.retrieve("ab cd")

        assert results[0].score == 4

    def test_single_character_tokens_do_not_score(self):
        retriever = LexicalRetriever([make_chunk(0, "x marks the spot")])

        assert retriever.retrieve("x") == []

    def test_zero_score_chunks_are_dropped(self):
        retriever = LexicalRetriever([make_chunk(0, "nothing relevant")])

        assert retriever.retrieve("tarot") == []

    def test_kb_chunks_get_grounding_bonus(self):
        """Test that kb chunks always score at least 1."""
        retriever = LexicalRetriever([make_chunk(0, "nothing relevant", kind="kb")])

        results = retriever.retrieve("tarot")

        assert [item.score for item in results] == [1]

    def test_system_filter_adds_six(self):
        """Test that a matching system id raises the score by exactly 6."""
        chunk = make_chunk(0, "tarot reading", system_id="tarot_th")
        retriever = LexicalRetriever([chunk])

        plain = retriever.retrieve("tarot")[0].score
        boosted = retriever.retrieve("tarot", system_id="tarot_th")[0].score
        other = retriever.retrieve("tarot", system_id="numerology_th")[0].score

        assert boosted == plain + 6
        assert other == plain

    def test_intent_filter_adds_four(self):
        chunk = make_chunk(0, "tarot reading", intents=("love",))
        retriever = LexicalRetriever([chunk])

        plain = retriever.retrieve("tarot")[0].score
        boosted = retriever.retrieve("tarot", intent="love")[0].score

        assert boosted == plain + 4

    def test_ranking_is_descending_and_stable(self):
        """Test that ties keep corpus order."""
        chunks = [
            make_chunk(0, "tarot"),
            make_chunk(1, "tarot love"),
            make_chunk(2, "tarot"),
        ]
        retriever = LexicalRetriever(chunks)

        results = retriever.retrieve("tarot love")

        assert [item.chunk.chunk_id for item in results] == [
            "example:test.md:1",
            "example:test.md:0",
            "example:test.md:2",
        ]

    def test_limit_truncates(self):
        chunks = [make_chunk(i, "tarot") for i in range(5)]
        retriever = LexicalRetriever(chunks)

        assert len(retriever.retrieve("tarot", limit=2)) == 2
        assert retriever.retrieve("tarot", limit=0) == []

    def test_retrieval_is_deterministic(self):
        chunks = [make_chunk(i, f"tarot {'love ' * i}") for i in range(4)]
        retriever = LexicalRetriever(chunks)

        assert retriever.retrieve("tarot love") == retriever.retrieve("tarot love")


class TestThaiAstrologyRetrieval:
    """Retrieval against a chunk under a Thai astrology heading."""

    def test_astrology_chunk_classified_and_retrieved(self, tmp_path: Path):
        """Test that a Thai astrology chunk is found when filtering by its system id."""
        (tmp_path / "kb.md").write_text(
            "## ไพ่ทาโรต์\nความหมายไพ่\n\n## โหราศาสตร์ไทย\nดวงรายวันตามราศีเกิด\n",
            encoding="utf-8",
        )
        chunks = build_chunks(tmp_path, [("kb.md", "kb")])
        astrology = next(chunk for chunk in chunks if "โหราศาสตร์ไทย" in chunk.heading_path)

        results = LexicalRetriever(chunks).retrieve("ดวงราศีaries ช่วงdaily", system_id="thai_astrology")

        assert astrology.system_id == "thai_astrology"
        assert astrology in [item.chunk for item in results]
        assert results[0].chunk == astrology
