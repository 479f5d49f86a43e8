"""Tests for knowledge-base loading, front-matter and metadata linting."""

from pathlib import Path

import pytest

from reffortune.rag.ingest.chunker import chunk_corpus, chunk_document
from reffortune.rag.ingest.inference import infer_intents, infer_system_id, lint_chunk_metadata
from reffortune.rag.ingest.loader import build_document, load_documents, parse_frontmatter

DECLARED_TAROT_AS_NUMEROLOGY = """---
system_id: numerology_th
intents:
  - money
---
## ไพ่ทาโรต์
เรื่องเงิน
"""


class TestParseFrontmatter:
    """Tests for parse_frontmatter."""

    def test_no_frontmatter(self):
        assert parse_frontmatter("## หัวข้อ\nเนื้อหา") == ({}, "## หัวข้อ\nเนื้อหา")

    def test_frontmatter_is_split_from_body(self):
        frontmatter, body = parse_frontmatter("---\nsystem_id: esiimsi\n---\n## เซียมซี\nเนื้อหา")

        assert frontmatter == {"system_id": "esiimsi"}
        assert body == "## เซียมซี\nเนื้อหา"

    def test_empty_frontmatter_block(self):
        frontmatter, body = parse_frontmatter("---\n\n---\nเนื้อหา")

        assert frontmatter == {}
        assert body == "เนื้อหา"

    def test_non_mapping_frontmatter_raises(self):
        with pytest.raises(ValueError, match="YAML dictionary"):
            parse_frontmatter("---\n- a\n- b\n---\nเนื้อหา")


class TestBuildDocument:
    """Tests for build_document."""

    def test_declared_metadata(self):
        doc = build_document(DECLARED_TAROT_AS_NUMEROLOGY, "kb.md", "kb")

        assert doc.system_id == "numerology_th"
        assert doc.intents == ("money",)
        assert doc.content.startswith("## ไพ่ทาโรต์")

    def test_single_intent_string(self):
        doc = build_document("---\nintents: love\n---\n## หัวข้อ\nก", "kb.md", "kb")

        assert doc.intents == ("love",)
        assert doc.system_id is None

    def test_malformed_yaml_names_the_file(self):
        with pytest.raises(ValueError, match="broken.md"):
            build_document("---\nsystem_id: [unclosed\n---\nเนื้อหา", "broken.md", "kb")

    def test_unknown_kind_raises(self):
        with pytest.raises(ValueError, match="Unknown document kind"):
            build_document("เนื้อหา", "kb.md", "notes")  # type: ignore[arg-type]

    def test_declared_metadata_overrides_inference(self):
        chunks = chunk_document(build_document(DECLARED_TAROT_AS_NUMEROLOGY, "kb.md", "kb"))

        assert chunks[0].system_id == "numerology_th"
        assert chunks[0].metadata_declared is True


class TestLoadDocuments:
    """Tests for load_documents."""

    def test_files_load_in_configured_order(self, tmp_path: Path):
        (tmp_path / "b.md").write_text("## สอง\nข", encoding="utf-8")
        (tmp_path / "a.md").write_text("## หนึ่ง\nก", encoding="utf-8")

        docs = load_documents(tmp_path, [("b.md", "kb"), ("a.md", "example")])

        assert [(doc.source, doc.kind) for doc in docs] == [("b.md", "kb"), ("a.md", "example")]

    def test_missing_file_is_skipped(self, tmp_path: Path):
        (tmp_path / "a.md").write_text("## หนึ่ง\nก", encoding="utf-8")

        docs = load_documents(tmp_path, [("missing.md", "kb"), ("a.md", "kb")])

        assert [doc.source for doc in docs] == ["a.md"]


class TestInference:
    """Tests for keyword inference."""

    def test_first_matching_system_wins(self):
        """Test that tarot keywords win over later systems in the same path."""
        assert infer_system_id(("ไพ่ทาโรต์", "โหราศาสตร์ไทย")) == "tarot_th"

    def test_no_keyword(self):
        assert infer_system_id(("บทนำ",)) is None

    def test_intents_in_pattern_order(self):
        assert infer_intents("เรื่องเงินและความรักในที่ทำงาน") == ("work", "love", "money")


class TestLintChunkMetadata:
    """Tests for lint_chunk_metadata."""

    def test_reports_system_id_mismatch(self):
        chunks = chunk_document(build_document(DECLARED_TAROT_AS_NUMEROLOGY, "kb.md", "kb"))

        mismatches = lint_chunk_metadata(chunks)

        assert len(mismatches) == 1
        assert mismatches[0].field == "system_id"
        assert mismatches[0].declared == "numerology_th"
        assert mismatches[0].inferred == "tarot_th"

    def test_reports_intent_mismatch(self):
        content = "---\nsystem_id: numerology_th\nintents: [money]\n---\n## เลขศาสตร์\nเรื่องความรัก\n"
        chunks = chunk_document(build_document(content, "kb.md", "kb"))

        mismatches = lint_chunk_metadata(chunks)

        assert [(m.field, m.declared, m.inferred) for m in mismatches] == [("intents", "money", "love")]

    def test_consistent_metadata_is_clean(self):
        content = "---\nsystem_id: numerology_th\nintents: [money]\n---\n## เลขศาสตร์\nเรื่องเงิน\n"
        chunks = chunk_document(build_document(content, "kb.md", "kb"))

        assert lint_chunk_metadata(chunks) == []

    def test_undeclared_chunks_are_skipped(self, tmp_path: Path):
        (tmp_path / "kb.md").write_text("## ไพ่ทาโรต์\nเรื่องเงิน", encoding="utf-8")

        chunks = chunk_corpus(load_documents(tmp_path, [("kb.md", "kb")]))

        assert lint_chunk_metadata(chunks) == []
