"""Root conftest for all tests.

Shared fixtures for the RAG and AI suites. Process-wide state (the default
quality monitor and the knowledge-base chunk cache) is reset around every test.
"""

from pathlib import Path

import pytest

from reffortune.ai.metrics import default_monitor
from reffortune.ai.types import DrawnCard, Orientation, TarotCard
from reffortune.config.settings import settings
from reffortune.rag.corpus import clear_cache


@pytest.fixture(autouse=True)
def reset_process_state():
    """Reset the default monitor and chunk cache before and after each test."""
    default_monitor.reset()
    clear_cache()
    yield
    default_monitor.reset()
    clear_cache()


@pytest.fixture
def the_fool() -> TarotCard:
    return TarotCard(
        name="The Fool",
        arcana="major",
        meaning_upright="การเริ่มต้นใหม่ ความกล้า",
        meaning_reversed="ความประมาท การตัดสินใจเร็วเกินไป",
    )


@pytest.fixture
def three_of_cups() -> TarotCard:
    return TarotCard(
        name="Three of Cups",
        arcana="minor",
        meaning_upright="การฉลอง มิตรภาพ",
        meaning_reversed="ความเกินพอดี",
    )


@pytest.fixture
def upright_minor(three_of_cups: TarotCard) -> DrawnCard:
    return DrawnCard(card=three_of_cups, orientation=Orientation.UPRIGHT)


@pytest.fixture
def reversed_major(the_fool: TarotCard) -> DrawnCard:
    return DrawnCard(card=the_fool, orientation=Orientation.REVERSED)


@pytest.fixture
def kb_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the process-wide corpus at a small inline knowledge base."""
    (tmp_path / "kb.md").write_text(
        "## ไพ่ทาโรต์\nความหมายไพ่ The Fool คือการเริ่มต้นใหม่\n\n"
        "## โหราศาสตร์ไทย\nดวงรายวันตามราศีเกิด\n",
        encoding="utf-8",
    )
    (tmp_path / "examples.md").write_text(
        "## ตัวอย่าง\nคำตอบตัวอย่างสำหรับไพ่ The Fool\n",
        encoding="utf-8",
    )
    monkeypatch.setattr(settings, "kb_dir", tmp_path)
    monkeypatch.setattr(settings, "kb_files", [("kb.md", "kb"), ("examples.md", "example")])
    return tmp_path
