"""Follow-up chat prompt over a finished tarot reading."""

from reffortune.ai.cultural.thai_context import get_context_for_divination_type
from reffortune.ai.errors import TemplateError
from reffortune.ai.examples.selector import select_chat_examples
from reffortune.ai.templates.base import PromptBuilder
from reffortune.ai.templates.tarot import format_card_lines
from reffortune.ai.types import ChatPromptParams, ChatTurn, DivinationType

MAX_HISTORY_TURNS = 6
EMPTY_HISTORY_TEXT = "(ยังไม่มี)"
NO_BASE_QUESTION_TEXT = "(ไม่ได้ระบุ)"
SPEAKER_LABELS = {"user": "ผู้ใช้", "assistant": "ผู้ช่วย"}

CHAT_ROLE = """คุณคือที่ปรึกษาเชิงจิตใจและหมอดูไพ่ทาโรต์ที่ทำงานกับโปรเจกต์ REFFORTUNE

บทบาทของคุณในโหมดแชท:
- ตอบคำถามติดตามจากการอ่านไพ่เดิม
- ใช้ภาษาไทยที่เป็นธรรมชาติ อบอุ่น และเข้าใจง่าย
- ตอบแบบสั้นกระชับ เหมาะกับรูปแบบการสนทนา (1-3 ย่อหน้า)
- อ้างอิงไพ่จากการอ่านเดิมเพื่อให้คำตอบที่สอดคล้อง
- รับฟังความรู้สึกของผู้ถามและให้มุมมองที่สมดุล
- โฟกัสที่สิ่งที่ผู้ถามสามารถควบคุมได้"""

CHAT_INSTRUCTIONS = """## คำแนะนำการตอบคำถามในโหมดแชท

### รูปแบบการตอบ
- ตอบเป็นข้อความล้วน (plain text) ไม่ใช่ JSON
- ความยาว 1-3 ย่อหน้า เหมาะกับการสนทนา
- ใช้ภาษาที่เป็นกันเอง ไม่เป็นทางการเกินไป
- ตอบตรงประเด็นที่ถาม ไม่ขยายความยืดยาว

### หลักการตอบคำถาม

**1. อ้างอิงไพ่จากการอ่านเดิม**
- ระบุชื่อไพ่ที่เกี่ยวข้องกับคำถาม
- อธิบายว่าไพ่นั้นบอกอะไรเกี่ยวกับคำถามที่ถาม
- ตัวอย่าง: "จากไพ่ Ace of Wands ที่เปิดมา บอกว่า..."

**2. ให้กรอบเวลาที่สมจริง (เมื่อถูกถามเรื่องเวลา)**
- ใช้พลังงานของไพ่เป็นตัวบอกกรอบเวลา
- ให้ช่วงเวลาที่เป็นรูปธรรม (วัน สัปดาห์ เดือน)
- เตือนว่าเวลาขึ้นกับการลงมือทำของผู้ถามด้วย

**3. โฟกัสที่สิ่งที่ผู้ถามควบคุมได้ (เมื่อถามเรื่องคนอื่น)**
- รับฟังความรู้สึกของผู้ถามก่อน
- นำกลับมาที่สิ่งที่ผู้ถามสามารถทำได้
- หลีกเลี่ยงการคาดเดาความรู้สึกของคนอื่น

**4. ใช้บริบทจากประวัติการสนทนา**
- ตอบให้สอดคล้องกับที่เคยพูดไปแล้ว
- ไม่ซ้ำคำตอบเดิม แต่เสริมข้อมูลใหม่

**5. หลีกเลี่ยงการทำนายแบบเด็ดขาด**
- ใช้ภาษาที่แสดงแนวโน้มและโอกาส
- เน้นว่าอนาคตขึ้นกับการกระทำของผู้ถาม
- จบด้วยข้อความที่ให้กำลังใจหรือแนวทางปฏิบัติ"""


def format_history(history: list[ChatTurn]) -> str:
    """Render the most recent turns as ``speaker: content`` lines."""
    if not history:
        return EMPTY_HISTORY_TEXT
    return "\n".join(f"{SPEAKER_LABELS[turn.role]}: {turn.content}" for turn in history[-MAX_HISTORY_TURNS:])


def format_chat_user_data(params: ChatPromptParams) -> str:
    base_question = (params.base_question or "").strip() or NO_BASE_QUESTION_TEXT
    return f"""## ข้อมูลอ่านไพ่

คำถามตั้งต้น: {base_question}
จำนวนไพ่: {len(params.cards)}
ไพ่ที่เปิดได้:
{format_card_lines(params.cards)}

บริบทบทสนทนาก่อนหน้า:
{format_history(params.history)}

คำถามล่าสุดจากผู้ใช้:
{params.follow_up_question.strip()}"""


def build_chat_prompt(params: ChatPromptParams) -> str:
    """Build a follow-up chat prompt.

    Raises:
        TemplateError: If the follow-up question is blank
    """
    if not params.follow_up_question.strip():
        raise TemplateError("INVALID_PARAMS", ["Chat prompt requires a follow-up question"])

    return (
        PromptBuilder(instructions=CHAT_INSTRUCTIONS, user_data=format_chat_user_data(params))
        .with_role(CHAT_ROLE)
        .with_cultural_context(get_context_for_divination_type(DivinationType.CHAT))
        .with_few_shot_examples(select_chat_examples())
        .build()
    )
