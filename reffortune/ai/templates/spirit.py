"""Spirit (life-path) card prompt with knowledge-base grounding."""

from reffortune.ai.cultural.thai_context import get_context_for_divination_type
from reffortune.ai.examples.selector import select_spirit_examples
from reffortune.ai.templates.base import PromptBuilder
from reffortune.ai.types import DivinationType, Orientation, SpiritPromptParams
from reffortune.rag.corpus import build_knowledge_context

SPIRIT_RAG_SYSTEM_ID = "tarot_th"
SPIRIT_RAG_LIMIT = 4

REVERSED_KEYWORDS_SUFFIX = " (กลับหัว: พลังงานที่ถูกกดไว้ จุดที่ต้องพัฒนา ความท้าทายในการเติบโต)"

SPIRIT_ROLE = """คุณคือผู้เชี่ยวชาญด้านไพ่ทาโรต์และเลขศาสตร์ที่ทำงานกับโปรเจกต์ REFFORTUNE

บทบาทของคุณในการอ่านไพ่ประจำตัว (Spirit Card):
- วิเคราะห์ความเชื่อมโยงระหว่างวันเกิด เลขเส้นทางชีวิต และไพ่ประจำตัว
- ให้คำแนะนำระยะยาวเกี่ยวกับการพัฒนาตัวเอง ไม่ใช่การทำนายระยะสั้น
- อธิบายจุดแข็งตามธรรมชาติ (ไพ่ตั้งตรง) หรือจุดที่ต้องพัฒนา (ไพ่กลับหัว)
- ใช้ภาษาไทยที่อบอุ่น ให้กำลังใจ และสร้างแรงบันดาลใจ
- เชื่อมโยงไพ่กับธีมการพัฒนาตัวเองและเส้นทางชีวิต"""

SPIRIT_INSTRUCTIONS = """## คำแนะนำการตีความไพ่ประจำตัว

### รูปแบบการตอบกลับ (JSON Only)
ตอบเป็น JSON เท่านั้น โดยมีคีย์ 2 ตัว:
- summary: สรุปความหมายของไพ่ประจำตัวและพลังงานชีวิต (2-4 บรรทัด)
- cardStructure: (จัดเป็น 3 ส่วน) ต้องมีหัวข้อชัดเจน:
  * ภาพรวมสถานการณ์: จุดแข็งตามธรรมชาติและพลังงานหลักของเส้นทางชีวิต
  * จุดที่ควรระวัง: จุดที่ต้องพัฒนาหรือความท้าทายระยะยาว
  * แนวทางที่ควรทำ: แนวทางการพัฒนาตัวเองและสายงานที่เหมาะ

### หลักการตีความ
1. **การเชื่อมโยง**: อธิบายว่าเลขเส้นทางชีวิตเสริมพลังของไพ่อย่างไร
2. **ความเฉพาะเจาะจง**: ให้แนวทางการเติบโตที่นำไปใช้ได้จริงในชีวิตประจำวัน
3. **คุณภาพคำตอบ**: อ้างอิงข้อมูลจาก Knowledge Base ที่แนบมาให้มากที่สุด"""


def spirit_rag_query(params: SpiritPromptParams) -> str:
    return f"ไพ่ประจำตัว {params.card.name} เลขเส้นทางชีวิต {params.life_path_number}"


def card_keywords(params: SpiritPromptParams) -> str:
    if params.orientation == Orientation.REVERSED:
        return params.card.meaning_reversed + REVERSED_KEYWORDS_SUFFIX
    return params.card.meaning_upright


def format_spirit_user_data(params: SpiritPromptParams) -> str:
    orientation = "ตั้งตรง" if params.orientation == Orientation.UPRIGHT else "กลับหัว"
    return f"""## ข้อมูลไพ่ประจำตัว

วันเกิด: {params.dob}
เลขเส้นทางชีวิต: {params.life_path_number}
ไพ่ประจำตัว: {params.card.name} ({orientation})
ความหมายไพ่: {card_keywords(params)}"""


def build_spirit_prompt(params: SpiritPromptParams, *, knowledge_base: str | None = None) -> str:
    """Build a spirit card prompt.

    Args:
        params: Card, orientation, life-path number and date of birth
        knowledge_base: Pre-formatted knowledge block. When None, the block is
            retrieved from the process-wide corpus (tarot_th, 4 chunks).

    Returns:
        Prompt string ready for the LLM

    Raises:
        TemplateError: If the orientation is not upright or reversed
    """
    examples = select_spirit_examples(params.orientation)
    if knowledge_base is None:
        knowledge_base = build_knowledge_context(
            spirit_rag_query(params),
            system_id=SPIRIT_RAG_SYSTEM_ID,
            limit=SPIRIT_RAG_LIMIT,
        )

    return (
        PromptBuilder(instructions=SPIRIT_INSTRUCTIONS, user_data=format_spirit_user_data(params))
        .with_role(SPIRIT_ROLE)
        .with_knowledge_base(knowledge_base)
        .with_cultural_context(get_context_for_divination_type(DivinationType.SPIRIT))
        .with_few_shot_examples(examples)
        .build()
    )
