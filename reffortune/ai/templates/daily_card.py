"""Single-card daily reading prompt. No few-shot examples."""

from reffortune.ai.cultural.thai_context import get_context_for_divination_type
from reffortune.ai.templates.base import PromptBuilder
from reffortune.ai.types import DailyCardPromptParams, DivinationType, DrawnCard
from reffortune.rag.corpus import build_knowledge_context

DAILY_RAG_SYSTEM_ID = "tarot_th"

DAILY_CARD_ROLE = """คุณคือผู้เชี่ยวชาญการอ่านไพ่รายวันของโปรเจกต์ REFFORTUNE

บทบาทของคุณ:
- วิเคราะห์พลังงานประจำวันที่ผู้ใช้ได้รับจากไพ่ 1 ใบ
- ให้คำแนะนำที่สั้น กระชับ แต่มีพลังและนำไปใช้ได้ทันที
- ใช้ภาษาไทยที่อบอุ่นและเป็นกันเอง เหมือนที่ปรึกษาส่วนตัว"""

DAILY_CARD_INSTRUCTIONS = """## คำแนะนำการตีความไพ่รายวัน

### รูปแบบการตอบกลับ (JSON Only)
ตอบเป็น JSON เท่านั้น โดยมีคีย์ 2 ตัว:
- summary: สรุปพลังงานวันนี้ 1-2 บรรทัด
- cardStructure: (จัดเป็น 3 ส่วน) ต้องมีหัวข้อชัดเจน:
  * ภาพรวมสถานการณ์: พลังงานเด่นของวันนี้และช่วงเวลาที่ชัดที่สุด
  * จุดที่ควรระวัง: สิ่งที่ควรเลี่ยงวันนี้
  * แนวทางที่ควรทำ: สิ่งที่ควรลงมือทำทันที

### หลักการตีความ
1. **กระชับและมีพลัง**: เนื่องจากเป็นคำทำนายรายวัน ไม่ควรยาวเกินไป
2. **เฉพาะเจาะจง**: เชื่อมโยงความหมายไพ่เข้ากับเหตุการณ์ที่อาจเจอในวันหนึ่งๆ
3. **คุณภาพคำตอบ**: อ้างอิงความรู้จาก Knowledge Base ที่แนบมาให้มากที่สุด"""


def daily_card_rag_query(params: DailyCardPromptParams) -> str:
    drawn = DrawnCard(params.card, params.orientation)
    return f"ไพ่รายวัน {params.card.name} {drawn.orientation_th}"


def build_daily_card_prompt(params: DailyCardPromptParams, *, knowledge_base: str | None = None) -> str:
    """Build a daily card prompt.

    Args:
        params: Card of the day, orientation and day key (YYYY-MM-DD)
        knowledge_base: Pre-formatted knowledge block, retrieved when None
    """
    drawn = DrawnCard(params.card, params.orientation)
    if knowledge_base is None:
        knowledge_base = build_knowledge_context(daily_card_rag_query(params), system_id=DAILY_RAG_SYSTEM_ID)

    user_data = f"""## ข้อมูลไพ่วันนี้

วันที่: {params.day_key}
ไพ่ที่ได้: {params.card.name} ({drawn.orientation_th})
ความหมายพื้นฐาน: {drawn.meaning}"""

    return (
        PromptBuilder(instructions=DAILY_CARD_INSTRUCTIONS, user_data=user_data)
        .with_role(DAILY_CARD_ROLE)
        .with_knowledge_base(knowledge_base)
        .with_cultural_context(get_context_for_divination_type(DivinationType.TAROT))
        .build()
    )
