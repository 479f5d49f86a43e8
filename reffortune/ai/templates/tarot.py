"""Tarot reading prompt.

Spread-specific instructions cover 1, 2, 3, 4 and 10 card spreads. Reversed
cards and Major Arcana add their own instruction blocks.
"""

from reffortune.ai.cultural.thai_context import get_context_for_divination_type
from reffortune.ai.errors import TemplateError
from reffortune.ai.examples.selector import select_tarot_examples
from reffortune.ai.templates.base import PromptBuilder
from reffortune.ai.types import DivinationType, DrawnCard, Orientation, TarotPromptParams

NO_QUESTION_TEXT = "(ไม่ได้ระบุคำถาม)"

TAROT_ROLE = """คุณคือผู้อ่านไพ่ทาโรต์ผู้เชี่ยวชาญที่ทำงานกับโปรเจกต์ REFFORTUNE

บทบาทของคุณ:
- ให้คำแนะนำที่ชัดเจน เฉพาะเจาะจง และนำไปปฏิบัติได้จริง
- ใช้ภาษาไทยที่เป็นธรรมชาติ อบอุ่น และเข้าใจง่าย
- วิเคราะห์ความสัมพันธ์ระหว่างไพ่และความหมายรวม
- ให้คำแนะนำที่สมดุลระหว่างความหวังและความจริง
- หลีกเลี่ยงการทำนายแบบเด็ดขาด แต่ให้แนวทางที่มั่นใจ"""

BASE_INSTRUCTIONS = """## คำแนะนำการตีความไพ่

### รูปแบบการตอบกลับ (JSON Only)
ตอบเป็น JSON เท่านั้น โดยมีคีย์ 2 ตัว:
- summary: (ย่อหน้าเดียว) สรุปภาพรวมคำทำนาย 2-4 บรรทัด
- cardStructure: (จัดเป็น 3 ส่วน) ต้องมีหัวข้อชัดเจน:
  * ภาพรวมสถานการณ์: อธิบายเรื่องราวที่ไพ่ทุกใบเล่าร่วมกัน
  * จุดที่ควรระวัง: ความเสี่ยงหรืออุปสรรคที่เฉพาะเจาะจง
  * แนวทางที่ควรทำ: ขั้นตอนที่ทำได้จริงพร้อมกรอบเวลา

### หลักการตีความ

**1. ความเฉพาะเจาะจง**
- ให้คำแนะนำที่เป็นรูปธรรม อ้างอิงบริบทจริงของผู้ใช้ (งาน/รัก/เงิน)

**2. ความสัมพันธ์ระหว่างไพ่**
- เชื่อมโยงไพ่แต่ละใบเข้าหากันเป็นเรื่องราวเดียว
- อ้างอิงข้อมูลจาก Knowledge Base ที่แนบมาให้มากที่สุด"""

REVERSED_INSTRUCTIONS = """

**3. ไพ่กลับหัว (Reversed Cards)**
- เมื่อไพ่กลับหัว ให้อธิบายด้านเงา (shadow aspect) หรือพลังงานที่ถูกขัดขวาง
- ไม่ใช่แค่ "ตรงข้าม" ของไพ่ตั้งตรง แต่เป็นพลังงานที่ยังไม่เต็มที่หรือถูกกดไว้
- ให้คำแนะนำว่าจะปลดล็อกพลังงานนี้ได้อย่างไร"""

MAJOR_ARCANA_INSTRUCTIONS = """

**4. ไพ่เมเจอร์อาร์คานา (Major Arcana)**
- เมื่อมีไพ่ Major Arcana ให้เน้นย้ำความสำคัญของมัน
- Major Arcana แทนธีมชีวิตใหญ่ บทเรียนสำคัญ หรือจุดเปลี่ยนที่สำคัญ
- อธิบายว่าไพ่นี้บอกอะไรเกี่ยวกับเส้นทางชีวิตหรือการเติบโตของผู้ถาม"""

ACTIONABLE_INSTRUCTIONS = """

**5. คำแนะนำที่นำไปปฏิบัติได้**
- ในส่วน "แนวทางที่ควรทำ" ให้ขั้นตอนที่ชัดเจน เรียงลำดับ
- ระบุกรอบเวลาที่เฉพาะเจาะจง (วัน สัปดาห์ เดือน)
- ให้คำแนะนำที่ผู้ถามสามารถควบคุมได้ ไม่ใช่สิ่งที่ขึ้นกับคนอื่น

**6. สัญลักษณ์และความหมายเชิงลึก**
- อ้างอิงสัญลักษณ์ในไพ่เมื่อเหมาะสม (เช่น "ดาบในไพ่นี้แทนความคิดที่คม")
- เชื่อมโยงกับความหมายดั้งเดิม (archetypal meanings) ของไพ่
- ใช้ภาพพจน์ที่ช่วยให้เข้าใจง่ายขึ้น

**7. สมดุลระหว่างความหวังและความจริง**
- หลีกเลี่ยงการทำนายแบบเด็ดขาด 100% (เช่น "คุณจะสำเร็จแน่นอน")
- ใช้ภาษาที่แสดงแนวโน้มและโอกาส (เช่น "มีโอกาสสูง", "แนวโน้มบ่งชี้ว่า")
- แม้สถานการณ์ยาก ก็ให้ความหวังและทางออกที่สมจริง"""

SPREAD_INSTRUCTIONS: dict[int, str] = {
    1: """### คำแนะนำเฉพาะสำหรับไพ่ 1 ใบ
- โฟกัสที่ข้อความหลักของไพ่ใบนี้
- ให้คำแนะนำที่กระชับแต่ลึกซึ้ง
- เหมาะสำหรับคำแนะนำรายวันหรือคำถามเฉพาะเจาะจง
- ไม่ต้องยืดยาว เน้นความชัดเจนและนำไปปฏิบัติได้""",
    2: """### คำแนะนำเฉพาะสำหรับไพ่ 2 ใบ (Choice/Duality)
- **ไพ่ใบที่ 1 (ทางเลือก A)**: วิเคราะห์ข้อดี ข้อเสีย พลังงาน และแนวโน้มของทางเลือกนี้
- **ไพ่ใบที่ 2 (ทางเลือก B)**: วิเคราะห์ข้อดี ข้อเสีย พลังงาน และแนวโน้มของทางเลือกนี้
- เปรียบเทียบทั้งสองทางเลือกอย่างชัดเจน ชี้ให้เห็นความแตกต่าง
- ให้คำแนะนำว่าทางไหนเหมาะกับสถานการณ์มากกว่า พร้อมเหตุผล
- ไม่ตัดสินใจแทนผู้ถาม แต่ให้ข้อมูลเพียงพอเพื่อตัดสินใจ""",
    3: """### คำแนะนำเฉพาะสำหรับไพ่ 3 ใบ (Past-Present-Future)
- **ไพ่ใบที่ 1 (อดีต)**: อธิบายพื้นฐานหรือสาเหตุที่นำมาสู่สถานการณ์ปัจจุบัน
- **ไพ่ใบที่ 2 (ปัจจุบัน)**: วิเคราะห์สถานการณ์ที่กำลังเผชิญอยู่
- **ไพ่ใบที่ 3 (อนาคต)**: บอกแนวโน้มหรือผลลัพธ์ที่เป็นไปได้
- วิเคราะห์การไหลของเรื่องราว (narrative flow) จากอดีตสู่อนาคต
- ชี้ให้เห็นว่าอดีตส่งผลต่อปัจจุบันอย่างไร และปัจจุบันจะนำไปสู่อนาคตอย่างไร""",
    4: """### คำแนะนำเฉพาะสำหรับไพ่ 4 ใบ (Action Plan Spread)
- **ไพ่ใบที่ 1 (สถานการณ์)**: อธิบายสถานการณ์ปัจจุบันที่ผู้ถามกำลังเผชิญ
- **ไพ่ใบที่ 2 (อุปสรรค)**: ระบุอุปสรรค ความท้าทาย หรือสิ่งที่ขัดขวางความสำเร็จ
- **ไพ่ใบที่ 3 (คำแนะนำ)**: ให้คำแนะนำที่ชัดเจนว่าควรทำอย่างไร ขั้นตอนปฏิบัติ
- **ไพ่ใบที่ 4 (ผลลัพธ์)**: บอกผลลัพธ์ที่เป็นไปได้หากทำตามคำแนะนำ
- วิเคราะห์ความเชื่อมโยงระหว่าง 4 ตำแหน่ง เป็นแผนปฏิบัติการที่ชัดเจน
- ให้กรอบเวลาที่เฉพาะเจาะจงในส่วนคำแนะนำ""",
    10: """### คำแนะนำเฉพาะสำหรับไพ่ 10 ใบ (Celtic Cross)
- **ตำแหน่งที่ 1-2**: สถานการณ์หลักและสิ่งที่ขัดขวาง/สนับสนุน
- **ตำแหน่งที่ 3-4**: รากฐาน (อดีต) และอนาคตใกล้
- **ตำแหน่งที่ 5-6**: เป้าหมายและจิตใต้สำนึก
- **ตำแหน่งที่ 7-10**: ตัวตน สิ่งแวดล้อม ความหวัง/กลัว และผลลัพธ์
- ระบุธีมหลักที่ปรากฏซ้ำในหลายตำแหน่ง
- วิเคราะห์ความสัมพันธ์ระหว่างตำแหน่งที่เชื่อมโยงกัน
- ให้ภาพรวมที่ครอบคลุมแต่ไม่สับสน เน้นประเด็นสำคัญ 2-3 ประเด็น
- ในส่วน "แนวทางที่ควรทำ" ให้แผนระยะยาว (1-6 เดือน) แบ่งเป็นขั้นตอน""",
}


def format_card_lines(cards: list[DrawnCard]) -> str:
    """Render drawn cards as numbered ``name (orientation) => meaning`` lines."""
    return "\n".join(
        f"{index}. {drawn.card.name} ({drawn.orientation_th}) => {drawn.meaning}"
        for index, drawn in enumerate(cards, start=1)
    )


def build_tarot_instructions(params: TarotPromptParams) -> str:
    """Compose base, conditional and spread-specific instructions.

    Raises:
        TemplateError: If the spread size has no instruction block
    """
    spread_instructions = SPREAD_INSTRUCTIONS.get(params.spread_type)
    if spread_instructions is None:
        raise TemplateError("INVALID_PARAMS", [f"Unsupported spread size: {params.spread_type}"])

    has_reversed = any(drawn.orientation == Orientation.REVERSED for drawn in params.cards)
    has_major = any(drawn.card.arcana == "major" for drawn in params.cards)

    return (
        BASE_INSTRUCTIONS
        + (REVERSED_INSTRUCTIONS if has_reversed else "")
        + (MAJOR_ARCANA_INSTRUCTIONS if has_major else "")
        + ACTIONABLE_INSTRUCTIONS
        + "\n\n"
        + spread_instructions
    )


def format_tarot_user_data(params: TarotPromptParams) -> str:
    question = (params.question or "").strip() or NO_QUESTION_TEXT
    count = params.count if params.count is not None else len(params.cards)
    return f"""## ข้อมูลการอ่านไพ่

คำถามผู้ใช้: {question}
จำนวนไพ่: {count}
ไพ่ที่เปิดได้:
{format_card_lines(params.cards)}"""


def build_tarot_prompt(params: TarotPromptParams, *, knowledge_base: str = "") -> str:
    """Build a complete tarot reading prompt.

    Args:
        params: Drawn cards, spread size and optional question
        knowledge_base: Pre-formatted knowledge block (may be empty)

    Returns:
        Prompt string ready for the LLM

    Raises:
        TemplateError: If no cards were drawn or the spread size is unsupported
    """
    if not params.cards:
        raise TemplateError("INVALID_PARAMS", ["Tarot prompt requires at least one card"])

    return (
        PromptBuilder(
            instructions=build_tarot_instructions(params),
            user_data=format_tarot_user_data(params),
        )
        .with_role(TAROT_ROLE)
        .with_knowledge_base(knowledge_base)
        .with_cultural_context(get_context_for_divination_type(DivinationType.TAROT))
        .with_few_shot_examples(select_tarot_examples(params.spread_type))
        .build()
    )
