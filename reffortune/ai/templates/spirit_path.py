"""Two-card spirit path prompt (zodiac card plus soul card).

The answer is markdown with fixed h4 headings, not JSON, so it does not go
through the fortune-structure validator.
"""

from reffortune.ai.cultural.thai_context import get_context_for_divination_type
from reffortune.ai.templates.base import PromptBuilder
from reffortune.ai.types import DivinationType, SpiritPathPromptParams
from reffortune.rag.corpus import build_knowledge_context

SPIRIT_PATH_RAG_SYSTEM_ID = "tarot_th"
UNSPECIFIED_MEANING = "(ไม่ระบุ)"

SPIRIT_PATH_HEADINGS = (
    "ภาพรวมพลังงานของเส้นทางนี้",
    "ไพ่ราศี (Zodiac Card): ความคาดหวังจากโลกภายนอก",
    "ไพ่จิตวิญญาณ (Soul Card): แรงขับลึกและบทเรียนชีวิต",
    "จุดแข็งที่ใช้ได้ทันที (3 ข้อ)",
    "จุดที่ควรระวัง/กับดัก (3 ข้อ)",
    "แผนปฏิบัติ 7 วัน (ทำได้จริง)",
    "คำถามสะท้อนตัวเอง (Journaling)",
)

SPIRIT_PATH_ROLE = """คุณคือที่ปรึกษาทางจิตวิญญาณและนักอ่านไพ่ทาโรต์เชิงจิตวิทยา (ไทย) ของโปรเจกต์ REFFORTUNE

กรอบการทำงาน:
- ตีความ "ไพ่ 2 ใบ" แบบลึกและใช้งานได้จริง: ไพ่ราศี (พลังภายนอก/บทบาทที่โลกคาดหวัง) + ไพ่จิตวิญญาณ (แรงขับภายใน/บทเรียนชีวิต)
- เน้นการแนะนำเชิงปฏิบัติ ไม่ชี้นำให้เชื่อแบบงมงาย และไม่ฟันธงอนาคต
- น้ำเสียง: อบอุ่น สุภาพ จริงใจ แบบโค้ช/ที่ปรึกษา"""


def build_spirit_path_instructions() -> str:
    headings = "\n".join(f"  {index}) #### {title}" for index, title in enumerate(SPIRIT_PATH_HEADINGS, start=1))
    return f"""## ข้อกำหนดรูปแบบคำตอบ

- ตอบเป็น MARKDOWN เท่านั้น
- ต้องมีหัวข้อระดับ h4 (ขึ้นต้นด้วย `#### `) ดังนี้ (ใช้ชื่อหัวข้อให้ตรง):
{headings}

- ในหัวข้อที่เป็นรายการ ให้ใช้ bullet list ด้วย "- "
- หลีกเลี่ยงการพูดเหมือนวินิจฉัยทางการแพทย์/สุขภาพจิต
- ถ้าพูดเรื่องความรัก/การงาน/การเงิน ให้เป็นแนวทาง ไม่ฟันธง

## แนวทางการตีความ
- เปรียบเทียบพลังของไพ่ทั้งสอง: เกื้อหนุนกันตรงไหน? ดึงรั้งกันตรงไหน?
- ให้คำแนะนำเป็น "พฤติกรรม" และ "ขอบเขต" ที่ทำได้จริง
- ใช้ภาษาธรรมชาติ อ่านง่าย แต่คมชัด ไม่ยืดยาวเกินจำเป็น"""


def build_spirit_path_prompt(params: SpiritPathPromptParams, *, knowledge_base: str | None = None) -> str:
    """Build a spirit path prompt.

    Args:
        params: Zodiac and soul cards plus the birth date
        knowledge_base: Pre-formatted knowledge block, retrieved when None
    """
    if knowledge_base is None:
        knowledge_base = build_knowledge_context(
            f"{params.zodiac_card_name}\n{params.soul_card_name}",
            system_id=SPIRIT_PATH_RAG_SYSTEM_ID,
        )

    user_data = f"""## ข้อมูลผู้ใช้

วันเกิด (ค.ศ.): {params.day}/{params.month}/{params.year}

ไพ่ราศี (Zodiac Card): {params.zodiac_card_name}
ความหมายโดยย่อ: {params.zodiac_card_meaning or UNSPECIFIED_MEANING}

ไพ่จิตวิญญาณ (Soul Card): {params.soul_card_name}
ความหมายโดยย่อ: {params.soul_card_meaning or UNSPECIFIED_MEANING}"""

    return (
        PromptBuilder(instructions=build_spirit_path_instructions(), user_data=user_data)
        .with_role(SPIRIT_PATH_ROLE)
        .with_knowledge_base(knowledge_base)
        .with_cultural_context(get_context_for_divination_type(DivinationType.SPIRIT))
        .build()
    )
