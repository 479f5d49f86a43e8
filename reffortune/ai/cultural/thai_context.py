"""Thai cultural context blocks injected into divination prompts.

Each block is prose in Thai. ``get_context_for_divination_type`` composes the
blocks that fit a reading type; every type gets Buddhist philosophy plus the
guidance style as its base.
"""

from typing import Literal

from reffortune.ai.types import DivinationType

CulturalElement = Literal["philosophy", "astrology", "numerology", "guidance"]

THAI_BUDDHIST_PHILOSOPHY = """
คำแนะนำนี้สะท้อนหลักธรรมพุทธศาสนา:
- กฎแห่งกรรม: การกระทำในปัจจุบันสร้างผลในอนาคต ทุกการตัดสินใจมีผลที่ตามมา
- การทำบุญ: การสร้างคุณงามความดีนำมาซึ่งผลดี ทั้งในปัจจุบันและอนาคต
- สติและสมาธิ: การตระหนักรู้และมีสมาธิช่วยให้ตัดสินใจอย่างชาญฉลาด
- ทางสายกลาง: หลีกเลี่ยงความสุดโต่งทั้งสองด้าน รักษาสมดุลในชีวิต
- อนิจจัง: ทุกสิ่งเปลี่ยนแปลงได้ ไม่มีอะไรถาวร ดังนั้นต้องปรับตัวและยอมรับการเปลี่ยนแปลง
"""

THAI_ASTROLOGY_CONCEPTS = """
โหราศาสตร์ไทยเชื่อว่า:
- ดวงชะตาเป็นแนวทาง ไม่ใช่คำตัดสิน: ดวงบอกแนวโน้มและโอกาส แต่การกระทำของเราเปลี่ยนแปลงผลลัพธ์ได้
- ฤกษ์ยามมีผลต่อความสำเร็จ: การเลือกเวลาที่เหมาะสมช่วยเพิ่มโอกาสความสำเร็จ
- ธาตุทั้งสี่ต้องสมดุล: ดิน น้ำ ลม ไฟ ต้องอยู่ในสมดุลเพื่อชีวิตที่ราบรื่น
- พลังงานจักรวาล: ดวงดาว ตัวเลข และสัญลักษณ์ล้วนมีพลังงานที่ส่งผลต่อชีวิต
- การเชื่อมโยงระหว่างจิตใจและโชคชะตา: จิตใจที่ดีดึงดูดสิ่งดีๆ มาสู่ชีวิต
"""

THAI_NUMEROLOGY_BELIEFS = """
ความเชื่อเรื่องตัวเลขในวัฒนธรรมไทย:
- เลข 9 เป็นเลขมงคลสูงสุด: หมายถึงความก้าวหน้า การเติบโต และการบรรลุเป้าหมาย
- เลข 8 หมายถึงความมั่งคั่ง: เป็นเลขแห่งโชคลาภและความอุดมสมบูรณ์
- เลข 6 หมายถึงความราบรื่น: ชีวิตที่สงบสุข ไม่มีอุปสรรค
- เลข 5 หมายถึงการเปลี่ยนแปลง: พลังงานแห่งการเคลื่อนไหวและโอกาสใหม่
- เลข 3 หมายถึงความคิดสร้างสรรค์: การสื่อสาร การแสดงออก
- เลข 1 หมายถึงการเริ่มต้น: ความเป็นผู้นำ ความมั่นใจ
- เลขรวมและเลขรากมีความหมาย: การรวมตัวเลขและลดเหลือหลักเดียวเผยให้เห็นพลังงานแท้จริง
- การจัดเรียงตัวเลขมีผล: ลำดับของตัวเลขสร้างพลังงานที่แตกต่างกัน
"""

THAI_GUIDANCE_STYLE = """
น้ำเสียงการให้คำแนะนำแบบไทย:
- อบอุ่น เป็นกันเอง ไม่ตัดสิน: ให้คำแนะนำด้วยความเมตตา ไม่ทำให้รู้สึกแย่
- ตรงไปตรงมาแต่ไม่ทำร้ายจิตใจ: บอกความจริงอย่างนุ่มนวล มีเหตุผล
- ให้กำลังใจและมองโอกาสในวิกฤต: แม้สถานการณ์ยาก ก็มองหาทางออกและบทเรียน
- เน้นสิ่งที่ทำได้ ไม่ใช่แค่ทำนาย: ให้แนวทางปฏิบัติที่ชัดเจน มีขั้นตอน
- ใช้ภาษาที่เข้าใจง่าย: หลีกเลี่ยงศัพท์เทคนิคที่ซับซ้อน ใช้คำที่คนทั่วไปเข้าใจ
- สร้างความหวังโดยไม่หลอกลวง: ให้ความหวังที่สมจริง ไม่สร้างความคาดหวังเกินจริง
- เคารพการตัดสินใจของผู้ฟัง: ให้ข้อมูลและแนวทาง แต่ไม่บังคับหรือขู่เข็ญ
"""

THAI_DIVINATION_CONTEXT: dict[CulturalElement, str] = {
    "philosophy": THAI_BUDDHIST_PHILOSOPHY,
    "astrology": THAI_ASTROLOGY_CONCEPTS,
    "numerology": THAI_NUMEROLOGY_BELIEFS,
    "guidance": THAI_GUIDANCE_STYLE,
}

_EXTRA_ELEMENTS: dict[DivinationType, tuple[CulturalElement, ...]] = {
    DivinationType.TAROT: ("astrology",),
    DivinationType.SPIRIT: ("astrology", "numerology"),
    DivinationType.NUMEROLOGY: ("numerology",),
    DivinationType.CHAT: (),
}


def get_context_for_divination_type(divination_type: DivinationType) -> str:
    """Compose the cultural context block for a reading type.

    Args:
        divination_type: Reading type

    Returns:
        Base context (philosophy and guidance) followed by type-specific blocks
    """
    blocks = [THAI_BUDDHIST_PHILOSOPHY, THAI_GUIDANCE_STYLE]
    blocks.extend(THAI_DIVINATION_CONTEXT[key] for key in _EXTRA_ELEMENTS[divination_type])
    return "\n\n".join(blocks)


def get_cultural_element(key: CulturalElement) -> str:
    """Return a single cultural block by key."""
    return THAI_DIVINATION_CONTEXT[key]
