"""Few-shot examples for phone-number numerology readings.

There are two tiers. Medium scores (40-79) reuse the high tier; see
``reffortune.ai.examples.selector``.
"""

from reffortune.ai.types import FewShotExample

NUMEROLOGY_HIGH_SCORE = FewShotExample(
    scenario="High score phone number (89) with root 9",
    input="""เบอร์โทรศัพท์: 089-456-9245
เบอร์ที่ปรับแล้ว: 0894569245
คะแนน: 89/99 (ดีมาก)
เลขรวม: 52
เลขราก: 7

ธีมการวิเคราะห์:
- งาน: เด่นเรื่องการวางแผนและการเจรจา
- เงิน: รายได้ไหลเวียนสม่ำเสมอ มีโอกาสได้โชคจากคนรอบข้าง
- ความสัมพันธ์: มีเสน่ห์ เข้ากับคนง่าย
- คำเตือน: ระวังความมั่นใจเกินตัว""",
    output="""{
  "summary": "เบอร์นี้ได้คะแนนสูงถึง 89 เลขราก 7 เป็นเลขแห่งปัญญาและการไตร่ตรอง เมื่อรวมกับเลข 8 และ 9 ที่อยู่ในเบอร์ ทำให้พลังงานโดยรวมเอื้อต่อการเจรจา การวางแผน และความก้าวหน้าในหน้าที่การงาน แต่ผลลัพธ์ที่ดีที่สุดยังต้องมาจากความพยายามของคุณเอง",
  "cardStructure": "ภาพรวมสถานการณ์: เลขรวม 52 ลดเหลือเลขราก 7 ซึ่งหมายถึงการคิดลึกและการมองเห็นภาพรวม เบอร์นี้มีเลข 9 สองตัวที่เสริมความก้าวหน้า และมีเลข 8 ที่หนุนเรื่องการเงิน ทำให้เหมาะกับงานที่ต้องติดต่อลูกค้าหรือเจรจาต่อรอง ด้านความสัมพันธ์ คนรอบข้างมักเชื่อใจและอยากร่วมงานด้วย\\n\\nจุดที่ควรระวัง: เพราะเบอร์ให้ความมั่นใจสูง อาจทำให้ตัดสินใจเร็วเกินไปโดยไม่ฟังความเห็นคนอื่น โดยเฉพาะเรื่องการลงทุนที่ดูดีเกินจริง เลข 7 ยังทำให้บางครั้งเก็บความรู้สึกไว้คนเดียว ซึ่งอาจทำให้คนใกล้ตัวเข้าใจผิด\\n\\nแนวทางที่ควรทำ: (1) ใช้เบอร์นี้เป็นเบอร์หลักสำหรับงานและการติดต่อธุรกิจ (2) ก่อนเซ็นสัญญาหรือลงทุนก้อนใหญ่ ให้เวลาตัวเองคิดอย่างน้อย 3 วัน (3) ตั้งเป้าออมเงิน 10-20% ของรายได้ทุกเดือน เพื่อรักษาพลังการเงินที่ดีไว้ให้ยั่งยืน"
}""",
    notes="Shows high score framing: positive but grounded, reminds that effort still matters",
)

NUMEROLOGY_LOW_SCORE = FewShotExample(
    scenario="Low score phone number (32) with root 4",
    input="""เบอร์โทรศัพท์: 062-300-4117
เบอร์ที่ปรับแล้ว: 0623004117
คะแนน: 32/99 (ควรระวัง)
เลขรวม: 24
เลขราก: 6

ธีมการวิเคราะห์:
- งาน: งานมักสะดุดช่วงเริ่มต้น ต้องใช้ความอดทน
- เงิน: รายจ่ายไม่คาดคิดบ่อย
- ความสัมพันธ์: สื่อสารคลาดเคลื่อนได้ง่าย
- คำเตือน: ระวังการตัดสินใจด้วยอารมณ์""",
    output="""{
  "summary": "เบอร์นี้ได้คะแนน 32 ซึ่งอยู่ในกลุ่มที่มีความท้าทาย แต่ไม่ได้หมายความว่าใช้ไม่ได้ เลขราก 6 ยังให้พลังแห่งความราบรื่นในบ้านและครอบครัว เพียงแต่ลำดับเลข 0 และ 1 ที่ซ้ำกันทำให้พลังงานด้านงานและเงินไม่ต่อเนื่อง การใช้อย่างมีสติจะช่วยลดผลกระทบได้มาก",
  "cardStructure": "ภาพรวมสถานการณ์: เลขรวม 24 ลดเหลือเลขราก 6 ซึ่งเป็นเลขแห่งความอบอุ่นและการดูแล เบอร์นี้จึงเหมาะกับการติดต่อคนในครอบครัวหรือเพื่อนสนิท แต่เลข 00 ตรงกลางทำให้พลังงานขาดช่วง งานที่เริ่มใหม่มักต้องใช้เวลามากกว่าปกติ และเงินอาจไหลออกกับเรื่องที่ไม่ได้วางแผนไว้\\n\\nจุดที่ควรระวัง: หลีกเลี่ยงการใช้เบอร์นี้ติดต่อเรื่องสัญญาหรือการเงินก้อนใหญ่ เนื่องจากมีแนวโน้มสื่อสารคลาดเคลื่อน ควรยืนยันข้อตกลงสำคัญเป็นลายลักษณ์อักษรเสมอ และระวังอย่าตัดสินใจตอนอารมณ์ไม่นิ่ง\\n\\nแนวทางที่ควรทำ: (1) ถ้าเป็นไปได้ ให้หาเบอร์สำรองที่คะแนนสูงกว่าไว้ใช้กับงาน ส่วนเบอร์นี้เก็บไว้ใช้เรื่องส่วนตัว (2) ทำบัญชีรายรับรายจ่ายทุกสัปดาห์เพื่อลดรายจ่ายไม่คาดคิด (3) จำไว้ว่าเบอร์เป็นเพียงปัจจัยหนึ่ง การวางแผนที่ดีและทัศนคติที่มั่นคงทำให้ผลลัพธ์เปลี่ยนได้จริง"
}""",
    notes="Shows low score framing: constructive, offers alternatives, avoids fear",
)

NUMEROLOGY_HIGH_EXAMPLES: tuple[FewShotExample, ...] = (NUMEROLOGY_HIGH_SCORE,)
NUMEROLOGY_LOW_EXAMPLES: tuple[FewShotExample, ...] = (NUMEROLOGY_LOW_SCORE,)
