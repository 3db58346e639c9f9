from decimal import Decimal, ROUND_HALF_UP
import re

"""字符串中获取价格、金额计算"""

CENT = Decimal("0.01")


def parse_money(text: str) -> Decimal:
    """
        从 'Item total: $39.98' 提取 Decimal('39.98')
        """
    match = re.search(r"\$([\d.]+)", text)
    assert match, f"无法从文本中解析金额：{text}"
    return Decimal(match.group(1))


def strip_to_number(text: str) -> Decimal:
    """去掉所有非数字字符后转 Decimal：'Tax: $3.20' -> Decimal('3.20')"""
    digits = re.sub(r"[^0-9.]", "", text)
    assert digits, f"文本中没有数字：{text}"
    return Decimal(digits)


def round_money(value: Decimal) -> Decimal:
    # 四舍五入到分
    return value.quantize(CENT, rounding=ROUND_HALF_UP)
