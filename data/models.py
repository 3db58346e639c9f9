from dataclasses import dataclass
from decimal import Decimal

from utils.common_utils import parse_money, round_money


@dataclass(frozen=True)
class UserCredential:
    username: str
    password: str


@dataclass(frozen=True)
class CheckoutInformation:
    first_name: str
    last_name: str
    postal_code: str

    @property
    def is_complete(self) -> bool:
        return all([self.first_name, self.last_name, self.postal_code])

    def missing_field(self):
        """按页面校验顺序返回第一个为空的字段：first_name > last_name > postal_code"""
        for field in ("first_name", "last_name", "postal_code"):
            if not getattr(self, field):
                return field
        return None


@dataclass(frozen=True)
class Product:
    name: str
    price: str  # 页面显示的价格文本，如 "$29.99"

    @property
    def price_value(self) -> Decimal:
        return parse_money(self.price)


@dataclass(frozen=True)
class CartItem:
    """购物车/订单确认页面读取到的一行商品，字段保持页面原始文本"""
    name: str
    price: str
    quantity: str

    @property
    def line_total(self) -> Decimal:
        return parse_money(self.price) * int(self.quantity)


@dataclass(frozen=True)
class CheckoutTotals:
    item_total: Decimal
    tax: Decimal
    total: Decimal

    @classmethod
    def from_items(cls, items: list, tax_rate: Decimal = Decimal("0.08")) -> "CheckoutTotals":
        """
        item_total = Σ price × quantity
        tax = round(item_total × tax_rate, 2)
        total = round(item_total + tax, 2)
        """
        # 显式指定 sum 初始值="0"
        item_total = sum((item.line_total for item in items), Decimal("0"))
        tax = round_money(item_total * tax_rate)
        return cls(item_total=round_money(item_total), tax=tax, total=round_money(item_total + tax))
