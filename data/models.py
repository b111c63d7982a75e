"""测试数据、页面读取结果的值对象（只读，单个用例内有效）"""
from dataclasses import dataclass
from decimal import Decimal

from utils.common_utils import slug, to_cents

USER_CATEGORIES = (
    "standard",
    "locked-out",
    "problem",
    "performance-degraded",
    "invalid",
    "missing-field",
)


@dataclass(frozen=True)
class UserCredential:
    key: str
    username: str
    password: str
    category: str


@dataclass(frozen=True)
class Product:
    key: str
    name: str
    price: Decimal

    @property
    def slug(self) -> str:
        """add-to-cart-{slug} / remove-{slug}"""
        return slug(self.name)


@dataclass(frozen=True)
class CheckoutInfo:
    key: str
    first_name: str
    last_name: str
    postal_code: str

    def as_form(self) -> dict:
        """按表单字段名返回，顺序即页面校验顺序"""
        return {
            "firstName": self.first_name,
            "lastName": self.last_name,
            "postalCode": self.postal_code,
        }


@dataclass(frozen=True)
class CartLineItem:
    """购物车 / 订单确认页读取到的单行商品"""
    name: str
    price: Decimal
    quantity: int
    description: str


@dataclass(frozen=True)
class OrderTotals:
    subtotal: Decimal
    tax: Decimal
    total: Decimal

    def expected_total(self) -> Decimal:
        return to_cents(self.subtotal + self.tax)

    def is_consistent(self) -> bool:
        """total == subtotal + tax（保留两位小数比较）"""
        return to_cents(self.total) == self.expected_total()
