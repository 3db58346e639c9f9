import logging
from decimal import Decimal

from playwright.sync_api import Page, expect, Error as PlaywrightError

from config.locators import CART_LOCATORS
from config.pages import PAGE_TITLES
from data.models import CartItem
from pages.base_page import BasePage
from assertions.cart_assert import CartAssert
from utils.common_utils import round_money

logger = logging.getLogger(__name__)


class CartPage(BasePage):
    def __init__(self, page: Page):
        super().__init__(page)

        self.cart_list = page.locator(CART_LOCATORS["cart_list"])  # 购物车列表
        self.cart_items = page.locator(CART_LOCATORS["cart_item"])  # 购物车商品行
        self.cart_item_names = page.locator(f'{CART_LOCATORS["cart_item"]} {CART_LOCATORS["item_product_name"]}')
        self.remove_product_button = page.locator(CART_LOCATORS["remove_product_button"])  # remove商品按钮
        self.continue_shopping_button = page.locator(CART_LOCATORS["continue"])  # continue-shopping按钮
        self.checkout_button = page.locator(CART_LOCATORS["checkout_button"])  # checkout按钮

    # ================= 页面行为 =================
    def _row_index(self) -> dict[str, int]:
        """一次读取购物车全部商品名称，建立 名称 -> 行下标 映射"""
        return {name.strip(): i for i, name in enumerate(self.get_cart_item_names())}

    def remove_item_from_cart(self, item_name: str):
        index = self._row_index()
        if item_name not in index:
            raise LookupError(f"购物车中不存在商品：{item_name}，当前商品：{list(index)}")
        self.click(self.cart_items.nth(index[item_name]).locator(CART_LOCATORS["remove_product_button"]))

    def remove_all_items_from_cart(self):
        """每次点击当前第一个Remove，等行数减少后再点下一个"""
        remaining = self.cart_items.count()
        while remaining > 0:
            self.click(self.remove_product_button.first)
            remaining -= 1
            expect(self.cart_items).to_have_count(remaining)

    def continue_shopping(self):
        self.click(self.continue_shopping_button)

    def proceed_to_checkout(self):
        self.click(self.checkout_button)

    # ================= 数据获取 =================
    def is_cart_page_displayed(self) -> bool:
        return self.is_title_displayed(PAGE_TITLES["cart"])

    def is_cart_empty(self) -> bool:
        try:
            return self.cart_items.count() == 0
        except PlaywrightError as e:
            logger.debug("查询购物车商品行失败，按空购物车处理：%s", e)
            return True

    def get_cart_item_count(self) -> int:
        """购物车页面的商品行数"""
        if self.is_cart_empty():
            return 0
        return self.cart_items.count()

    def get_cart_badge_count(self) -> int:
        return super().get_cart_item_count()

    def _read_row(self, row) -> CartItem:
        return CartItem(
            name=row.locator(CART_LOCATORS["item_product_name"]).text_content() or "",
            price=row.locator(CART_LOCATORS["item_product_price"]).text_content() or "",
            quantity=row.locator(CART_LOCATORS["item_quantity"]).text_content() or "",
        )

    def get_cart_items(self) -> list[CartItem]:
        """ 保存购物车页面商品信息list"""
        self.wait_for_element(self.cart_list)
        return [self._read_row(self.cart_items.nth(i)) for i in range(self.cart_items.count())]

    def get_cart_item_names(self) -> list[str]:
        if self.is_cart_empty():
            return []
        return self.cart_item_names.all_text_contents()

    def is_item_in_cart(self, item_name: str) -> bool:
        if self.is_cart_empty():
            return False
        return item_name in self.get_cart_item_names()

    def get_item_details(self, item_name: str):
        """商品行不可见时返回 None"""
        index = self._row_index()
        if item_name not in index:
            return None
        row = self.cart_items.nth(index[item_name])
        if not row.is_visible():
            return None
        return self._read_row(row)

    def calculate_total_price(self) -> Decimal:
        # 显式指定 sum 初始值="0"
        return round_money(sum((item.line_total for item in self.get_cart_items()), Decimal("0")))

    def get_remove_count(self) -> int:
        return self.get_count(self.remove_product_button)

    # ================= 基础验证 =================
    def verify_cart_items_match(self, added_names: list[str]):
        CartAssert.names_match(added_names, self.get_cart_item_names())
        CartAssert.remove_count(self.get_remove_count(), len(added_names))

    def verify_empty(self):
        CartAssert.cart_empty(self.is_cart_empty())
        CartAssert.cart_badge_count(self.get_cart_badge_count(), 0)
