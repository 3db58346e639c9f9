import logging
from decimal import Decimal

from playwright.sync_api import Page, expect

from config.locators import INVENTORY_LOCATORS
from config.pages import PAGE_TITLES, PATHS
from data.inventory_data import SORT_OPTIONS
from pages.base_page import BasePage
from assertions.inventory_assert import InventoryAssert
from utils.common_utils import parse_money

logger = logging.getLogger(__name__)


class InventoryPage(BasePage):
    def __init__(self, page: Page):
        super().__init__(page)
        # 商品列表
        self.item_product = page.locator(INVENTORY_LOCATORS["item_product"])

        # 商品明细
        self.item_product_name = page.locator(INVENTORY_LOCATORS["item_product_name"])
        self.item_product_price = page.locator(INVENTORY_LOCATORS["item_product_price"])
        self.item_product_desc = page.locator(INVENTORY_LOCATORS["item_product_desc"])
        self.item_product_img = page.locator(INVENTORY_LOCATORS["item_product_img"])

        # 加购 / 移除按钮
        self.add_product_button = page.locator(INVENTORY_LOCATORS["add_product_button"])
        self.remove_product_button = page.locator(INVENTORY_LOCATORS["remove_product_button"])

        # 排序下拉框
        self.product_sort_type = page.locator(INVENTORY_LOCATORS["product_sort_type"])

    # ================= 商品行定位 =================
    def _row_index(self) -> dict[str, int]:
        """一次读取全部商品名称，建立 名称 -> 行下标 映射"""
        self.wait_for_element(self.item_product_name.first)
        return {name.strip(): i for i, name in enumerate(self.item_product_name.all_inner_texts())}

    def _row(self, product_name: str):
        index = self._row_index()
        if product_name not in index:
            raise LookupError(f"商品列表中不存在商品：{product_name}，当前商品：{list(index)}")
        return self.item_product.nth(index[product_name])

    # ================= 页面行为 =================
    def open_inventory(self, inventory_url: str = PATHS["inventory"]):
        self.open(inventory_url)
        self.wait_visible(self.item_product.first)

    def add_product_to_cart(self, product_name: str):
        self.click(self._row(product_name).locator(INVENTORY_LOCATORS["add_product_button"]))

    def add_first_product_to_cart(self) -> str:
        first = self.item_product.first
        product_name = self.text(first.locator(INVENTORY_LOCATORS["item_product_name"]))
        self.click(first.locator(INVENTORY_LOCATORS["add_product_button"]))
        return product_name

    def add_multiple_products_to_cart(self, indices: list[int]) -> list[str]:
        """按下标依次加购；同一下标重复出现不会去重"""
        added = []
        for index in indices:
            item = self.item_product.nth(index)
            added.append(self.text(item.locator(INVENTORY_LOCATORS["item_product_name"])))
            self.click(item.locator(INVENTORY_LOCATORS["add_product_button"]))
        return added

    def remove_product_from_cart(self, product_name: str):
        self.click(self._row(product_name).locator(INVENTORY_LOCATORS["remove_product_button"]))

    # 选择排序方式
    def sort_products(self, option: str):
        if option not in SORT_OPTIONS.values():
            raise ValueError(f"不支持的排序方式：{option}，可选：{list(SORT_OPTIONS.values())}")
        self.product_sort_type.select_option(option)
        expect(self.product_sort_type).to_have_value(option)
        logger.info("商品已按 %s 排序", option)

    def click_product_name(self, product_name: str):
        self.click(self._row(product_name).locator(INVENTORY_LOCATORS["item_product_name"]))

    # ================= 数据获取 =================
    def is_inventory_page_displayed(self) -> bool:
        return self.is_title_displayed(PAGE_TITLES["inventory"])

    def get_inventory_item_count(self) -> int:
        self.wait_for_element(self.item_product.first)
        return self.get_count(self.item_product)

    def get_product_names(self) -> list[str]:
        self.wait_for_element(self.item_product_name.first)
        return self.item_product_name.all_inner_texts()

    def get_product_description(self) -> list[str]:
        return self.get_texts(self.item_product_desc)

    def get_product_imgs(self) -> list[str]:
        return self.get_attrs(self.item_product_img, "src")

    def get_product_prices(self) -> list[str]:
        self.wait_for_element(self.item_product_price.first)
        return self.item_product_price.all_inner_texts()

    def get_product_prices_as_number(self) -> list[Decimal]:
        return [parse_money(p) for p in self.get_product_prices()]

    def get_product_details(self, product_name: str) -> dict:
        """保存单商品基本信息"""
        item = self._row(product_name)
        return {
            "name": self.text(item.locator(INVENTORY_LOCATORS["item_product_name"])),
            "price": self.text(item.locator(INVENTORY_LOCATORS["item_product_price"])),
            "description": self.text(item.locator(INVENTORY_LOCATORS["item_product_desc"])),
        }

    def get_catalog(self) -> dict[str, str]:
        """商品名称 -> 价格文本"""
        return dict(zip(self.get_product_names(), self.get_product_prices()))

    def is_product_in_cart(self, product_name: str) -> bool:
        # 按钮变为 Remove 即视为已加购
        return self._row(product_name).locator(INVENTORY_LOCATORS["remove_product_button"]).is_visible()

    # ========== 基础校验 ==========
    def verify_base_info(self, expect_count: int):
        InventoryAssert.product_count(self.get_inventory_item_count(), expect_count)  # 商品数量一致
        InventoryAssert.column_not_empty(self.get_product_names())  # 商品名称非空
        InventoryAssert.column_not_empty(self.get_product_description())  # 商品描述非空
        InventoryAssert.column_not_empty(self.get_product_imgs())  # 商品图片非空
        InventoryAssert.product_price_format(self.get_product_prices())  # 商品价格格式
        InventoryAssert.product_price_is_decimal(self.get_product_prices_as_number())  # 商品价格是Decimal

    def verify_name_asc(self):
        InventoryAssert.sort_asc(self.get_product_names())

    def verify_name_desc(self):
        InventoryAssert.sort_desc(self.get_product_names())

    def verify_price_asc(self):
        InventoryAssert.sort_asc(self.get_product_prices_as_number())

    def verify_price_desc(self):
        InventoryAssert.sort_desc(self.get_product_prices_as_number())
