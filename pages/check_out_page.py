import logging
from decimal import Decimal
from enum import Enum

from playwright.sync_api import Page

from config.locators import CHECKOUT_LOCATORS
from config.pages import PAGE_TITLES, URL_PATTERNS
from config.settings import TIMEOUTS
from data.checkout_data import TAX_RATE
from data.models import CartItem, CheckoutInformation, CheckoutTotals
from pages.base_page import BasePage
from assertions.check_out_assert import CheckOutAssert
from utils.common_utils import parse_money, strip_to_number
from utils.waits import probe

logger = logging.getLogger(__name__)


class CheckoutStep(Enum):
    INFORMATION = PAGE_TITLES["checkout_information"]
    OVERVIEW = PAGE_TITLES["checkout_overview"]
    COMPLETE = PAGE_TITLES["checkout_complete"]


class CheckoutInformationPage(BasePage):
    """checkout-step-one：收货人信息"""

    def __init__(self, page: Page):
        super().__init__(page)
        self.firstName_input = page.locator(CHECKOUT_LOCATORS["firstName_input"])  # firstName输入框
        self.lastName_input = page.locator(CHECKOUT_LOCATORS["lastName_input"])  # lastName输入框
        self.postalCode_input = page.locator(CHECKOUT_LOCATORS["postalCode_input"])  # postalCode输入框
        self.container_empty_error_msg = page.locator(CHECKOUT_LOCATORS["container_error_msg"])  # 收货人未填写点击下一步错误提示文案
        self.cancel_button = page.locator(CHECKOUT_LOCATORS["step_one_cancel_button"])  # 取消按钮
        self.continue_button = page.locator(CHECKOUT_LOCATORS["continue_button"])  # 继续按钮

    # ========== 页面行为 ==========
    def fill_checkout_information(self, first_name: str, last_name: str, postal_code: str):
        self.fill(self.firstName_input, first_name)
        self.fill(self.lastName_input, last_name)
        self.fill(self.postalCode_input, postal_code)

    def continue_to_overview(self):
        """点击Checkout-step-one页面continue按钮"""
        self.click(self.continue_button)

    def complete_information_step(self, first_name: str, last_name: str, postal_code: str):
        self.fill_checkout_information(first_name, last_name, postal_code)
        self.continue_to_overview()

    def submit(self, info: CheckoutInformation):
        self.complete_information_step(info.first_name, info.last_name, info.postal_code)

    def cancel_checkout(self):
        """点击Checkout-step-one页面cancel按钮，返回购物车"""
        self.click(self.cancel_button)

    # ================= 数据获取 =================
    def is_checkout_information_page_displayed(self) -> bool:
        return self.is_title_displayed(PAGE_TITLES["checkout_information"])

    def is_form_visible(self) -> bool:
        return all(field.is_visible() for field in (self.firstName_input, self.lastName_input, self.postalCode_input))

    def get_error_message(self) -> str:
        if not probe(self.container_empty_error_msg, TIMEOUTS["short"]):
            return ""
        return self.container_empty_error_msg.text_content() or ""

    def is_error_message_displayed(self) -> bool:
        if not probe(self.container_empty_error_msg, TIMEOUTS["short"]):
            return False
        return self.container_empty_error_msg.is_visible()

    # ========== 基本验证 ==========
    def verify_container_empty(self, expect_error_msg: str):
        CheckOutAssert.tips_message(self.get_error_message(), expect_error_msg)
        # 校验失败不跳转
        self.wait_url(URL_PATTERNS["checkout_step_one"])


class CheckoutOverviewPage(BasePage):
    """checkout-step-two：订单确认"""

    def __init__(self, page: Page):
        super().__init__(page)
        self.item_product = page.locator(CHECKOUT_LOCATORS["item_list"])
        # 订单价格
        self.payment_information = page.locator(CHECKOUT_LOCATORS["payment_information"])  # 支付信息value
        self.shipping_information = page.locator(CHECKOUT_LOCATORS["shipping_information"])  # 运费信息value
        self.item_total = page.locator(CHECKOUT_LOCATORS["products_price"])  # 商品总价格
        self.tax = page.locator(CHECKOUT_LOCATORS["tax_price"])  # 税
        self.total = page.locator(CHECKOUT_LOCATORS["order_price"])  # 订单价格
        # 操作步骤
        self.cancel_button = page.locator(CHECKOUT_LOCATORS["step_two_cancel_button"])  # 取消按钮
        self.finish_button = page.locator(CHECKOUT_LOCATORS["finish_button"])  # 完成按钮

    # ========== 页面行为 ==========
    def finish_order(self):
        self.click(self.finish_button)

    def cancel(self):
        """取消订单，返回商品列表"""
        self.click(self.cancel_button)

    # ================= 数据获取 =================
    def is_checkout_overview_page_displayed(self) -> bool:
        return self.is_title_displayed(PAGE_TITLES["checkout_overview"])

    def get_overview_items(self) -> list[CartItem]:
        self.wait_for_element(self.item_product.first)
        items = []
        for i in range(self.item_product.count()):
            row = self.item_product.nth(i)
            items.append(CartItem(
                name=row.locator(CHECKOUT_LOCATORS["item_product_name"]).text_content() or "",
                price=row.locator(CHECKOUT_LOCATORS["item_product_price"]).text_content() or "",
                quantity=row.locator(CHECKOUT_LOCATORS["item_quantity"]).text_content() or ""))
        return items

    def get_payment_info(self) -> str:
        return self.payment_information.text_content() or ""

    def get_shipping_info(self) -> str:
        return self.shipping_information.text_content() or ""

    def get_item_total(self) -> str:
        return self.item_total.text_content() or ""

    def get_tax_amount(self) -> str:
        return self.tax.text_content() or ""

    def get_total_amount(self) -> str:
        return self.total.text_content() or ""

    # ================= 手动计算 =================
    def calculate_expected_totals(self) -> CheckoutTotals:
        return CheckoutTotals.from_items(self.get_overview_items(), TAX_RATE)

    def get_displayed_totals(self) -> CheckoutTotals:
        return CheckoutTotals(item_total=strip_to_number(self.get_item_total()),
                              tax=strip_to_number(self.get_tax_amount()),
                              total=strip_to_number(self.get_total_amount()))

    def verify_checkout_calculations(self) -> bool:
        expected = self.calculate_expected_totals()
        displayed = self.get_displayed_totals()
        if expected != displayed:
            logger.warning("订单金额不一致：预期 %s，页面 %s", expected, displayed)
        return expected == displayed

    # ========== 基本验证 ==========
    def verify_order_base_info(self):
        CheckOutAssert.not_empty(self.get_payment_info())
        CheckOutAssert.not_empty(self.get_shipping_info())
        # 验证item total、tax、total格式
        CheckOutAssert.price_format(self.get_item_total())
        CheckOutAssert.price_format(self.get_tax_amount())
        CheckOutAssert.price_format(self.get_total_amount())

        # 验证商品总价格
        item_sum = sum((item.line_total for item in self.get_overview_items()), Decimal("0"))
        CheckOutAssert.price_equal(item_sum, parse_money(self.get_item_total()))
        # 验证订单总价格
        CheckOutAssert.order_price(parse_money(self.get_item_total()), parse_money(self.get_tax_amount()),
                                   parse_money(self.get_total_amount()))

    def verify_order_products_match_added(self, added_names: list[str]):
        order_names = [item.name for item in self.get_overview_items()]
        CheckOutAssert.product_count(added_names, order_names)
        CheckOutAssert.product_names_match(added_names, order_names)


class CheckoutCompletePage(BasePage):
    """checkout-complete：下单完成"""

    def __init__(self, page: Page):
        super().__init__(page)
        self.complete_header = page.locator(CHECKOUT_LOCATORS["finish_page_message"])
        self.complete_text = page.locator(CHECKOUT_LOCATORS["finish_page_text"])
        self.back_home_button = page.locator(CHECKOUT_LOCATORS["back_home_button"])

    def is_checkout_complete_page_displayed(self) -> bool:
        if not probe(self.complete_header, TIMEOUTS["medium"]):
            return False
        return self.complete_header.is_visible()

    def get_completion_message(self) -> dict:
        return {"header": self.complete_header.text_content() or "",
                "text": self.complete_text.text_content() or ""}

    def back_to_products(self):
        self.click(self.back_home_button)

    def verify_submit_order(self, finish_message: str):
        CheckOutAssert.contains(self.get_completion_message()["header"], finish_message)


class CheckOutPage(BasePage):
    """
    结算流程三个页面的入口：
    - information：收货人信息（step one）
    - overview：订单确认（step two）
    - complete：下单完成
    三个页面各自持有自己的locator，通过 current_step() 判断当前处于哪一步
    """

    def __init__(self, page: Page):
        super().__init__(page)
        self.information = CheckoutInformationPage(page)
        self.overview = CheckoutOverviewPage(page)
        self.complete = CheckoutCompletePage(page)

    def current_step(self):
        """根据页面标题判断当前结算步骤，不在结算流程中返回 None"""
        if not probe(self.page_title, TIMEOUTS["short"]):
            return None
        title = self.get_page_title()
        for step in CheckoutStep:
            if step.value == title:
                return step
        return None
