import logging
import re

from playwright.sync_api import Page, Locator, expect, Error as PlaywrightError

from config.locators import BASE_LOCATORS
from config.settings import SCREENSHOT_DIR, TIMEOUTS
from utils.waits import probe

logger = logging.getLogger(__name__)


class BasePage:
    SCREENSHOT_DIR = SCREENSHOT_DIR

    def __init__(self, page: Page):
        self.page = page
        # 所有页面共有的header元素
        self.menu_button = page.locator(BASE_LOCATORS["menu_button"])  # 菜单按钮
        self.logout_link = page.locator(BASE_LOCATORS["logout_link"])  # Logout
        self.cart_badge = page.locator(BASE_LOCATORS["shopping_cart_badge"])  # 购物车角标
        self.cart_link = page.locator(BASE_LOCATORS["shopping_cart_link"])  # 购物车icon
        self.page_title = page.locator(BASE_LOCATORS["page_title"])  # 页面标题

    # ========= 基础动作 =========
    def open(self, url: str):
        self.page.goto(url)

    def goto(self, url: str):
        self.open(url)

    def click(self, locator):
        locator.scroll_into_view_if_needed()
        locator.click()

    def fill(self, locator, value: str):
        locator.fill(value)

    def text(self, locator) -> str:
        return locator.inner_text()

    def get_texts(self, locator) -> list[str]:
        return [locator.nth(i).inner_text() for i in range(locator.count())]

    def get_attrs(self, locator, attr: str) -> list[str]:
        return [locator.nth(i).get_attribute(attr) for i in range(locator.count())]

    def get_count(self, locator) -> int:
        return locator.count()

    # ========= 等待 =========
    def wait_visible(self, locator):
        expect(locator).to_be_visible()  # 有一个严格模式规则：expect 只能作用在「唯一元素」上，若locator定位到多个元素，则取第一个元素判断

    def wait_url(self, pattern: str):
        expect(self.page).to_have_url(re.compile(pattern))

    def wait_for_page_load(self):
        self.page.wait_for_load_state("domcontentloaded")

    def wait_for_element(self, locator: Locator, timeout: float = TIMEOUTS["medium"]):
        """等待元素可见，超时抛出 playwright TimeoutError"""
        locator.wait_for(state="visible", timeout=timeout)

    # ========= header 公共行为 =========
    def get_title(self) -> str:
        return self.page.title()

    def get_current_url(self) -> str:
        return self.page.url

    def open_menu(self):
        self.click(self.menu_button)
        # 等菜单滑出动画结束，Logout可点击
        self.wait_for_element(self.logout_link)

    def logout(self):
        self.open_menu()
        self.click(self.logout_link)

    def go_to_cart(self):
        self.click(self.cart_link)

    def get_cart_item_count(self) -> int:
        """购物车角标数字；没有角标（空购物车）或读取失败都当作 0"""
        try:
            if self.cart_badge.count() == 0:
                return 0
            return int(self.cart_badge.text_content(timeout=TIMEOUTS["short"]) or 0)
        except (PlaywrightError, ValueError) as e:
            logger.debug("读取购物车角标失败，按0处理：%s", e)
            return 0

    # ========= 辅助 =========
    def take_screenshot(self, name: str):
        self.SCREENSHOT_DIR.mkdir(parents=True, exist_ok=True)
        path = self.SCREENSHOT_DIR / f"{name}.png"
        self.page.screenshot(path=path)
        return path

    def get_page_title(self) -> str:
        return self.page_title.text_content() or ""

    def is_title_displayed(self, expect_title: str) -> bool:
        """页面标题出现且等于 expect_title；等待超时返回 False"""
        if not probe(self.page_title, TIMEOUTS["medium"]):
            return False
        return self.get_page_title() == expect_title
