from playwright.sync_api import Page

from config.locators import LOGIN_LOCATORS
from config.pages import PATHS, URL_PATTERNS
from config.settings import TIMEOUTS
from data.login_data import USERS
from pages.base_page import BasePage
from assertions.login_assert import LoginAssert
from utils.waits import probe


class LoginPage(BasePage):
    def __init__(self, page: Page):
        super().__init__(page)
        self.username_input = page.locator(LOGIN_LOCATORS["username_input"])  # 用户名输入框
        self.password_input = page.locator(LOGIN_LOCATORS["password_input"])  # 密码输入框
        self.login_button = page.locator(LOGIN_LOCATORS["login_button"])  # 登录按钮
        self.error_message = page.locator(LOGIN_LOCATORS["error_msg"])  # 登录校验错误提示信息
        self.login_logo = page.locator(LOGIN_LOCATORS["login_logo"])  # Swag Labs logo
        self.login_credentials = page.locator(LOGIN_LOCATORS["login_credentials"])  # 可用用户名提示

    # ================= 页面行为 =================
    def navigate(self):
        self.goto(PATHS["login"])
        self.wait_for_page_load()

    def open_login(self, login_url: str):
        self.open(login_url)
        self.wait_visible(self.username_input)

    def login(self, username, password):
        self.fill(self.username_input, username)
        self.fill(self.password_input, password)
        self.click(self.login_button)

    def login_as(self, user_key: str):
        user = USERS[user_key]
        self.login(user.username, user.password)

    def login_as_standard_user(self):
        self.login_as("standard")

    def login_as_locked_out_user(self):
        self.login_as("locked_out")

    def login_as_problem_user(self):
        self.login_as("problem")

    def login_as_performance_glitch_user(self):
        self.login_as("performance_glitch")

    def clear_form(self):
        self.username_input.clear()
        self.password_input.clear()

    # ================= 数据获取 =================
    def get_error_message(self) -> str:
        """等待错误提示出现后读取文案，超时直接抛出"""
        self.wait_for_element(self.error_message)
        return self.error_message.text_content() or ""

    def is_error_message_displayed(self) -> bool:
        if not probe(self.error_message, TIMEOUTS["short"]):
            return False
        return self.error_message.is_visible()

    def is_login_page_displayed(self) -> bool:
        return self.login_button.is_visible()

    def is_logo_visible(self) -> bool:
        return self.login_logo.is_visible()

    def get_available_usernames(self) -> list[str]:
        """解析登录页下方提示块：过滤空行以及包含 Password / Accepted 的标题行"""
        credentials_text = self.login_credentials.inner_text()
        if not credentials_text:
            return []
        usernames = []
        for line in credentials_text.split("\n"):
            line = line.strip()
            if line and "Password" not in line and "Accepted" not in line:
                usernames.append(line)
        return usernames

    # ========== 登录校验 ==========
    def verify_login_success(self, pattern: str = URL_PATTERNS["inventory"]):
        self.wait_url(pattern)

    def verify_login_fail(self, expect_msg: str):
        LoginAssert.error_displayed(self.is_error_message_displayed())
        LoginAssert.error_message(self.get_error_message(), expect_msg)
        LoginAssert.stay_on_login_page(self.is_login_page_displayed(), self.get_current_url())
