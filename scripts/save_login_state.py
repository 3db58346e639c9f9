import logging

from playwright.sync_api import sync_playwright

from config.pages import BASE_URL
from config.settings import HEADLESS, STORAGE_DIR, LOGIN_STATE_FILE
from pages.login_page import LoginPage

logger = logging.getLogger(__name__)


def save_login_state(browser=None):
    """生成登录态 storage/login.json
        传入 browser 时复用测试session的浏览器，否则自己启动chromium
        单独执行该脚本命令：python -m scripts.save_login_state
    """
    if browser is not None:
        _save_with(browser)
        return

    with sync_playwright() as p:
        browser = p.chromium.launch(headless=HEADLESS)
        try:
            _save_with(browser)
        finally:
            browser.close()


def _save_with(browser):
    context = browser.new_context(base_url=BASE_URL)
    try:
        # 使用 Page Object 登录
        login_page = LoginPage(context.new_page())
        login_page.navigate()
        login_page.login_as_standard_user()
        login_page.verify_login_success()

        STORAGE_DIR.mkdir(exist_ok=True)  # 确保storage目录一直存在
        context.storage_state(path=LOGIN_STATE_FILE)  # 保存登录态到login.json
    finally:
        context.close()

    # 再次校验文件
    if not LOGIN_STATE_FILE.exists() or LOGIN_STATE_FILE.stat().st_size == 0:
        raise RuntimeError("‼️ login.json生成失败，请检查浏览器或账号")
    logger.info("✅ login.json 已生成 -> %s", LOGIN_STATE_FILE)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    save_login_state()
