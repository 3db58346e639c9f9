import json
import logging
import shutil
from pathlib import Path

import allure
import pytest
from playwright.sync_api import sync_playwright, expect, Error as PlaywrightError

from config.pages import BASE_URL
from config.settings import (BROWSER_PROJECTS, DEFAULT_BROWSER_PROJECT, DEFAULT_RERUNS, HEADLESS, LOGIN_STATE_FILE,
                             SCREENSHOT_DIR, TIMEOUTS, TRACE_DIR, VIDEO_DIR, VIEWPORT, check_browser_project)
from scripts.global_setup import global_setup
from scripts.save_login_state import save_login_state
from utils.retry_insight import FAILED, PASSED, attach_retry_insight, should_attach

logger = logging.getLogger(__name__)


# ================== Pytest 配置 ==================
def pytest_addoption(parser):
    parser.addoption("--browser-project", action="store", default=DEFAULT_BROWSER_PROJECT,
                     choices=list(BROWSER_PROJECTS), help="浏览器project：chromium / firefox / webkit / Mobile ...")


def pytest_configure(config):
    try:
        check_browser_project(config.getoption("--browser-project"))
    except ValueError as e:
        raise pytest.UsageError(str(e)) from e

    # CI 上未显式指定 --reruns 时默认失败重跑
    if hasattr(config.option, "reruns") and not config.option.reruns:
        config.option.reruns = DEFAULT_RERUNS

    # expect 断言默认超时
    expect.set_options(timeout=TIMEOUTS["medium"])

    # xdist worker 不重复执行全局准备
    if hasattr(config, "workerinput"):
        return
    global_setup(browser_project=config.getoption("--browser-project"),
                 headless=HEADLESS,
                 reruns=getattr(config.option, "reruns", 0) or 0,
                 workers=getattr(config.option, "numprocesses", None) or 1)


# ================== Session Fixtures ==================
@pytest.fixture(scope="session")
def browser_project(request) -> str:
    return request.config.getoption("--browser-project")


@pytest.fixture(scope="session")
def browser_name(browser_project) -> str:
    return BROWSER_PROJECTS[browser_project][0]


@pytest.fixture(scope="session")
def playwright_instance():
    with sync_playwright() as p:
        yield p


@pytest.fixture(scope="session")
def site_available(playwright_instance):
    """站点不可达时跳过全部UI用例，而不是让每条用例超时失败"""
    request_context = playwright_instance.request.new_context()
    try:
        response = request_context.get(BASE_URL, timeout=TIMEOUTS["long"])
    except PlaywrightError as e:
        pytest.skip(f"站点不可达：{BASE_URL}（{e}）")
    finally:
        request_context.dispose()
    if not response.ok:
        pytest.skip(f"站点返回异常状态码：{BASE_URL} -> {response.status}")


@pytest.fixture(scope="session")
def browser(playwright_instance, browser_name, site_available):
    """浏览器只启动一次"""
    try:
        browser = getattr(playwright_instance, browser_name).launch(headless=HEADLESS)
    except PlaywrightError as e:
        pytest.skip(f"浏览器 {browser_name} 启动失败，请执行 playwright install：{e}")
    yield browser
    browser.close()


@pytest.fixture(scope="session")
def login_state(browser):
    """
     每个session重新生成一次 login.json（saucedemo的session cookie会过期）
    """
    logger.info("🔐 生成登录态 %s", LOGIN_STATE_FILE)
    save_login_state(browser)
    return LOGIN_STATE_FILE


# ================== Function Fixtures ==================
def _node_dir(node) -> Path:
    module = node.module.__name__.split(".")[-1]
    cls = node.cls.__name__ if node.cls else "no_class"
    return Path(module) / cls / node.name


@pytest.fixture(scope="function")
def context(browser, browser_project, playwright_instance, request):
    """
    每个测试方法一个全新 context
    - 登录态隔离 都基于 login.json（need_login marker）
    - 视频 + tracing 每个 attempt 单独目录，成功即删除
    """
    attempt = getattr(request.node, "execution_count", 1)
    # 锁定本次 context 对应的 attempt
    request.node._current_attempt = attempt
    # 重跑复用同一个 item，清掉上一次 attempt 的失败标记
    request.node._failed = False

    attempt_dir = _node_dir(request.node) / f"attempt_{attempt}"
    record_video_dir = VIDEO_DIR / attempt_dir
    record_tracing_dir = TRACE_DIR / attempt_dir
    record_video_dir.mkdir(parents=True, exist_ok=True)
    record_tracing_dir.mkdir(parents=True, exist_ok=True)

    need_login = request.node.get_closest_marker("need_login") is not None
    storage_state = request.getfixturevalue("login_state") if need_login else None

    _, device = BROWSER_PROJECTS[browser_project]
    device_args = dict(playwright_instance.devices[device]) if device else {"viewport": VIEWPORT}
    # 设备描述符里的 default_browser_type 不是 new_context 参数
    device_args.pop("default_browser_type", None)

    context = browser.new_context(
        **device_args,
        base_url=BASE_URL,
        storage_state=storage_state,
        record_video_dir=str(record_video_dir))
    context.set_default_timeout(TIMEOUTS["medium"])
    context.set_default_navigation_timeout(TIMEOUTS["long"])
    context.tracing.start(name=str(attempt_dir), screenshots=True, snapshots=True, sources=True)

    yield context

    #  ======== teardown阶段 ========
    trace_path = record_tracing_dir / "trace.zip"
    try:
        context.tracing.stop(path=trace_path)  # trace.zip 在这里真正生成
    finally:
        context.close()  # 一定要先close：video文件只有在context.close()后才会真正落盘

    attempts = getattr(request.node, "_attempts", [])
    max_attempts = (getattr(request.node.config.option, "reruns", 0) or 0) + 1

    #  ======== 执行成功用例删除video、trace ========
    if not getattr(request.node, "_failed", False):
        shutil.rmtree(record_video_dir, ignore_errors=True)
        shutil.rmtree(record_tracing_dir, ignore_errors=True)
        # 失败后重跑通过：flaky，同样 attach 重跑分析
        if should_attach(attempts, max_attempts):
            attach_retry_insight(attempts)
        return

    # ❤️ pytest_runtest_makereport 早于 context teardown，video和trace只能在这里attach
    for video in record_video_dir.glob("*.webm"):
        allure.attach.file(video, name="📎 Video", attachment_type=allure.attachment_type.WEBM)
    if trace_path.exists():
        allure.attach.file(trace_path, name="📎 Playwright-Trace.zip")

    # 只在最后一次 attempt attach 重跑分析
    if should_attach(attempts, max_attempts):
        attach_retry_insight(attempts)


@pytest.fixture(scope="function")
def page(context):
    """每个测试方法一个新 page"""
    page = context.new_page()
    console_error = []  # 这是内存中的list，所有console.error都会被收集

    # page.on("console")是浏览器级别监听,不会因为跳转丢失
    page.on(
        "console",
        lambda msg: console_error.append({
            "type": msg.type,
            "text": msg.text,
            "location": str(msg.location)
        }) if msg.type == "error" else None
    )
    page._console_errors = console_error  # 挂到page上，方便hook里取
    yield page
    page.close()


# ================== Pytest Hook：失败处理 ==================
@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    测试失败时自动保存：
    - 截图
    - URL
    - Console errors
    """
    outcome = yield
    rep = outcome.get_result()

    # 只处理 call 阶段
    if rep.when != "call":
        return

    page = item.funcargs.get("page")
    if not page:
        return

    # 每次 attempt 都记录（通过的也记，用于判断 flaky）
    attempt = getattr(item, "execution_count", 1)
    if not hasattr(item, "_attempts"):
        item._attempts = []
    item._attempts.append({
        "attempt": attempt,
        "status": FAILED if rep.failed else PASSED,
        "duration": round(rep.duration, 2),
        "error": str(rep.longrepr) if rep.failed else "",
        "url": page.url,
    })

    if not rep.failed:
        return

    # 标记失败（跨fixture通信，告诉 context：这是一次失败执行）
    item._failed = True

    base_dir = SCREENSHOT_DIR / _node_dir(item) / f"attempt_{attempt}"
    base_dir.mkdir(parents=True, exist_ok=True)

    screenshot = base_dir / "failure.png"
    try:
        page.screenshot(path=screenshot, full_page=True)
    except PlaywrightError as e:
        logger.warning("失败截图生成失败：%s", e)
    (base_dir / "url.txt").write_text(page.url, encoding="utf-8")
    console = base_dir / "console_errors.json"
    console.write_text(
        json.dumps(getattr(page, "_console_errors", []), indent=2, ensure_ascii=False), encoding="utf-8")

    # ========= 此处attach的报告，在Allure Report 的Test Body位置显示 =========
    if screenshot.exists():
        allure.attach.file(screenshot, name="Failure-Screenshot", attachment_type=allure.attachment_type.PNG)
    allure.attach(page.url, name="Page-Url", attachment_type=allure.attachment_type.TEXT)
    allure.attach.file(console, name="Console-Errors", attachment_type=allure.attachment_type.JSON)

