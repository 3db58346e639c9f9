import os
from pathlib import Path

"""运行配置：浏览器、超时、产物目录、重试"""

CI = bool(os.getenv("CI"))
HEADLESS = os.getenv("HEADLESS", "1").lower() not in ("0", "false", "no")

# 浏览器project：名称 -> (playwright浏览器类型, 设备描述符)
# 设备描述符为 None 时使用桌面默认 viewport
BROWSER_PROJECTS = {
    "chromium": ("chromium", None),
    "firefox": ("firefox", None),
    "webkit": ("webkit", None),
    "Mobile Chrome": ("chromium", "Pixel 5"),
    "Mobile Safari": ("webkit", "iPhone 12"),
}
DEFAULT_BROWSER_PROJECT = os.getenv("BROWSER_PROJECT", "chromium")
VIEWPORT = {"width": 1280, "height": 720}


def check_browser_project(name: str) -> str:
    """BROWSER_PROJECT 环境变量作为默认值时 argparse 不校验 choices，这里统一校验"""
    if name not in BROWSER_PROJECTS:
        raise ValueError(f"未知的浏览器project：{name}，可选：{list(BROWSER_PROJECTS)}")
    return name


# 单位：毫秒
TIMEOUTS = {
    "short": 3_000,  # 错误提示等探测
    "medium": 10_000,  # 默认元素等待、expect断言
    "long": 30_000,  # 页面导航
}

# CI 上失败重跑2次，本地不重跑
DEFAULT_RERUNS = 2 if CI else 0

RESULTS_DIR = Path("test-results")
SCREENSHOT_DIR = RESULTS_DIR / "screenshots"
VIDEO_DIR = RESULTS_DIR / "videos"
TRACE_DIR = RESULTS_DIR / "traces"
HTML_REPORT_DIR = RESULTS_DIR / "html-report"
RESULT_DIRS = [RESULTS_DIR, SCREENSHOT_DIR, VIDEO_DIR, TRACE_DIR, HTML_REPORT_DIR]

STORAGE_DIR = Path("storage")
LOGIN_STATE_FILE = STORAGE_DIR / "login.json"
