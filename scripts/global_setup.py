import logging

from config.pages import BASE_URL, ENV
from config.settings import RESULT_DIRS

logger = logging.getLogger(__name__)


def global_setup(browser_project: str, headless: bool, reruns: int, workers: int = 1) -> list:
    """
    测试session开始前执行一次：
    - 创建 test-results/{screenshots,videos,traces,html-report}
    - 打印本次运行的有效配置
    返回本次新建的目录列表
    """
    logger.info("🚀 Starting Sauce Demo Test Suite Setup...")

    created = []
    for path in RESULT_DIRS:
        if not path.exists():
            path.mkdir(parents=True, exist_ok=True)
            created.append(path)
            logger.info("📁 Created directory: %s", path)

    logger.info("🌐 Base URL: %s (env=%s)", BASE_URL, ENV)
    logger.info("🖥️  Project: %s (headless=%s)", browser_project, headless)
    logger.info("👥 Workers: %s", workers)
    logger.info("🔄 Retries: %s", reruns)
    logger.info("✅ Global setup completed successfully!")
    return created
