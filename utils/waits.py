import logging
from enum import Enum

from playwright.sync_api import Locator, TimeoutError as PlaywrightTimeoutError

logger = logging.getLogger(__name__)


class WaitOutcome(Enum):
    """有界等待的结果，区分“确认出现”和“超时无法确定”"""
    VISIBLE = "visible"
    HIDDEN = "hidden"
    TIMED_OUT = "timed_out"

    def __bool__(self):
        return self is not WaitOutcome.TIMED_OUT


def probe(locator: Locator, timeout: float, state: str = "visible") -> WaitOutcome:
    """
    等待 locator 达到 state（visible / hidden），超时不抛异常而返回 TIMED_OUT。
    页面对象的 is_xxx_displayed / get_xxx_message 基于它把超时收敛为 False / ""。
    """
    try:
        locator.wait_for(state=state, timeout=timeout)
    except PlaywrightTimeoutError:
        logger.debug("等待 %s 变为 %s 超时（%sms）", locator, state, timeout)
        return WaitOutcome.TIMED_OUT
    return WaitOutcome.VISIBLE if state == "visible" else WaitOutcome.HIDDEN
