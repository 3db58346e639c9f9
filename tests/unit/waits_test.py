from unittest.mock import MagicMock

from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from utils.waits import WaitOutcome, probe


class TestProbe:

    def test_visible(self):
        locator = MagicMock()
        outcome = probe(locator, 3000)
        assert outcome is WaitOutcome.VISIBLE
        assert outcome
        locator.wait_for.assert_called_once_with(state="visible", timeout=3000)

    def test_hidden(self):
        assert probe(MagicMock(), 3000, state="hidden") is WaitOutcome.HIDDEN

    def test_timeout_is_distinguishable_and_falsy(self):
        locator = MagicMock()
        locator.wait_for.side_effect = PlaywrightTimeoutError("Timeout 3000ms exceeded.")
        outcome = probe(locator, 3000)
        assert outcome is WaitOutcome.TIMED_OUT
        assert not outcome
