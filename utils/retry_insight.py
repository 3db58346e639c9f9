import allure

"""重跑分析：根据每次 attempt 的结果生成 Retry Insight"""

PASSED = "PASSED"
FAILED = "FAILED"


def build_retry_insight(attempts: list[dict]) -> list[str]:
    """生成RetryInsight文本；attempts 按执行顺序记录每次 call 阶段结果"""
    lines = []
    if not attempts:
        return lines

    failed = [a for a in attempts if a["status"] == FAILED]
    passed = [a for a in attempts if a["status"] == PASSED]

    if failed and passed:
        lines += [f"• Failed {len(failed)} time(s), then passed on retry", "• Likely flaky test (unstable behavior)"]
    elif len(failed) == len(attempts):
        lines.append(f"• All {len(attempts)} attempts failed")

    errors = {a["error"] for a in failed if a["error"]}
    if len(failed) > 1 and len(errors) == 1:
        lines.append("• Same error across failed attempts")
    elif len(errors) > 1:
        lines.append("• Error message changed between attempts")

    urls = {a["url"] for a in failed if a["url"]}
    if len(urls) > 1:
        lines.append("• Failed at different URLs")
    return lines


def should_attach(attempts: list[dict], max_attempts: int) -> bool:
    """最后一次失败，或失败后重跑通过（flaky）时才需要 attach"""
    if not attempts or not any(a["status"] == FAILED for a in attempts):
        return False
    last = attempts[-1]
    return last["status"] == PASSED or last["attempt"] >= max_attempts


def attach_retry_insight(attempts: list[dict]):
    lines = build_retry_insight(attempts)
    if lines:
        allure.attach("\n".join(lines), name="🧠 Retry Insight", attachment_type=allure.attachment_type.TEXT)
