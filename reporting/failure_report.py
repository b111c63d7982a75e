"""
失败用例报告：
- classify_failure: 区分“断言失败 / 等待超时 / 测试数据缺失”
- build_retry_insight / render_attempt_summary: 多次 attempt（pytest-rerunfailures）的汇总
"""
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from utils.exceptions import FixtureLookupError, WaitTimeoutError

ASSERTION = "assertion"
TIMEOUT = "timeout"
FIXTURE = "fixture"
ERROR = "error"

KIND_LABELS = {
    ASSERTION: "app behaved differently (assertion failed)",
    TIMEOUT: "app too slow / never responded (wait timeout)",
    FIXTURE: "missing test data (fixture lookup)",
    ERROR: "unexpected error",
}


def classify_failure(exc) -> str:
    if isinstance(exc, (WaitTimeoutError, PlaywrightTimeoutError)):
        return TIMEOUT
    if isinstance(exc, FixtureLookupError):
        return FIXTURE
    if isinstance(exc, AssertionError):
        return ASSERTION
    return ERROR


def build_retry_insight(attempts: list[dict]) -> list[str]:
    """生成RetryInsight文本"""
    lines = []

    failed = [a for a in attempts if a["status"] == "FAILED"]
    passed = [a for a in attempts if a["status"] == "PASSED"]

    if failed and passed:
        lines += [f"• Failed {len(failed)} times, then passed on retry", "• Likely flaky test (unstable behavior)"]
    elif attempts and len(failed) == len(attempts):
        lines.append(f"• All {len(attempts)} attempts failed")

    kinds = {a.get("kind") for a in failed if a.get("kind")}
    if len(kinds) == 1:
        lines.append(f"• Failure kind: {KIND_LABELS[kinds.pop()]}")
    elif len(kinds) > 1:
        lines.append("• Failure kind changed between attempts: " + ", ".join(sorted(kinds)))

    errors = {a["error"] for a in failed if a.get("error")}
    if len(errors) == 1:
        lines.append("• Same error across failed attempts")
    elif len(errors) > 1:
        lines.append("• Error message changed between attempts")

    urls = {a["url"] for a in attempts if a.get("url")}
    if len(urls) > 1:
        lines.append("• Failed at different URLs")
    return lines


def render_attempt_summary(attempts: list[dict]) -> str:
    """Attempt Summary 纯文本，附加到 allure"""
    chain = " → ".join(
        f"Attempt {a['attempt']} {'FAILED' if a['status'] == 'FAILED' else 'PASSED'}" for a in attempts)
    out = ["Attempt Summary", chain, ""]
    for a in attempts:
        out.append(f"[Attempt {a['attempt']}] {a['status']} in {a.get('duration', 0)}s")
        if a.get("kind"):
            out.append(f"  kind: {KIND_LABELS.get(a['kind'], a['kind'])}")
        if a.get("url"):
            out.append(f"  url: {a['url']}")
        artifacts = [name for name in ("screenshot", "video", "trace") if a.get(f"has_{name}")]
        if artifacts:
            out.append(f"  artifacts: {', '.join(artifacts)}")
    insight = build_retry_insight(attempts)
    if insight:
        out += ["", "Retry Insight"] + insight
    return "\n".join(out)
