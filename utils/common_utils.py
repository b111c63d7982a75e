import logging
import re
import time
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from utils.exceptions import WaitTimeoutError

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")


def parse_money(text: str) -> Decimal:
    """
    从 'Item total: $39.98' / '$29.99' 提取 Decimal('39.98')
    去掉所有非数字字符（保留小数点）后按 Decimal 解析
    """
    cleaned = re.sub(r"[^0-9.]", "", text or "")
    try:
        return Decimal(cleaned)
    except InvalidOperation:
        raise ValueError(f"无法从文本中解析金额：{text!r}") from None


def to_cents(value: Decimal) -> Decimal:
    """金额统一保留两位小数"""
    return Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def slug(name: str) -> str:
    """
    商品名称 -> data-test 片段
    'Sauce Labs Backpack' -> 'sauce-labs-backpack'
    """
    return re.sub(r"\s+", "-", name.strip().lower())


def exact_text(text: str):
    """整段文本完全匹配（Playwright has_text 默认是忽略大小写的子串匹配）"""
    return re.compile(f"^{re.escape(text)}$")


def wait_for_condition(condition, timeout: float = 5.0, interval: float = 0.1, message: str = ""):
    """
    轮询等待任意条件成立（Playwright 自带等待表达不了的场景）
    :param condition: 无参可调用对象，返回真值即结束
    :param timeout: 最长等待秒数
    :param interval: 轮询间隔秒数
    :return: condition 最后一次的返回值
    """
    deadline = time.monotonic() + timeout
    while True:
        result = condition()
        if result:
            return result
        if time.monotonic() >= deadline:
            break
        time.sleep(interval)
    logger.debug("wait_for_condition timed out after %ss", timeout)
    raise WaitTimeoutError(message or f"Condition not met within {timeout}s", timeout=timeout)


def generate_test_id(test_name: str) -> str:
    """截图、artifact 命名：非字母数字替换为下划线 + 毫秒时间戳"""
    sanitized = re.sub(r"[^a-z0-9]", "_", test_name, flags=re.IGNORECASE).lower()
    return f"{sanitized}_{int(time.time() * 1000)}"
