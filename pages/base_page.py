import logging
import re
from contextlib import contextmanager
from typing import Optional

from playwright.sync_api import Locator, Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from config.settings import SCREENSHOTS_DIR, TIMEOUTS
from utils.common_utils import exact_text, generate_test_id
from utils.exceptions import WaitTimeoutError

logger = logging.getLogger(__name__)


@contextmanager
def wait_budget(action: str, timeout: Optional[float] = None):
    """把 Playwright 的 TimeoutError 转成 WaitTimeoutError，不做重试"""
    try:
        yield
    except PlaywrightTimeoutError as exc:
        logger.warning("timeout: %s", action)
        raise WaitTimeoutError(f"Timed out: {action}", timeout=timeout) from exc


class BasePage:
    """
    所有页面共用的元素级动作。
    Locator 是惰性的：每次调用都会重新查询 DOM，可见/可用状态不要缓存。
    """

    def __init__(self, page: Page):
        self.page = page

    # ========= 基础动作 =========
    def click(self, locator: Locator):
        logger.debug("click %s", locator)
        self.scroll_into_view(locator)
        with wait_budget(f"click {locator}"):
            locator.click()

    def scroll_into_view(self, locator: Locator):
        with wait_budget(f"scroll into view {locator}"):
            locator.scroll_into_view_if_needed()

    # ========= 等待 =========
    def wait_visible(self, locator: Locator, timeout: Optional[float] = None):
        timeout = TIMEOUTS["long"] if timeout is None else timeout
        with wait_budget(f"wait visible {locator}", timeout):
            locator.wait_for(state="visible", timeout=timeout)

    def wait_hidden(self, locator: Locator, timeout: Optional[float] = None):
        timeout = TIMEOUTS["medium"] if timeout is None else timeout
        with wait_budget(f"wait hidden {locator}", timeout):
            locator.wait_for(state="hidden", timeout=timeout)

    def wait_text(self, locator: Locator, text: str, timeout: Optional[float] = None):
        """等待 locator 显示为指定文本（页面就绪用，超时是 WaitTimeoutError 而不是断言失败）"""
        timeout = TIMEOUTS["long"] if timeout is None else timeout
        with wait_budget(f"wait text {text!r} in {locator}", timeout):
            locator.filter(has_text=exact_text(text)).wait_for(state="visible", timeout=timeout)

    # ========= 按名称定位 =========
    def control_for(self, kind: str, slug: str) -> Locator:
        """[data-test='add-to-cart-sauce-labs-backpack']"""
        return self.page.locator(f"[data-test=\"{kind}-{slug}\"]")

    # ========= 辅助 =========
    def screenshot(self, name: str):
        path = SCREENSHOTS_DIR / self.__class__.__name__
        path.mkdir(parents=True, exist_ok=True)
        file = path / f"{generate_test_id(name)}.png"
        self.page.screenshot(path=file, full_page=True)
        return file


class Navigable:
    """页面级导航"""
    page: Page

    def open(self, url: str):
        logger.debug("goto %s", url)
        with wait_budget(f"goto {url}"):
            self.page.goto(url)

    def current_url(self) -> str:
        return self.page.url

    def get_title(self) -> str:
        return self.page.title()

    def wait_url(self, pattern: str, timeout: Optional[float] = None):
        timeout = TIMEOUTS["navigation"] if timeout is None else timeout
        with wait_budget(f"wait url /{pattern}/", timeout):
            self.page.wait_for_url(re.compile(pattern), timeout=timeout)

    def wait_for_load(self, state: str = "networkidle"):
        with wait_budget(f"wait load state {state}"):
            self.page.wait_for_load_state(state)

    def reload(self):
        with wait_budget("reload"):
            self.page.reload()

    def go_back(self):
        with wait_budget("go back"):
            self.page.go_back()


class Fillable:
    """表单输入"""

    def fill(self, locator: Locator, value: str):
        logger.debug("fill %s", locator)
        with wait_budget(f"fill {locator}"):
            locator.fill(value)

    def clear(self, locator: Locator):
        with wait_budget(f"clear {locator}"):
            locator.clear()

    def select_option(self, locator: Locator, value: str):
        with wait_budget(f"select {value} in {locator}"):
            locator.select_option(value)

    def input_value(self, locator: Locator) -> str:
        with wait_budget(f"input value {locator}"):
            return locator.input_value()


class Readable:
    """读取页面状态，返回普通值"""

    def text(self, locator: Locator) -> str:
        with wait_budget(f"read text {locator}"):
            return locator.inner_text().strip()

    def get_texts(self, locator: Locator) -> list[str]:
        return [t.strip() for t in locator.all_inner_texts()]

    def attr(self, locator: Locator, name: str):
        with wait_budget(f"read attribute {name} {locator}"):
            return locator.get_attribute(name)

    def get_attrs(self, locator: Locator, name: str) -> list[str]:
        return [locator.nth(i).get_attribute(name) for i in range(locator.count())]

    def get_count(self, locator: Locator) -> int:
        return locator.count()

    def is_visible(self, locator: Locator) -> bool:
        return locator.is_visible()

    def is_enabled(self, locator: Locator) -> bool:
        with wait_budget(f"is enabled {locator}"):
            return locator.is_enabled()
