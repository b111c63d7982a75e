import os
from pathlib import Path


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# chromium / firefox / webkit
BROWSER = os.getenv("BROWSER", "chromium")

# CI 环境强制无头
HEADLESS = True if os.getenv("CI") else _env_flag("HEADLESS", True)

VIEWPORT = {"width": 1280, "height": 720}

# 单位：毫秒（Playwright 的约定）
TIMEOUTS = {
    "action": 10_000,
    "navigation": 15_000,
    "short": 3_000,
    "medium": 5_000,
    "long": 10_000,
}

# 登录态
STORAGE_DIR = Path("storage")
STORAGE_STATE = STORAGE_DIR / "login.json"

# 失败用例证据、视频、trace、截图
ARTIFACTS_DIR = Path("artifacts")
VIDEOS_DIR = Path("videos")
TRACING_DIR = Path("tracing")
SCREENSHOTS_DIR = Path("screenshots")

# session 启动前清空
CLEAN_DIRS = [ARTIFACTS_DIR, VIDEOS_DIR, TRACING_DIR, SCREENSHOTS_DIR, STORAGE_DIR]
