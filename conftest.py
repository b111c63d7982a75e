import json
import shutil
from pathlib import Path

import allure
import pytest
from playwright.sync_api import sync_playwright

from config.pages import BASE_URL
from config.settings import (ARTIFACTS_DIR, BROWSER, CLEAN_DIRS, HEADLESS, STORAGE_STATE, TIMEOUTS, TRACING_DIR,
                             VIDEOS_DIR, VIEWPORT)
from reporting.failure_report import KIND_LABELS, classify_failure, render_attempt_summary
from scripts.save_login_state import save_login_state


# ================== Session Fixtures ==================
@pytest.fixture(scope="session")
def playwright_instance():
    with sync_playwright() as p:
        yield p


@pytest.fixture(scope="session")
def browser(playwright_instance):
    """浏览器只启动一次"""
    browser = getattr(playwright_instance, BROWSER).launch(headless=HEADLESS)
    yield browser
    browser.close()


@pytest.fixture(scope="session", autouse=True)
def clean_artifacts():
    """测试session启动前，清空artifacts、videos、tracing、screenshots、storage"""
    for p in CLEAN_DIRS:
        if p.exists():
            shutil.rmtree(p)  # 删除目录 p 及其包含的所有文件和子目录。
        p.mkdir()


@pytest.fixture(scope="session")
def login_state(browser, clean_artifacts):
    """
    每个 session 重新生成 login.json（clean_artifacts 已清空 storage 目录，只有 need_login 的用例会用到）
    """
    print("🔐 生成 login.json")
    return save_login_state(browser, STORAGE_STATE)


# ================== Function Fixtures ==================
@pytest.fixture(scope="function")
def context(browser, request):
    """
    每个测试方法一个全新 context
    - need_login：基于 login.json 创建，跳过 UI 登录
    - 视频 + tracing 每个 attempt 单独目录
    """
    attempt = getattr(request.node, "execution_count", 1)
    # 锁定本次 context 对应的 attempt；rerun 时 item 是同一个对象，失败标记要重置
    request.node._current_attempt = attempt
    request.node._failed = False

    attempt_dir = f"attempt_{attempt}"
    record_video_dir = VIDEOS_DIR / attempt_dir
    record_tracing_dir = TRACING_DIR / attempt_dir
    record_video_dir.mkdir(parents=True, exist_ok=True)
    record_tracing_dir.mkdir(parents=True, exist_ok=True)

    need_login = request.node.get_closest_marker("need_login") is not None
    storage_state = request.getfixturevalue("login_state") if need_login else None

    context = browser.new_context(
        base_url=BASE_URL,
        storage_state=str(storage_state) if storage_state else None,
        # video文件只有在context.close()后才会真正落盘
        record_video_dir=str(record_video_dir),
        record_video_size=VIEWPORT,
        viewport=VIEWPORT)
    context.set_default_timeout(TIMEOUTS["action"])
    context.set_default_navigation_timeout(TIMEOUTS["navigation"])

    # Playwright 不会自动管理 tracing 文件：start → stop → 指定zip路径
    context.tracing.start(
        name=attempt_dir,
        screenshots=True,
        snapshots=True,
        sources=True)

    yield context

    #  ======== teardown阶段 ========
    trace_path = record_tracing_dir / "trace.zip"
    try:
        context.tracing.stop(path=trace_path)  # stop tracing，trace.zip 在这里真正生成
    finally:
        context.close()  # 一定要先close：释放video文件句柄、video真正写入磁盘

    attempts = getattr(request.node, "_attempts", [])
    max_attempts = (getattr(request.config.option, "reruns", 0) or 0) + 1

    #  ======== 执行成功用例删除video、trace ========
    if not request.node._failed:
        shutil.rmtree(record_video_dir, ignore_errors=True)
        shutil.rmtree(record_tracing_dir, ignore_errors=True)
        # 之前失败过、这次通过：也给出汇总
        if any(a["status"] == "FAILED" for a in attempts):
            attach_attempt_summary(attempts)
        return

    #  ======== 执行失败用例移动video、trace到artifacts目录 ========
    target_dir = artifact_dir(request.node, attempt)

    for video_file in record_video_dir.glob("*.webm"):
        shutil.move(str(video_file), target_dir / video_file.name)
    if trace_path.exists():
        shutil.move(str(trace_path), target_dir / "trace.zip")

    # 精确找到对应 attempt 的 record（而不是 attempts[-1]）
    current = next((a for a in attempts if a["attempt"] == attempt), None)
    if current is not None:
        current.update({
            "has_screenshot": (target_dir / "failure.png").exists(),
            "has_video": any(target_dir.glob("*.webm")),
            "has_trace": (target_dir / "trace.zip").exists(),
            "base_dir": str(target_dir)
        })

    # video和trace要在teardown阶段attach：makereport hook 早于 context teardown，那时文件还没生成
    for video in target_dir.glob("*.webm"):
        allure.attach.file(
            video,
            name="📎 Video",
            attachment_type=allure.attachment_type.WEBM
        )

    trace = target_dir / "trace.zip"
    if trace.exists():
        allure.attach.file(
            trace,
            name="📎 Playwright-Trace.zip"
        )

    # 只在最后一次 attempt attach Attempt Summary
    if attempt == max_attempts:
        attach_attempt_summary(attempts)


@pytest.fixture(scope="function")
def page(context, request):
    """每个测试方法一个新 page"""
    page = context.new_page()
    console_errors = []  # 所有console.error都会被收集

    # page.on("console")是浏览器级别监听,不会因为跳转丢失
    page.on(
        "console",
        lambda msg: console_errors.append({
            "type": msg.type,
            "text": msg.text,
            "location": str(msg.location)
        }) if msg.type == "error" else None
    )
    request.node._console_errors = console_errors  # 挂到item上，方便hook里取
    yield page
    page.close()


def artifact_dir(item, attempt: int) -> Path:
    module_name = item.module.__name__.split(".")[-1]
    class_name = item.cls.__name__ if item.cls else "no_class"
    path = ARTIFACTS_DIR / module_name / class_name / item.name / f"attempt_{attempt}"
    path.mkdir(parents=True, exist_ok=True)
    return path


def attach_attempt_summary(attempts: list[dict]):
    if not attempts:
        return
    allure.attach(
        render_attempt_summary(attempts),
        name="Attempt Summary",
        attachment_type=allure.attachment_type.TEXT
    )


# ================== Pytest Hook：失败处理 ==================
@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    call 阶段记录每次 attempt；失败时自动保存：
    - 失败类型（断言 / 等待超时 / 测试数据）
    - 截图
    - URL
    - Console errors
    """
    outcome = yield
    rep = outcome.get_result()

    if rep.when != "call":
        return

    # 浏览器用例才会用到 page；纯逻辑用例只记录失败类型
    page = item.funcargs.get("page")
    kind = classify_failure(call.excinfo.value) if rep.failed and call.excinfo else None
    if kind:
        item.user_properties.append(("failure_kind", kind))

    if page is None:
        return

    attempt = getattr(item, "execution_count", 1)
    if not hasattr(item, "_attempts"):
        item._attempts = []
    item._attempts.append({
        "attempt": attempt,
        "status": "FAILED" if rep.failed else "PASSED",
        "duration": round(call.duration, 2),
        "kind": kind,
        "error": str(rep.longrepr) if rep.failed else "",
        "url": page.url,
    })

    if not rep.failed:
        return

    # 标记失败（跨fixture通信：告诉 context 这是一次失败执行）
    item._failed = True

    base_dir = artifact_dir(item, attempt)
    page.screenshot(path=base_dir / "failure.png", full_page=True)  # 生成失败用例截图
    (base_dir / "url.txt").write_text(page.url, encoding="utf-8")  # 生成失败用例URL文件
    (base_dir / "console_errors.json").write_text(  # 生成失败用例Console errors文件
        json.dumps(getattr(item, "_console_errors", []), indent=2, ensure_ascii=False), encoding="utf-8")

    # 在Allure Report 的Test Body位置显示
    allure.attach(f"{kind}: {KIND_LABELS[kind]}", name="Failure-Kind",
                  attachment_type=allure.attachment_type.TEXT)
    allure.attach.file(base_dir / "failure.png", name="Failure-Screenshot",
                       attachment_type=allure.attachment_type.PNG)
    allure.attach.file(base_dir / "console_errors.json", name="Console-Errors",
                       attachment_type=allure.attachment_type.JSON)
