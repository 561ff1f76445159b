import logging
from pathlib import Path
from typing import Any, Optional

try:
    from playwright.async_api import async_playwright, Page
    from playwright.async_api import Error as PlaywrightError
    from playwright.async_api import TimeoutError as PlaywrightTimeoutError
except ImportError:
    print("ERROR: playwright not installed. Run: pip install playwright && playwright install chromium")
    raise SystemExit(1)

from x3test.config import LAUNCH_ARGS, SCENE_ROOT_SELECTOR, WARMUP_MS, Configuration
from x3test.errors import NavigationError, SelectorTimeoutError
from x3test.probe import FRAME_PROBE_JS, FrameTrace, probe_args
from x3test.sampler import FrameSampler, Report, report_to_json
from x3test.utils import write_json

logger = logging.getLogger(__name__)


class SessionDriver:
    """Owns one browser page for the length of a benchmark run."""

    def __init__(self, config: Configuration):
        self.config = config

    async def run(self) -> Report:
        async with async_playwright() as p:
            browser = await p.chromium.launch(headless=self.config.headless, args=LAUNCH_ARGS)
            try:
                page = await browser.new_page()
                self.attach_console(page)
                report = await self.measure(page)
                self.save(report)
            finally:
                await browser.close()

        print(f"✅ Test completed. Results ({self.config.format} format) saved to {self.config.output_file}")
        return report

    def attach_console(self, page: Page) -> None:
        page.on("console", lambda msg: logger.debug("Console: %s", msg.text))
        page.on("pageerror", lambda exc: logger.debug("PageError: %s", exc))

    async def measure(self, page: Page) -> Report:
        config = self.config

        logger.info("Navigating to %s", config.url)
        try:
            await page.goto(config.url)
        except PlaywrightError as exc:
            raise NavigationError(config.url, exc.message) from exc

        await self.wait_for(page, SCENE_ROOT_SELECTOR)

        if config.trigger_selector:
            await self.wait_for(page, config.trigger_selector)
            logger.info("Clicking trigger %s", config.trigger_selector)
            await page.click(config.trigger_selector)

        await page.wait_for_timeout(WARMUP_MS)

        logger.info("Sampling %d second(s) in %s format", config.duration, config.format)
        payload = await page.evaluate(FRAME_PROBE_JS, probe_args(config.duration))
        trace = FrameTrace.from_payload(payload)
        sampler = FrameSampler(config.duration, config.format, start=trace.origin)
        return trace.replay(sampler).report()

    async def wait_for(self, page: Page, selector: str) -> None:
        try:
            await page.wait_for_selector(selector, timeout=self.config.selector_timeout_ms)
        except PlaywrightTimeoutError as exc:
            raise SelectorTimeoutError(selector, self.config.selector_timeout_ms) from exc

    def save(self, report: Report) -> Path:
        path = self.config.output_path
        write_json(path, report_to_json(report))
        logger.debug("Wrote %s", path)
        return path


async def run_x3_test(config: Optional[Configuration] = None, **options: Any) -> Report:
    if config is None:
        config = Configuration(**options)
    return await SessionDriver(config).run()
