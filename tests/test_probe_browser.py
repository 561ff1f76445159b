"""Runs the in-page frame recorder in a real headless Chromium.

Deselected by default; run with ``pytest -m browser`` after
``playwright install chromium``.
"""

import pytest
from playwright.async_api import async_playwright

from x3test.config import LAUNCH_ARGS
from x3test.probe import FRAME_PROBE_JS, FrameTrace, probe_args
from x3test.sampler import FrameSampler

pytestmark = [pytest.mark.browser, pytest.mark.asyncio]

DIRECT_FIELD_RUNTIME = """
document.querySelector('x3d').runtime = { states: { infos: { '#NODES:': 47 } } };
"""

LIST_RUNTIME = """
document.querySelector('x3d').runtime = { states: { infos: ['#FPS:: 60', '#NODES:: 1532'] } };
"""

THROWING_RUNTIME = """
document.querySelector('x3d').runtime = {
    states: { get infos() { throw new Error('infos unavailable'); } },
};
"""


async def record(runtime_script, duration, fmt="detailed"):
    async with async_playwright() as p:
        browser = await p.chromium.launch(headless=True, args=LAUNCH_ARGS)
        try:
            page = await browser.new_page()
            await page.set_content("<html><body><x3d id='scene'></x3d></body></html>")
            if runtime_script:
                await page.evaluate(f"() => {{ {runtime_script} }}")
            payload = await page.evaluate(FRAME_PROBE_JS, probe_args(duration))
        finally:
            await browser.close()

    trace = FrameTrace.from_payload(payload)
    return payload, trace.replay(FrameSampler(duration, fmt, start=trace.origin))


async def test_direct_field():
    payload, sampler = await record(DIRECT_FIELD_RUNTIME, 2)

    report = sampler.report()
    assert sampler.done
    assert [s.second for s in report] == [1, 2]
    assert all(s.fps > 0 for s in report)
    assert [s.node_count for s in report] == [47, 47]
    assert sum(1 for frame in payload["frames"] if "diag" in frame) == 2


async def test_list_infos():
    _, sampler = await record(LIST_RUNTIME, 1)
    assert sampler.report()[0].node_count == 1532


async def test_throwing_getter_is_captured():
    payload, sampler = await record(THROWING_RUNTIME, 1)

    snapshots = [frame["diag"] for frame in payload["frames"] if "diag" in frame]
    assert snapshots[0]["ok"] is False
    assert "infos unavailable" in snapshots[0]["error"]
    assert sampler.report()[0].node_count is None


async def test_no_runtime():
    payload, sampler = await record(None, 1, "summary")

    snapshots = [frame["diag"] for frame in payload["frames"] if "diag" in frame]
    assert snapshots == [{"ok": True, "value": None}]
    report = sampler.report()
    assert len(report.fps_log) == 1
    assert report.node_count is None


async def test_zero_duration_resolves_empty():
    payload, sampler = await record(DIRECT_FIELD_RUNTIME, 0)

    assert payload["frames"] == []
    assert sampler.report() == []
