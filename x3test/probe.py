import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from x3test.config import SCENE_ROOT_SELECTOR, WINDOW_MS
from x3test.errors import DiagnosticReadError
from x3test.sampler import FrameSampler

logger = logging.getLogger(__name__)

# Runs inside the page. Records a timestamp per animation frame and, on each
# frame that closes a window, a JSON-safe copy of X3DOM's runtime infos.
# Resolves once, after `duration` windows.
FRAME_PROBE_JS = """({ duration, sceneSelector, windowMs }) => new Promise((resolve) => {
    const scene = document.querySelector(sceneSelector);
    const frames = [];
    const origin = performance.now();
    let lastTime = origin;
    let windows = 0;

    function snapshotInfos() {
        try {
            const runtime = scene && scene.runtime;
            if (!runtime || !runtime.states || !runtime.states.infos) {
                return { ok: true, value: null };
            }
            const infos = runtime.states.infos.valueOf();
            if (infos === undefined || infos === null) {
                return { ok: true, value: null };
            }
            return { ok: true, value: JSON.parse(JSON.stringify(infos)) };
        } catch (error) {
            console.warn("Could not get node count:", error);
            return { ok: false, error: String(error) };
        }
    }

    if (!(duration > 0)) {
        resolve({ origin, frames });
        return;
    }

    function loop() {
        const now = performance.now();
        const frame = { t: now };
        if (now - lastTime >= windowMs) {
            frame.diag = snapshotInfos();
            windows++;
            lastTime = now;
        }
        frames.push(frame);

        if (windows < duration) {
            requestAnimationFrame(loop);
        } else {
            resolve({ origin, frames });
        }
    }

    requestAnimationFrame(loop);
})"""


@dataclass
class Frame:
    t: float
    diag: Optional[Dict[str, Any]] = None

    def read_diagnostic(self) -> Any:
        if self.diag is None:
            raise DiagnosticReadError(f"No diagnostic snapshot at frame t={self.t:.3f}")
        if not self.diag.get("ok"):
            raise DiagnosticReadError(self.diag.get("error") or "diagnostic read failed in page")
        return self.diag.get("value")


@dataclass
class FrameTrace:
    origin: float
    frames: List[Frame]

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "FrameTrace":
        frames = [Frame(t=float(item["t"]), diag=item.get("diag")) for item in payload.get("frames") or []]
        return cls(origin=float(payload.get("origin") or 0.0), frames=frames)

    def replay(self, sampler: FrameSampler) -> FrameSampler:
        for frame in self.frames:
            if sampler.done:
                break
            sampler.tick(frame.t, frame.read_diagnostic)
        if not sampler.done and sampler.duration > 0:
            logger.warning(
                "Frame trace ended after %d of %d windows",
                sampler.second_counter,
                sampler.duration,
            )
        return sampler


def probe_args(duration: int) -> Dict[str, Any]:
    return {
        "duration": duration,
        "sceneSelector": SCENE_ROOT_SELECTOR,
        "windowMs": WINDOW_MS,
    }
