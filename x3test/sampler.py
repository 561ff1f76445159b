"""
Frame sampler.

Counts frames into consecutive one-second windows and turns them into either
a per-second series or a summary. The sampler has no clock of its own: each
``tick`` carries the frame timestamp in milliseconds, so the same code runs
against a trace recorded in the browser or a synthetic clock in tests.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Union

from x3test.config import FORMAT_DETAILED, FORMAT_SUMMARY, FORMATS, SCENE_NAME, WINDOW_MS
from x3test.node_count import extract_node_count
from x3test.utils import js_fixed, js_round

logger = logging.getLogger(__name__)

DiagnosticReader = Callable[[], Any]
NodeCounter = Callable[[Any], Optional[int]]


@dataclass
class Sample:
    second: int
    fps: float
    node_count: Optional[int]

    def to_dict(self) -> Dict[str, Any]:
        return {"second": self.second, "fps": self.fps, "nodeCount": self.node_count}


@dataclass
class SummaryReport:
    duration: int
    fps_log: List[int] = field(default_factory=list)
    average_fps: float = 0.0
    node_count: Optional[int] = None
    render_time_ms: Optional[float] = None
    scene: str = SCENE_NAME

    def to_dict(self) -> Dict[str, Any]:
        return {
            "scene": self.scene,
            "duration": self.duration,
            "fpsLog": list(self.fps_log),
            "averageFPS": self.average_fps,
            "nodeCount": self.node_count,
            "renderTimeMs": self.render_time_ms,
        }


Report = Union[List[Sample], SummaryReport]


def report_to_json(report: Report) -> Any:
    if isinstance(report, SummaryReport):
        return report.to_dict()
    return [sample.to_dict() for sample in report]


class FrameSampler:
    def __init__(
        self,
        duration: int,
        format: str = FORMAT_DETAILED,
        start: float = 0.0,
        node_counter: NodeCounter = extract_node_count,
        window_ms: float = WINDOW_MS,
    ):
        if format not in FORMATS:
            raise ValueError(f"Unknown report format '{format}'")
        self.duration = duration
        self.format = format
        self.node_counter = node_counter
        self.window_ms = window_ms

        self.frame_count = 0
        self.second_counter = 0
        self.last_time = start

        self.samples: List[Sample] = []
        self.fps_log: List[int] = []
        self.total_fps = 0.0
        self.final_node_count: Optional[int] = None

    @property
    def done(self) -> bool:
        return self.second_counter >= self.duration

    def tick(self, now: float, read_diagnostic: Optional[DiagnosticReader] = None) -> Optional[Sample]:
        """Count one frame at ``now`` (ms). Returns the sample when a window closes."""
        if self.done:
            return None

        self.frame_count += 1
        elapsed = now - self.last_time
        if elapsed < self.window_ms:
            return None

        fps = self.frame_count / (elapsed / 1000)
        node_count = self.read_node_count(read_diagnostic)
        rounded_fps = js_fixed(fps, 2)

        self.second_counter += 1
        sample = Sample(second=self.second_counter, fps=rounded_fps, node_count=node_count)
        if self.format == FORMAT_DETAILED:
            self.samples.append(sample)
        else:
            self.fps_log.append(js_round(fps))
            self.total_fps += rounded_fps
            self.final_node_count = node_count

        logger.debug("Window %d: %.2f fps, nodes=%s", sample.second, rounded_fps, node_count)
        self.frame_count = 0
        self.last_time = now
        return sample

    def read_node_count(self, read_diagnostic: Optional[DiagnosticReader]) -> Optional[int]:
        if read_diagnostic is None:
            return None
        try:
            return self.node_counter(read_diagnostic())
        except Exception as exc:
            logger.debug("Could not get node count: %s", exc)
            return None

    def report(self) -> Report:
        if self.format == FORMAT_SUMMARY:
            return self.summary()
        return list(self.samples)

    def summary(self) -> SummaryReport:
        average_fps = js_fixed(self.total_fps / self.duration, 1) if self.duration > 0 else 0.0
        render_time_ms = js_fixed(1000 / average_fps, 1) if average_fps else None
        return SummaryReport(
            duration=self.duration,
            fps_log=list(self.fps_log),
            average_fps=average_fps,
            node_count=self.final_node_count,
            render_time_ms=render_time_ms,
        )
