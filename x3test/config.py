from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

FORMAT_DETAILED = "detailed"
FORMAT_SUMMARY = "summary"
FORMATS = (FORMAT_DETAILED, FORMAT_SUMMARY)

DEFAULT_DURATION = 20
DEFAULT_OUTPUT = "fps-log.json"
DEFAULT_TRIGGER = "#beginTest"
DEFAULT_SELECTOR_TIMEOUT_MS = 30000

# X3DOM renders into the <x3d> element; its presence gates measurement.
SCENE_ROOT_SELECTOR = "x3d"
SCENE_NAME = "AnimatedModel"
NODES_TAG = "#NODES:"

WARMUP_MS = 1000
WINDOW_MS = 1000.0

LAUNCH_ARGS: List[str] = [
    "--enable-webgl",
    "--no-sandbox",
]


@dataclass(frozen=True)
class Configuration:
    url: str
    duration: int = DEFAULT_DURATION
    output_file: Union[str, Path] = DEFAULT_OUTPUT
    trigger_selector: str = DEFAULT_TRIGGER
    format: str = FORMAT_DETAILED
    headless: bool = True
    selector_timeout_ms: float = DEFAULT_SELECTOR_TIMEOUT_MS

    def __post_init__(self):
        if self.format not in FORMATS:
            raise ValueError(f"Unknown report format '{self.format}', expected one of {', '.join(FORMATS)}")
        if not self.url:
            raise ValueError("A target URL is required")

    @property
    def output_path(self) -> Path:
        return Path(self.output_file)
