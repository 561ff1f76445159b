"""
X3D scene performance benchmark.
Drives a headless Chromium to an X3D/X3DOM page and logs FPS and node counts.
"""

from x3test.config import Configuration
from x3test.driver import SessionDriver, run_x3_test
from x3test.sampler import FrameSampler, Sample, SummaryReport

__all__ = [
    "Configuration",
    "FrameSampler",
    "Sample",
    "SessionDriver",
    "SummaryReport",
    "run_x3_test",
]

__version__ = "0.1.0"
