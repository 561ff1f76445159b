class X3TestError(Exception):
    """Base class for errors raised by a benchmark run."""


class NavigationError(X3TestError):
    def __init__(self, url: str, reason: str):
        super().__init__(f"Could not navigate to {url}: {reason}")
        self.url = url
        self.reason = reason


class SelectorTimeoutError(X3TestError, TimeoutError):
    def __init__(self, selector: str, timeout_ms: float):
        super().__init__(f"Element '{selector}' did not appear within {timeout_ms:g} ms")
        self.selector = selector
        self.timeout_ms = timeout_ms


class OutputWriteError(X3TestError, OSError):
    def __init__(self, path, reason: str):
        super().__init__(f"Could not write results to {path}: {reason}")
        self.path = path
        self.reason = reason


class DiagnosticReadError(X3TestError):
    """The scene runtime's diagnostic info could not be read for a window."""
