"""
Fatal, pre-scan errors. Both abort the run before any socket is opened.

They subclass ValueError so callers that already treat bad input as
ValueError (the API layer, argparse-style handlers) keep working.
"""


class ScanError(ValueError):
    """Base class for errors that stop a scan before it starts."""


class PortSpecError(ScanError):
    def __init__(self, token: str, reason: str = "invalid port"):
        self.token = token
        self.reason = reason
        super().__init__(f"{reason}: {token!r}")


class ResolutionError(ScanError):
    def __init__(self, target: str, reason: str = "no addresses found"):
        self.target = target
        self.reason = reason
        super().__init__(f"failed to resolve host {target!r}: {reason}")
