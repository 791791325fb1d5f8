"""
Custom exception hierarchy for MARAS rule post-processing.
"""


class MARASError(Exception):
    """Base exception for all MARAS errors."""
    pass


class DecodeError(MARASError):
    """Raised when an item code falls outside the valid item domain."""
    def __init__(self, code, reason: str, rule_index: int = None):
        self.code = code
        self.reason = reason
        self.rule_index = rule_index
        location = f" in raw rule {rule_index}" if rule_index is not None else ""
        super().__init__(f"Cannot decode item code {code!r}{location}: {reason}")


class ConfigurationError(MARASError):
    """Raised when configuration is invalid or incomplete."""
    pass
