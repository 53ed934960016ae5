class MonitorError(Exception):
    """Base class for monitor errors"""

    def __init__(self, message: str, error_code: str = "MONITOR_ERROR"):
        self.message = message
        self.error_code = error_code
        super().__init__(message)


class ConfigError(MonitorError):
    """Raised when the configuration file cannot be read or parsed"""

    def __init__(self, message: str = "Invalid configuration"):
        super().__init__(message, "CONFIG_ERROR")


class BodyReadError(MonitorError):
    """Raised when the request body cannot be read"""

    def __init__(self, message: str = "Could not read request body"):
        super().__init__(message, "BODY_READ_ERROR")


class ParseError(MonitorError):
    """Raised when a push payload is malformed"""

    def __init__(self, message: str = "Malformed push event"):
        super().__init__(message, "PARSE_ERROR")


class PatternCompileError(MonitorError):
    """Raised when a configured pattern is not a valid regular expression"""

    def __init__(self, pattern: str, reason: str = ""):
        self.pattern = pattern
        message = f"Invalid pattern {pattern!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, "PATTERN_COMPILE_ERROR")


class SendError(MonitorError):
    """Raised when the Slack notification could not be delivered"""

    def __init__(self, message: str = "Could not send to slack", status_code=None):
        self.status_code = status_code
        super().__init__(message, "SEND_ERROR")
