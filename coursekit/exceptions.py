class CourseKitError(Exception):
    """Base exception for coursekit errors"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidParametersError(CourseKitError, ValueError):
    """Raised when a required field is missing"""

    def __init__(self, missing: list[str]):
        super().__init__(
            f"Required field cannot be null: {', '.join(missing)}",
            {"missing_fields": missing},
        )


class ConfigurationError(CourseKitError):
    """Raised when the course configuration is missing or incomplete"""

    def __init__(self, message: str, missing_keys: list[str] | None = None):
        details = {"missing_keys": missing_keys} if missing_keys else {}
        super().__init__(message, details)


class EnrollmentError(CourseKitError):
    """Raised when enrollment input cannot be parsed"""

    def __init__(self, message: str, line: int | None = None):
        details = {"line": line} if line is not None else {}
        super().__init__(message, details)
