"""
Validation-related domain exceptions.
"""


class ValidationError(Exception):
    """Base exception for validation errors."""

    pass


class RequiredFieldError(ValidationError):
    """Raised when required field is missing."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"Required field '{field_name}' is missing")


class InvalidFormatError(ValidationError):
    """Raised when field format is invalid."""

    def __init__(self, field_name: str, expected_format: str):
        self.field_name = field_name
        self.expected_format = expected_format
        super().__init__(
            f"Field '{field_name}' has invalid format, expected: {expected_format}"
        )


class ProfileRequiredError(ValidationError):
    """Raised when a shop profile must exist before the operation."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__("Please complete your profile first")


class InvalidStatusTransitionError(ValidationError):
    """Raised when a job status change is not allowed by the transition policy."""

    def __init__(self, current_status: str, requested_status: str):
        self.current_status = current_status
        self.requested_status = requested_status
        super().__init__(
            f"Cannot move job from '{current_status}' to '{requested_status}'"
        )
