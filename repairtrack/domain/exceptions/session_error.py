"""
Session-related domain exceptions.
"""


class SessionError(Exception):
    """Base exception for session errors."""

    pass


class SessionNotFoundError(SessionError):
    """Raised when a request carries no valid session token."""

    def __init__(self, message: str = "Not signed in"):
        super().__init__(message)


class SubmissionInProgressError(SessionError):
    """Raised when a job is submitted while another submission is in flight."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__("A job submission is already in progress")
