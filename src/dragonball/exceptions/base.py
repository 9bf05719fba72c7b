"""
Base class of every DragonBall error.

Besides the message, an error carries what the CLI prints under it: a
recovery hint, a command to run, the underlying detail, and a short id that
ties the printed report to the log record written for the same failure.
"""

import uuid
from typing import Optional


class DragonBallError(Exception):
    """Base exception for all DragonBall errors.

    Attributes:
        message: One-line description of what failed
        help_text: How to recover, when there is something to suggest
        error_code: Stable code such as ``NETWORK_003``
        user_action: Command or step the user can take next
        technical_details: Underlying cause, for debugging
        correlation_id: Short id shared by the CLI report and the log record
    """

    def __init__(self, message: str, *,
                 help_text: Optional[str] = None,
                 error_code: Optional[str] = None,
                 user_action: Optional[str] = None,
                 technical_details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.help_text = help_text
        self.error_code = error_code
        self.user_action = user_action
        self.technical_details = technical_details
        self.correlation_id = uuid.uuid4().hex[:8]

    def __str__(self) -> str:
        lines = [self.message]
        if self.help_text:
            lines.append(f"Help: {self.help_text}")
        if self.user_action:
            lines.append(f"Action: {self.user_action}")
        lines.append(f"Error ID: {self.correlation_id}")
        return "\n".join(lines)
