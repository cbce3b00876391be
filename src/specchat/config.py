"""Configuration constants and settings.

Centralizes default values used by the completion clients, the
orchestrator and the CLI.
"""

from pydantic import BaseModel, ConfigDict, Field

# Shown in the transcript whenever a completion call fails
DEFAULT_ERROR_MESSAGE = "Error: Unable to get response."

# Completion service
DEFAULT_ENDPOINT = "http://localhost:3000/api/chat"
DEFAULT_TIMEOUT = 30.0  # Seconds

# OpenAI backend defaults
DEFAULT_OPENAI_MODEL = "gpt-4o-mini"
DEFAULT_MAX_TOKENS = 150
DEFAULT_TEMPERATURE = 0.7

# Welcome message of the default demo
DEFAULT_GREETING = "Welcome to our mobile shop! Ask about any technical specs."

# Used for follow-ups when nothing has been explained yet
PLACEHOLDER_SUBJECT_TITLE = "the current spec"

# Transcript rendering
TIMESTAMP_FORMAT = "%H:%M:%S"


class LogLevel:
    """Log level constants with numeric values for comparison.

    Mirrors the stdlib logging hierarchy: DEBUG < INFO < WARNING < ERROR.
    """

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    _names = {
        DEBUG: "DEBUG",
        INFO: "INFO",
        WARNING: "WARNING",
        ERROR: "ERROR",
    }

    _from_string = {
        "debug": DEBUG,
        "info": INFO,
        "warning": WARNING,
        "error": ERROR,
    }

    @classmethod
    def name(cls, level: int) -> str:
        """Get the name for a log level."""
        return cls._names.get(level, "UNKNOWN")

    @classmethod
    def from_string(cls, level_str: str) -> int:
        """Convert string to log level. Returns WARNING if invalid."""
        return cls._from_string.get(level_str.lower(), cls.WARNING)


class OrchestratorConfig(BaseModel):
    """Behavioural settings for the conversation orchestrator."""

    model_config = ConfigDict(frozen=True)

    error_message: str = Field(
        default=DEFAULT_ERROR_MESSAGE,
        description="Bot message content appended when a completion fails"
    )
    discard_stale_responses: bool = Field(
        default=True,
        description="Drop responses whose turn started before the last clear"
    )
    max_retries: int = Field(
        default=0,
        ge=0,
        description="Extra attempts after a network failure"
    )
    retry_backoff: float = Field(
        default=0.5,
        ge=0.0,
        description="Base delay in seconds, doubled on every retry"
    )
