"""Error definitions for shocktest."""

# ============================================================================
#                           General errors
# ============================================================================


class ShocktestError(Exception):
    """Base class for shocktest errors."""


# ============================================================================
#                           Failure signals
# ============================================================================


class ExpectationFailed(ShocktestError):
    """Raised by assertion helpers when an expectation is violated.

    This is the recognized failure signal of the harness. The runner treats it
    like any other ``Exception``: the message is reported, and the case passes
    or fails depending on its polarity.

    Attributes:
        message (str): Human-readable description of the violated expectation.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


# ============================================================================
#                           Mock errors
# ============================================================================


class MockError(ShocktestError):
    """Base class for mock declaration and override errors."""


class MockAlreadyDeclaredError(MockError):
    """Raised when a mockable target is declared twice under the same name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Mock '{name}' is already declared.")
        self.name = name


class MockNotDeclaredError(MockError, LookupError):
    """Raised when a mockable target is used before it is declared."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Mock '{name}' has not been declared.")
        self.name = name


class GuardNotCopyableError(MockError, TypeError):
    """Raised when an override guard is copied, deep-copied or pickled.

    A copy would carry a second restoration obligation for the same slot.
    """

    def __init__(self, slot_name: str) -> None:
        super().__init__(f"Override guard for mock '{slot_name}' cannot be copied.")
        self.slot_name = slot_name


# ============================================================================
#                           Loading and configuration errors
# ============================================================================


class TargetLoadError(ShocktestError):
    """Raised when a test module cannot be imported.

    Attributes:
        target (str): The module name or file path that failed to load.
    """

    def __init__(self, target: str, reason: str) -> None:
        super().__init__(f"Could not load test target '{target}': {reason}")
        self.target = target
        self.reason = reason


class InvalidColorSettingError(ShocktestError, ValueError):
    """Raised when SHOCKTEST_COLOR holds an unrecognized value."""

    def __init__(self, value: str) -> None:
        super().__init__(
            f"Invalid SHOCKTEST_COLOR value '{value}'. "
            "Use one of: 1, true, yes, on, always, 0, false, no, off, never."
        )
        self.value = value
