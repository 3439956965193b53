"""
Errors raised by the filter engine.

Both are ValueError subclasses so callers that already guard user input
with `except ValueError` keep working.
"""


class InvalidChoice(ValueError):
    """A choice other than 'L' or 'R' was supplied."""

    def __init__(self, choice):
        self.choice = choice
        super().__init__(f"choice must be 'L' or 'R'; got {choice!r}")


class SessionComplete(ValueError):
    """Raised by transition(..., strict=True) once the state is terminal."""
