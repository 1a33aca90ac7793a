"""Domain errors raised by the engine."""

from __future__ import annotations


class DegenerateParameterError(ValueError):
    """An input value makes the model undefined (division by zero, overflow).

    ``parameter`` names the offending scenario field as a dotted path, or the
    computed quantity that went non-finite.
    """

    def __init__(self, parameter: str, message: str) -> None:
        super().__init__(f"{parameter}: {message}")
        self.parameter = parameter
