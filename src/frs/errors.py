from __future__ import annotations


class InputValidationError(ValueError):
    """Malformed driver input or edge list; never raised by the graph engine."""
