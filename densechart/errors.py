from __future__ import annotations


class ChartDataError(ValueError):
    """Raised when a raw series violates the input contract."""
