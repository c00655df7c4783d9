from densechart.adapters.normalize import classify_series, split_series

__all__ = ["classify_series", "split_series"]
