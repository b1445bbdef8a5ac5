"""Console task board with categories, a first-in first-out task queue and simple containers."""

__version__ = "1.0.0"