"""Navigator status server: on-demand URL liveness checks with a short-lived cache."""

__version__ = "1.0.0"
