"""Place dots, join them with directed lines and find shortest paths between them."""

__version__ = "0.1.0"
__all__ = ["__version__"]