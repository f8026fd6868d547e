"""Models, formatters and payload builders for LinkedIn Ads campaigns, creatives, conversions and analytics."""

__version__ = "0.1.0"

__all__ = ["__version__"]