"""Assessment Genie core: blueprint allocation and authentication decisions."""

__version__ = "1.0.0"
