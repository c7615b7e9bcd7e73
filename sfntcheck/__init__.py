"""
Regression harness for sfnt font engines against proprietary golden data.
"""

__version__ = "0.1.0"
