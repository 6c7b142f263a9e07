"""
WordWise readability and vocabulary analysis.
"""

__version__ = "2.0.0"
