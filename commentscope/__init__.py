"""
commentscope: turn a video's comment section into ranked content-topic suggestions.
"""

__version__ = "0.1.0"
