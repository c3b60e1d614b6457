"""Streaming parser for Xbus MTData2 messages, with motion data helpers and a command line reader."""

__version__ = "0.1.0"