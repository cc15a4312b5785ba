"""
subkit: timecode and subtitle text helpers.

This package contains the timestamp codec, the printing-word segmenter and
host environment helpers, plus the FastAPI routers and CLI built on them.
"""
