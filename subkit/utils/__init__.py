"""
Utilities package.

Pure helpers (timestamps, text, platform, async, logging) shared by the
routers and the CLI.
"""
