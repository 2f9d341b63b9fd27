"""Core gameplay primitives (bounded values, output sink, the response step).

Kept free of console/process concerns so the driver, the CLI and tests can share them.
"""
