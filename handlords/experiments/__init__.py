"""Headless match orchestration and its command-line entrypoint."""
