"""Entrypoints (inbound adapters) for shocktest.

Expose the harness to the outside world: currently the ``shocktest`` command
line. Parse and validate inputs, load test modules, call the runner, and
present results.
"""
