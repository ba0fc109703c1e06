"""Functional tests.

Purpose
- Validate behavior of the harness as a test author or driver sees it:
  registering cases, running them, reading the report and the exit status.

Guidelines
- Treat the harness as a black box; assert on return values, report text and
  exit statuses rather than internal state.
- Real files are fine here (test modules written to ``tmp_path``).
"""
