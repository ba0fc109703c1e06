"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- No real I/O beyond in-memory streams; inject clocks and reporters.
- Prefer behavior-centric assertions over implementation details.
- Keep tests small, fast, and deterministic.
"""
