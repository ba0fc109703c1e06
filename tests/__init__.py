"""shocktest test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- functional/   : User-visible flows of the harness used as a library (custom
                  drivers, stock entry point, loading test modules from disk).
- e2e/          : The ``shocktest`` command line invoked through Click's CliRunner.

General guidance
- Keep unit fast and deterministic (no real I/O); prefer fakes over mocks at boundaries.
- Functional asserts user-observable results, not internals.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Suggested markers: unit, functional, e2e, property
"""
