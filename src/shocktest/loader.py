"""Import explicitly named test modules.

Test modules register their cases as a side effect of being imported.
A target is either a dotted module name or a path to a ``.py`` file. There is
no directory scanning or pattern matching: only the named targets are loaded,
in the order given.
"""

from __future__ import annotations

import importlib
import importlib.util
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from shocktest.errors import TargetLoadError

if TYPE_CHECKING:
    from collections.abc import Iterable
    from types import ModuleType

logger = logging.getLogger(__name__)


def _is_path(target: str) -> bool:
    return target.endswith(".py") or Path(target).is_file()


def _load_file(path: Path) -> ModuleType:
    # Loaded under a private name and re-executed on every call, so a file
    # always registers its cases, even if it was loaded before.
    spec = importlib.util.spec_from_file_location(f"_shocktest_target_{path.stem}", path)
    if spec is None or spec.loader is None:
        raise ImportError(f"no loader for {path}")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def load_target(target: str) -> ModuleType:
    """Import one test module so its cases get registered.

    Args:
        target: Dotted module name (``pkg.tests.test_parser``) or file path
            (``tests/test_parser.py``).

    Returns:
        The imported module.

    Raises:
        TargetLoadError: If the file is missing or importing the module raises.
    """
    try:
        if _is_path(target):
            path = Path(target)
            if not path.is_file():
                raise FileNotFoundError(f"no such file: {path}")
            module = _load_file(path.resolve())
        else:
            module = importlib.import_module(target)
    except Exception as e:  # pylint: disable=broad-except
        logger.debug("Failed to load %s", target, exc_info=True)
        raise TargetLoadError(target, f"{type(e).__name__}: {e}") from e
    logger.debug("Loaded test target %s", target)
    return module


def load_targets(targets: Iterable[str]) -> list[ModuleType]:
    """Load several targets in the given order."""
    return [load_target(target) for target in targets]
