"""
Static test discovery.

Lists test classes and their test methods by parsing `test_*.py` files, so
the runner can show what exists without importing Playwright or starting
pytest.
"""

import ast
from pathlib import Path
from typing import Dict, List, Optional, Union

from loguru import logger


MODULE_LEVEL = "<module>"


def list_tests(
    tests_dir: Union[str, Path],
    test_class: Optional[str] = None,
) -> Dict[str, List[str]]:
    """
    Map each test class to its test method names.

    Module-level `test_*` functions are grouped under `<module>:<file stem>`.

    Args:
        tests_dir: Directory searched recursively for `test_*.py`
        test_class: Only return this class when given

    Raises:
        FileNotFoundError: `tests_dir` does not exist
    """
    tests_dir = Path(tests_dir)
    if not tests_dir.is_dir():
        raise FileNotFoundError(f"Tests directory not found: {tests_dir}")

    catalog: Dict[str, List[str]] = {}
    for path in sorted(tests_dir.rglob("test_*.py")):
        try:
            tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
        except SyntaxError as e:
            logger.warning(f"Skipping unparsable test module {path}: {e}")
            continue

        for node in tree.body:
            if isinstance(node, ast.ClassDef) and node.name.startswith("Test"):
                if test_class and node.name != test_class:
                    continue
                catalog[node.name] = [
                    item.name
                    for item in node.body
                    if isinstance(item, ast.FunctionDef) and item.name.startswith("test_")
                ]
            elif (
                isinstance(node, ast.FunctionDef)
                and node.name.startswith("test_")
                and not test_class
            ):
                catalog.setdefault(f"{MODULE_LEVEL}:{path.stem}", []).append(node.name)

    return catalog


def count_tests(catalog: Dict[str, List[str]]) -> int:
    return sum(len(names) for names in catalog.values())


__all__ = [
    "list_tests",
    "count_tests",
]
