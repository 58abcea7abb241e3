# src/classlocation/loader.py
"""Turn a command-line target into a loaded unit."""

import importlib
from typing import Any


def load_unit(target: str) -> Any:
    """Import the unit named by ``target``.

    Args:
        target: Either 'module.path' or 'module.path:Qual.Name'

    Returns:
        The module, or the object reached by walking the dotted name from it

    Raises:
        ValueError: If the target is malformed, the module cannot be imported
            or an attribute along the name is missing

    Examples:
        >>> load_unit("json.decoder")  # doctest: +SKIP
        >>> load_unit("json.decoder:JSONDecoder.decode")  # doctest: +SKIP
    """
    module_name, _, attr_path = target.partition(":")
    if not module_name or (":" in target and not attr_path):
        raise ValueError(f"Target must be 'module' or 'module:name', got: {target}")

    try:
        unit = importlib.import_module(module_name)
    except ImportError as e:
        raise ValueError(f"Could not import module '{module_name}': {e}") from e

    if not attr_path:
        return unit

    for attr in attr_path.split("."):
        if not hasattr(unit, attr):
            raise ValueError(f"'{module_name}' has no attribute '{attr_path}'")
        unit = getattr(unit, attr)
    return unit
