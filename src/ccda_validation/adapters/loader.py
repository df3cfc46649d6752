"""
Resolve validator adapters from dotted import paths.

Paths use either "package.module:ClassName" or "package.module.ClassName".
The attribute may be a class (instantiated with no arguments) or a ready
instance.
"""

import importlib
from typing import Optional, TypeVar

import structlog

from ccda_validation.validation.exceptions import ValidatorConfigurationError

logger = structlog.get_logger(__name__)

AdapterT = TypeVar("AdapterT")


def load_validator(
    import_path: Optional[str],
    expected_type: type[AdapterT],
    setting: Optional[str] = None,
) -> AdapterT:
    """
    Import and instantiate one validator adapter.

    Args:
        import_path: Dotted path from settings
        expected_type: Adapter base class the result must be an instance of
        setting: Settings field name, used in error details

    Returns:
        Adapter instance

    Raises:
        ValidatorConfigurationError: Path missing, not importable, or wrong type
    """
    if not import_path:
        raise ValidatorConfigurationError(
            f"No {expected_type.__name__} configured",
            setting=setting,
        )

    if ":" in import_path:
        module_name, _, attribute = import_path.partition(":")
    else:
        module_name, _, attribute = import_path.rpartition(".")

    if not module_name or not attribute:
        raise ValidatorConfigurationError(
            f"Malformed validator import path '{import_path}'",
            setting=setting,
            import_path=import_path,
        )

    try:
        module = importlib.import_module(module_name)
        target = getattr(module, attribute)
    except (ImportError, AttributeError) as e:
        raise ValidatorConfigurationError(
            f"Cannot import validator '{import_path}': {e}",
            setting=setting,
            import_path=import_path,
        ) from e

    adapter = target() if isinstance(target, type) else target
    if not isinstance(adapter, expected_type):
        raise ValidatorConfigurationError(
            f"'{import_path}' is not a {expected_type.__name__}",
            setting=setting,
            import_path=import_path,
        )

    logger.info(
        "Loaded validator adapter",
        adapter_class=type(adapter).__name__,
        expected_type=expected_type.__name__,
        import_path=import_path,
    )
    return adapter
