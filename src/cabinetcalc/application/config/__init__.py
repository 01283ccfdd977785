"""Configuration schema and loading system for calculation files.

This package provides JSON-based configuration loading and validation. It
includes Pydantic models for schema validation, a configuration loader
with comprehensive error handling, adapters to domain value objects and
hardware placement and dimension advisory checks.

Public API:
    - CalculationConfiguration: Root configuration model
    - OpeningConfig, DoorConfig, DoubleDoorConfig, DrawerFrontConfig,
      HandleConfig, HingeConfig, BlumHingePlateConfig, TandemboxConfig,
      ShakerConfig: Section models
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - ValidationResult: Container for validation results
    - validate_config: Perform full configuration validation

Example:
    >>> from pathlib import Path
    >>> from cabinetcalc.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("kitchen-base.json"))
    ...     print(f"Opening: {config.opening.width}x{config.opening.height}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from cabinetcalc.application.config.adapter import (
    config_to_door,
    config_to_door_options,
    config_to_double_door_options,
    config_to_drawer_options,
    config_to_opening,
)
from cabinetcalc.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from cabinetcalc.application.config.schema import (
    SUPPORTED_VERSIONS,
    BlumHingePlateConfig,
    CalculationConfiguration,
    DoorConfig,
    DoubleDoorConfig,
    DrawerFrontConfig,
    HandleConfig,
    HingeConfig,
    OpeningConfig,
    ShakerConfig,
    TandemboxConfig,
)
from cabinetcalc.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    check_dimension_advisories,
    check_hardware_placement,
    validate_config,
)

__all__ = [
    "BlumHingePlateConfig",
    "CalculationConfiguration",
    "ConfigError",
    "DoorConfig",
    "DoubleDoorConfig",
    "DrawerFrontConfig",
    "HandleConfig",
    "HingeConfig",
    "OpeningConfig",
    "SUPPORTED_VERSIONS",
    "ShakerConfig",
    "TandemboxConfig",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "check_dimension_advisories",
    "check_hardware_placement",
    "config_to_door",
    "config_to_door_options",
    "config_to_double_door_options",
    "config_to_drawer_options",
    "config_to_opening",
    "load_config",
    "load_config_from_dict",
    "validate_config",
]
