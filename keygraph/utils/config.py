# keygraph/utils/config.py
"""
Configuration management and data structures for the keyboard graph compiler.

Provides:
  - Type-safe configuration validation using Pydantic
  - Exceptions raised by strict compilation and configuration loading
  - Configuration classes for:
    - Layout presets (geometry, row text, key tables, missing-key policy)
    - Path management
    - Logging settings
  - YAML loading of configuration and custom layout presets

All configuration classes include validation rules to ensure:
  - Required fields are present
  - Shift tables map single characters to single characters
  - Log levels are valid
  - Paths exist and are writable
"""
from enum import Enum
from typing import Dict, List, Optional, Union
from pathlib import Path
import logging

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

#------------------------------------------------
# exceptions
#------------------------------------------------
class LayoutError(Exception):
    """Base exception for layout-related errors."""
    pass

class UnknownKeyError(LayoutError):
    """Raised by strict compilation when the row text references an undeclared key."""

    def __init__(self, char: str, row: int, column: int):
        self.char = char
        self.row = row
        self.column = column
        super().__init__(f"Key {char!r} at row {row}, column {column} is not declared in the key table")

class ConfigurationError(LayoutError):
    """Raised when a configuration file can't be read or fails validation."""
    pass

#------------------------------------------------
# layout presets
#------------------------------------------------
class MissingKeys(str, Enum):
    """What the connector does with a character that is not a node yet."""
    SKIP = "skip"      # pre-registered policy
    CREATE = "create"  # auto-create policy
    RAISE = "raise"    # strict policy

class LayoutPreset(BaseModel):
    """Static description of one named layout."""
    name: str = Field(min_length=1)
    style: str = Field(default="slanted", pattern="^(slanted|aligned)$")
    rows: str
    alphabetics: bool = False
    numbers: bool = False
    keys: Dict[str, Optional[str]] = Field(default_factory=dict)
    missing_keys: MissingKeys = MissingKeys.SKIP

    @field_validator('rows')
    def rows_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("rows must contain at least one key")
        return v

    @field_validator('keys')
    def keys_must_be_single_characters(cls, v: Dict[str, Optional[str]]) -> Dict[str, Optional[str]]:
        for value, shifted in v.items():
            if len(value) != 1:
                raise ValueError(f"Key value must be a single character, got {value!r}")
            if shifted is not None and len(shifted) != 1:
                raise ValueError(f"Shifted value for {value!r} must be a single character, got {shifted!r}")
        return v

    model_config = ConfigDict(frozen=True)

#------------------------------------------------
# remaining Config
#------------------------------------------------
class LoggingConfig(BaseModel):
    """Logging configuration."""
    format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    console_level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    file_level: str = Field(default="DEBUG", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")

class PathsConfig(BaseModel):
    """Path configuration."""
    logs_dir: Path = Path("output/logs")
    plots_dir: Path = Path("output/plots")

    @field_validator('*')
    def create_directories(cls, v: Path) -> Path:
        v.mkdir(parents=True, exist_ok=True)
        return v

class Config(BaseModel):
    """Complete configuration with nested validation."""
    paths: PathsConfig = Field(default_factory=PathsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    layouts: List[LayoutPreset] = Field(default_factory=list)

    @field_validator('layouts')
    def layout_names_must_be_unique(cls, v: List[LayoutPreset]) -> List[LayoutPreset]:
        names = [preset.name for preset in v]
        duplicates = {name for name in names if names.count(name) > 1}
        if duplicates:
            raise ValueError(f"Duplicate layout names: {sorted(duplicates)}")
        return v

#------------------------------------------------
# loading
#------------------------------------------------
def _read_yaml(config_path: Union[str, Path]) -> Dict:
    path = Path(config_path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(f"Could not read configuration file: {path}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in configuration file: {path}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Expected a mapping at the top of {path}")
    return data

def load_config(config_path: Union[str, Path]) -> Config:
    """Load and validate configuration from a YAML file."""
    data = _read_yaml(config_path)
    try:
        config = Config(**data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration in {config_path}: {e}") from e
    logger.debug(f"Loaded configuration from {config_path} with {len(config.layouts)} custom layouts")
    return config

def load_presets(config_path: Union[str, Path]) -> List[LayoutPreset]:
    """
    Load custom layout presets from the 'layouts' section of a YAML file.

    Example:
        layouts:
          - name: phone_keypad
            style: aligned
            rows: "1 2 3\\n4 5 6\\n7 8 9\\n* 0 #"
            numbers: true
            missing_keys: create
    """
    return load_config(config_path).layouts
