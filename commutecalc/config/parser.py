"""
Configuration file parser for CommuteCalc
Handles YAML and JSON configuration files with validation
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError

from commutecalc.core.inputs import DEFAULT_CITIES, DEFAULT_HOME

from .models import ConfigFormat, EstimateConfig


class ConfigParserError(Exception):
    """Configuration parsing error"""
    pass


class ConfigParser:
    """Parser for CommuteCalc configuration files"""

    @staticmethod
    def detect_format(file_path: Path) -> ConfigFormat:
        """Detect configuration file format from extension"""
        suffix = file_path.suffix.lower()

        if suffix in ['.yaml', '.yml']:
            return ConfigFormat.YAML
        elif suffix == '.json':
            return ConfigFormat.JSON
        else:
            raise ConfigParserError(f"Unsupported file format: {suffix}")

    @staticmethod
    def load_file(file_path: Path) -> Dict[str, Any]:
        """Load configuration file content"""
        if not file_path.exists():
            raise ConfigParserError(f"Configuration file not found: {file_path}")

        format_type = ConfigParser.detect_format(file_path)

        try:
            content = file_path.read_text(encoding='utf-8')

            if format_type == ConfigFormat.YAML:
                return yaml.safe_load(content) or {}
            return json.loads(content)

        except yaml.YAMLError as e:
            raise ConfigParserError(f"Invalid YAML syntax: {e}")
        except json.JSONDecodeError as e:
            raise ConfigParserError(f"Invalid JSON syntax: {e}")
        except OSError as e:
            raise ConfigParserError(f"Error reading file: {e}")

    @staticmethod
    def save_file(config: EstimateConfig, file_path: Path, format_type: Optional[ConfigFormat] = None) -> None:
        """Save configuration to file"""
        if format_type is None:
            format_type = ConfigParser.detect_format(file_path)

        file_path.parent.mkdir(parents=True, exist_ok=True)

        config_dict = config.model_dump(exclude_none=True, mode='json')

        if format_type == ConfigFormat.YAML:
            content = yaml.dump(
                config_dict,
                default_flow_style=False,
                allow_unicode=True,
                sort_keys=False,
                indent=2
            )
        else:
            content = json.dumps(config_dict, indent=2, ensure_ascii=False)

        try:
            file_path.write_text(content, encoding='utf-8')
        except OSError as e:
            raise ConfigParserError(f"Error saving file: {e}")

    @staticmethod
    def parse_config(file_path: Union[str, Path]) -> EstimateConfig:
        """
        Parse configuration file into EstimateConfig

        Args:
            file_path: Path to configuration file

        Returns:
            EstimateConfig instance

        Raises:
            ConfigParserError: If parsing fails
        """
        file_path = Path(file_path)
        raw_data = ConfigParser.load_file(file_path)

        if not isinstance(raw_data, dict):
            raise ConfigParserError("Configuration must be a mapping of settings")

        try:
            return EstimateConfig(**raw_data)
        except ValidationError as e:
            raise ConfigParserError(f"Configuration validation failed: {e}")

    @staticmethod
    def create_template_config() -> EstimateConfig:
        """Create a template configuration with the demo home and cities"""
        return EstimateConfig(
            home=DEFAULT_HOME,
            cities=DEFAULT_CITIES[:5],
        )
