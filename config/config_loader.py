"""
Configuration loader utility

Loads DispatchConfig and SimulationConfig from YAML files.
"""

import yaml
from pathlib import Path
from typing import Union

from .dispatch import DispatchConfig
from .simulation import SimulationConfig


class ConfigLoader:
    """Utility class for loading configuration files"""

    @staticmethod
    def _read_yaml(file_path: Union[str, Path]) -> dict:
        file_path = Path(file_path)

        if not file_path.exists():
            raise FileNotFoundError(f"Config file not found: {file_path}")

        with open(file_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {file_path} must contain a mapping")
        return data

    @staticmethod
    def _write_yaml(data: dict, file_path: Union[str, Path]):
        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        with open(file_path, 'w', encoding='utf-8') as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)

    @staticmethod
    def load_dispatch(file_path: Union[str, Path]) -> DispatchConfig:
        """
        Load DispatchConfig from YAML file

        Args:
            file_path: Path to YAML file

        Returns:
            DispatchConfig instance

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If validation fails
        """
        config = DispatchConfig.from_dict(ConfigLoader._read_yaml(file_path))
        config.validate()
        return config

    @staticmethod
    def load_simulation(file_path: Union[str, Path]) -> SimulationConfig:
        """
        Load SimulationConfig from YAML file

        Args:
            file_path: Path to YAML file

        Returns:
            SimulationConfig instance

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If validation fails
        """
        config = SimulationConfig.from_dict(ConfigLoader._read_yaml(file_path))
        config.validate()
        return config

    @staticmethod
    def save_dispatch(config: DispatchConfig, file_path: Union[str, Path]):
        """Save DispatchConfig to YAML file"""
        ConfigLoader._write_yaml(config.to_dict(), file_path)

    @staticmethod
    def save_simulation(config: SimulationConfig, file_path: Union[str, Path]):
        """Save SimulationConfig to YAML file"""
        ConfigLoader._write_yaml(config.to_dict(), file_path)


# Convenience functions
def load_dispatch_config(file_path: Union[str, Path]) -> DispatchConfig:
    """Load DispatchConfig from YAML file"""
    return ConfigLoader.load_dispatch(file_path)


def load_simulation_config(file_path: Union[str, Path]) -> SimulationConfig:
    """Load SimulationConfig from YAML file"""
    return ConfigLoader.load_simulation(file_path)


def save_dispatch_config(config: DispatchConfig, file_path: Union[str, Path]):
    """Save DispatchConfig to YAML file"""
    ConfigLoader.save_dispatch(config, file_path)


def save_simulation_config(config: SimulationConfig, file_path: Union[str, Path]):
    """Save SimulationConfig to YAML file"""
    ConfigLoader.save_simulation(config, file_path)
