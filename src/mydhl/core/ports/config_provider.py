"""
Config Provider Port - Abstract interface for configuration sources.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional


@dataclass
class ApiConfig:
    """Connection settings for the MyDHL API."""
    
    username: str = ""
    password: str = ""
    test_mode: bool = True
    base_url: Optional[str] = None
    timeout: float = 30.0
    
    def is_complete(self) -> bool:
        """Check if credentials are present."""
        return bool(self.username and self.password)


@dataclass
class AppConfig:
    """Complete configuration for the command line tool."""
    
    api: ApiConfig = field(default_factory=ApiConfig)
    shipment_path: Optional[Path] = None
    execute: bool = False
    verbose: bool = False
    label_output: Optional[Path] = None
    
    @property
    def dry_run(self) -> bool:
        return not self.execute


class ConfigProviderPort(ABC):
    """Abstract interface for configuration providers."""
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Get the provider name."""
        ...
    
    @abstractmethod
    def load(self) -> AppConfig:
        """
        Load the complete configuration.
        
        Returns:
            Populated AppConfig
        """
        ...
    
    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Get a single configuration value."""
        ...
    
    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Set a configuration value."""
        ...
    
    @abstractmethod
    def validate(self) -> list[str]:
        """
        Validate the configuration.
        
        Returns:
            List of error messages (empty if valid)
        """
        ...
