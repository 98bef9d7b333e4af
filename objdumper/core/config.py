"""Configuration management for Objdumper.

Settings live in a single INI file in the user's home directory and can be
overridden per invocation through environment variables.
"""

import os
import configparser
from pathlib import Path
from typing import Optional, Dict

from objdumper.core.errors import ConfigError


class Config:
    """
    Manages the Objdumper configuration file.
    
    Configuration is stored in INI format at ~/.objdumperconfig.
    Environment variables take precedence over the file.
    
    Known keys:
        core.git         git executable to run
        core.repository  directory git runs in (git -C)
        scan.root        default object store for scan-objects
        color.ui         'false' disables coloured messages
    """
    
    CONFIG_PATH = Path.home() / '.objdumperconfig'
    
    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize Config manager.
        
        Args:
            config_path: Path to the config file, defaults to CONFIG_PATH
        """
        self.config_path = Path(config_path) if config_path else self.CONFIG_PATH
        self._parser = None
        self.load_error = None
    
    @property
    def parser(self) -> configparser.ConfigParser:
        """
        Load and return the parsed configuration.
        
        A malformed file is treated as empty and the parse error is kept in
        load_error, so reads fall back to defaults and writes are refused.
        """
        if self._parser is None:
            self._parser = configparser.ConfigParser()
            if self.config_path.exists():
                try:
                    self._parser.read(self.config_path)
                except configparser.Error as e:
                    self.load_error = e
                    self._parser = configparser.ConfigParser()
        return self._parser
    
    def get(self, section: str, key: str, fallback: Optional[str] = None) -> Optional[str]:
        """
        Get a configuration value.
        
        Priority order (highest to lowest):
        1. Environment variables (OBJDUMPER_<SECTION>_<KEY>)
        2. Config file
        3. Fallback value
        
        Args:
            section: Config section (e.g., 'core', 'scan')
            key: Config key (e.g., 'git', 'root')
            fallback: Default value if not found
            
        Returns:
            Configuration value or fallback
        """
        env_key = f"OBJDUMPER_{section.upper()}_{key.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return env_value
        
        if self.parser.has_option(section, key):
            return self.parser.get(section, key, raw=True)
        
        return fallback
    
    def get_bool(self, section: str, key: str, fallback: bool = True) -> bool:
        """Get a boolean value, accepting the usual INI spellings."""
        value = self.get(section, key)
        if value is None:
            return fallback
        return value.strip().lower() in ('1', 'true', 'yes', 'on')
    
    def set(self, section: str, key: str, value: str) -> None:
        """Set a configuration value and write the file."""
        config = self.parser
        if not config.has_section(section):
            config.add_section(section)
        
        config.set(section, key, value)
        self._write()
    
    def unset(self, section: str, key: str) -> bool:
        """
        Remove a configuration value.
        
        Returns:
            True if value was removed, False if it didn't exist
        """
        config = self.parser
        if not config.has_option(section, key):
            return False
        
        config.remove_option(section, key)
        
        # Remove empty sections
        if not config.options(section):
            config.remove_section(section)
        
        self._write()
        return True
    
    def list_all(self) -> Dict[str, Dict[str, str]]:
        """Return all values from the config file, keyed by section."""
        return {
            section: dict(self.parser.items(section, raw=True))
            for section in self.parser.sections()
        }
    
    def _write(self) -> None:
        if self.load_error is not None:
            raise ConfigError(self.config_path, f"file is malformed ({self.load_error.__class__.__name__})")
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, 'w') as f:
            self.parser.write(f)


def split_key(key: str):
    """Split 'section.key' into its parts; bare keys go to 'core'."""
    return tuple(key.split('.', 1)) if '.' in key else ('core', key)


def get_config(config_path: Optional[Path] = None) -> Config:
    """Get a Config instance."""
    return Config(config_path)
