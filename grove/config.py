"""Configuration management for Grove."""

import zlib
from dataclasses import dataclass
from pathlib import Path

import platformdirs
import yaml


@dataclass
class GlobalConfig:
    """Global Grove configuration (per machine)."""
    
    default_branch: str = "master"
    compression_level: int = zlib.Z_DEFAULT_COMPRESSION
    log_abbrev: int = 6
    
    @property
    def config_path(self) -> Path:
        """Path to global config file."""
        config_dir = Path(platformdirs.user_config_dir("Grove", "Grove"))
        return config_dir / "config.yaml"
    
    def validate(self) -> None:
        """Check values are within range."""
        branch = self.default_branch
        if not isinstance(branch, str) or not branch or ".." in branch or branch != branch.strip():
            raise ValueError(f"Invalid default branch: {branch!r}")
        if not isinstance(self.compression_level, int) or not -1 <= self.compression_level <= 9:
            raise ValueError(f"compression_level must be between -1 and 9, got {self.compression_level}")
        if not isinstance(self.log_abbrev, int) or not 4 <= self.log_abbrev <= 40:
            raise ValueError(f"log abbrev must be between 4 and 40, got {self.log_abbrev}")
    
    def save(self) -> None:
        """Save global configuration."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        
        data = {
            "init": {"default_branch": self.default_branch},
            "core": {"compression_level": self.compression_level},
            "log": {"abbrev": self.log_abbrev},
        }
        
        with open(self.config_path, "w") as f:
            yaml.safe_dump(data, f, sort_keys=False)
    
    @classmethod
    def load(cls) -> "GlobalConfig":
        """Load global configuration, falling back to defaults."""
        config = cls()
        
        if config.config_path.exists():
            with open(config.config_path) as f:
                data = yaml.safe_load(f) or {}
            
            config.default_branch = data.get("init", {}).get("default_branch", config.default_branch)
            config.compression_level = data.get("core", {}).get("compression_level", config.compression_level)
            config.log_abbrev = data.get("log", {}).get("abbrev", config.log_abbrev)
            config.validate()
        
        return config
    
    @classmethod
    def load_or_create(cls) -> "GlobalConfig":
        """Load or create default global configuration."""
        config = cls.load()
        
        if not config.config_path.exists():
            config.save()
        
        return config
