# tailor/config.py
import os
from dataclasses import dataclass

import yaml


@dataclass
class TailorConfig:
    """Configuration for scoring tools (CLI reports and logging)"""

    # Logging
    log_level: str = "WARNING"
    log_format: str = "%(message)s"

    # Report output
    report_width: int = 70
    max_missing_keywords_shown: int = 10
    show_bullet_assessments: bool = False

    def __post_init__(self):
        self.log_level = self.log_level.upper()
        if self.report_width < 40:
            raise ValueError(f"report_width must be at least 40, got {self.report_width}")

    @classmethod
    def from_yaml(cls, path: str):
        """Load configuration from YAML file"""
        with open(path, 'r') as f:
            data = yaml.safe_load(f) or {}
        return cls(**data.get('tailor', {}))


def get_config(path: str = None) -> TailorConfig:
    """Get configuration from an explicit path, TAILOR_CONFIG, or defaults"""
    config_path = path or os.getenv('TAILOR_CONFIG', 'config/tailor.yaml')

    if os.path.exists(config_path):
        return TailorConfig.from_yaml(config_path)
    if path:
        raise FileNotFoundError(f"Config file not found: {path}")
    return TailorConfig()
