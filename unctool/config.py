from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Mount table
    mounts_file: str = "/proc/mounts"
    mount_fs_type: str = "cifs"  # Only lines with this fs type are network shares

    # Prefix matching
    require_segment_boundary: bool = False  # True: //mynas no longer matches //mynasX

    # Logging configuration
    log_level: str = "WARNING"
    log_file_path: str = ""  # Empty disables file logging
    log_retention_days: int = 30

    model_config = SettingsConfigDict(
        env_prefix="UNCTOOL_", env_file="unctool.env", extra="ignore"
    )

    @property
    def log_directory(self) -> Path:
        """Return log directory as a Path object"""
        return Path(self.log_file_path).parent
