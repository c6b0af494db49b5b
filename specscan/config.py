"""Runtime settings, read from ``SPECSCAN_*`` environment variables or ``.env``."""

from __future__ import annotations

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	model_config = SettingsConfigDict(
		env_prefix="SPECSCAN_",
		env_file=".env",
		env_file_encoding="utf-8",
		extra="ignore",
	)

	# Analysis cache freshness window
	cache_ttl_seconds: float = 300.0

	# Project conventions
	framework_package: str = "go-zero"
	manifest_name: str = "go.mod"
	pruned_dirs: List[str] = ["vendor", "node_modules"]
	conventional_config_names: List[str] = ["etc.yaml", "etc.json"]
	# Treat any config-format file under an etc/ directory as config
	etc_dir_configs: bool = False

	# Server / logging
	log_level: str = "INFO"
	host: str = "127.0.0.1"
	port: int = 8000


@lru_cache()
def get_settings() -> Settings:
	return Settings()
