# =============================================================================
# File: appsettings.py
# Date: 2026-10-19
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================
import os

from pydantic import BaseModel, Field


class AppConfig(BaseModel):
    name: str = Field(default="Env Guard")
    mode: str = Field(
        default="",
        description="Raw NODE_ENV value, empty when unset. Only \"production\" halts on critical findings.",
    )
    debug: bool = Field(default=False)
    is_production: bool = Field(default=False)

    @property
    def is_development(self) -> bool:
        return self.mode == "development"


class ServerConfig(BaseModel):
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000)


class StorageConfig(BaseModel):
    data_dir: str = Field(
        default=os.path.join(os.getcwd(), "data"),
        description="Directory holding one JSON file per store key.",
    )


class AppSettings(BaseModel):
    app: AppConfig = Field(default_factory=AppConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
