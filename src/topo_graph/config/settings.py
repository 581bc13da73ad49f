from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .defaults import (
    LISTING_DEFAULT_LIMIT,
    MAX_VERTICES_DEFAULT,
)


class AppSettings(BaseSettings):
    """全局应用设置（可由环境变量/配置文件覆盖）"""

    model_config = SettingsConfigDict(
        env_prefix="TOPO_GRAPH_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # 全局
    verbose: bool = Field(default=False, description="详细日志输出")

    # 规模限制
    max_vertices: int = Field(default=MAX_VERTICES_DEFAULT, ge=1, description="允许构造的最大顶点数")
    listing_limit: int = Field(default=LISTING_DEFAULT_LIMIT, ge=0, description="顶点/边列表最多显示条数")


__all__ = ["AppSettings"]
