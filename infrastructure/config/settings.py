"""
应用配置管理

使用 pydantic-settings 管理环境变量和配置
"""

from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    应用配置类

    自动从环境变量和 .env 文件读取配置
    """

    # ========== 应用环境 ==========
    app_env: Literal["test", "dev", "staging", "prod"] = "dev"
    app_name: str = "Mailbox Service"
    app_version: str = "1.0.0"
    debug: bool = False

    # ========== HTTP 服务 ==========
    host: str = "0.0.0.0"
    port: int = 9000
    api_prefix: str = "/api/v1"

    # ========== 日志配置 ==========
    log_level: str = "INFO"
    log_format: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # 忽略未定义的环境变量
    )

    @property
    def is_test(self) -> bool:
        """是否为测试环境"""
        return self.app_env == "test"

    @property
    def is_dev(self) -> bool:
        """是否为开发环境"""
        return self.app_env == "dev"

    @property
    def is_prod(self) -> bool:
        """是否为生产环境"""
        return self.app_env == "prod"

    @property
    def effective_log_level(self) -> str:
        """debug 模式下强制使用 DEBUG 级别"""
        return "DEBUG" if self.debug else self.log_level.upper()


# 全局配置实例（单例）
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    获取配置实例（单例模式）

    Returns:
        Settings 实例
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
