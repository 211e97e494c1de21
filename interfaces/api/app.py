"""FastAPI 应用工厂"""

from typing import Optional

from fastapi import FastAPI

from common.logging import configure_logging
from infrastructure.config.settings import Settings, get_settings
from infrastructure.containers import Bootstrap, bootstrap
from interfaces.api.routes import mailbox_router
from interfaces.api.routes.mailbox import set_get_handler_getter, set_list_handler_getter


def create_app(
    settings: Optional[Settings] = None,
    boot: Optional[Bootstrap] = None,
) -> FastAPI:
    """
    创建 FastAPI 应用

    流程：
    1. 读取配置并初始化日志
    2. 创建 DI 容器
    3. 把容器中的 Handler 注册到路由
    4. 挂载路由

    Args:
        settings: 指定配置，不提供则从环境变量读取
        boot: 指定已创建的容器，不提供则新建

    Returns:
        FastAPI 实例，容器挂在 app.state.bootstrap 上
    """
    settings = settings or get_settings()
    configure_logging(settings.effective_log_level, settings.log_format)

    boot = boot or bootstrap(settings)
    container = boot.app

    # 注册 Handler Getters（连接 DI 容器到路由）
    set_list_handler_getter(container.list_mailbox_messages_handler)
    set_get_handler_getter(container.get_mailbox_message_handler)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
    )
    app.state.bootstrap = boot
    app.include_router(mailbox_router, prefix=settings.api_prefix)

    @app.get("/health")
    def health():
        """健康检查"""
        return {"status": "healthy"}

    return app
