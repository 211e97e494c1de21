"""
REST API 路由

定义 REST API 端点。
"""

from interfaces.api.routes.mailbox import router as mailbox_router

__all__ = ["mailbox_router"]
