"""
Mailbox Service - 一次性邮箱查询 API 入口

运行：
    uv run python main.py

或使用 uvicorn：
    uv run uvicorn main:app --host 0.0.0.0 --port 9000 --reload

API 文档：
    http://localhost:9000/docs
"""

import uvicorn

from infrastructure.config.settings import get_settings
from interfaces.api import create_app

settings = get_settings()

# 导出 FastAPI app (用于 uvicorn)
app = create_app(settings)


if __name__ == "__main__":
    print("=" * 50)
    print(f"启动 {settings.app_name}")
    print("=" * 50)
    print()
    print("API 端点:")
    print(f"  GET  {settings.api_prefix}/mailbox/{{name}}       - 列出邮箱内的邮件")
    print(f"  GET  {settings.api_prefix}/mailbox/{{name}}/{{id}}  - 获取单封邮件")
    print()
    print(f"文档: http://localhost:{settings.port}/docs")
    print("=" * 50)

    uvicorn.run(app, host=settings.host, port=settings.port)
