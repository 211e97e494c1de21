"""
基础设施容器（InfraContainer）

管理所有基础设施组件：邮箱存储等。
依赖 ConfigContainer 获取配置。
"""

from dependency_injector import containers, providers

from infrastructure.mailstore.memory_mailbox_store import InMemoryMailboxStore


class InfraContainer(containers.DeclarativeContainer):
    """基础设施容器 - 管理技术实现"""

    # 依赖配置容器
    config = providers.DependenciesContainer()

    # ============ 存储 ============

    # 邮箱存储（单例，进程内所有请求和收信链路共享同一实例）
    mailbox_store = providers.Singleton(InMemoryMailboxStore)
