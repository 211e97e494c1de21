"""
应用容器（AppContainer）

管理应用层组件：命令/查询处理器。
依赖 InfraContainer 获取基础设施。
"""

from dependency_injector import containers, providers

from application.handlers.mailbox.deliver_message_handler import DeliverMessageHandler
from application.handlers.mailbox.get_mailbox_message_handler import GetMailboxMessageHandler
from application.handlers.mailbox.list_mailbox_messages_handler import ListMailboxMessagesHandler


class AppContainer(containers.DeclarativeContainer):
    """应用容器 - 管理应用层服务"""

    # 依赖配置容器
    config = providers.DependenciesContainer()

    # 依赖基础设施容器
    infra = providers.DependenciesContainer()

    # ============ 命令处理器 ============

    # 收信链路写入
    deliver_message_handler = providers.Factory(
        DeliverMessageHandler,
        store=infra.mailbox_store,
    )

    # ============ 查询处理器 ============

    list_mailbox_messages_handler = providers.Factory(
        ListMailboxMessagesHandler,
        store=infra.mailbox_store,
    )

    get_mailbox_message_handler = providers.Factory(
        GetMailboxMessageHandler,
        store=infra.mailbox_store,
    )
