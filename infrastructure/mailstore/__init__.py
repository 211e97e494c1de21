"""邮箱存储实现"""

from infrastructure.mailstore.fault_injecting_mailbox_store import FaultInjectingMailboxStore
from infrastructure.mailstore.memory_mailbox_store import InMemoryMailboxStore

__all__ = ["FaultInjectingMailboxStore", "InMemoryMailboxStore"]
