"""邮件实体"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Sequence, Tuple

from domain.common.exceptions import InvalidOperationException, MailboxError
from domain.mailbox.value_objects.address import Address
from domain.mailbox.value_objects.mailbox_name import parse_mailbox_name
from domain.mailbox.value_objects.timestamp import Timestamp


@dataclass(frozen=True)
class Metadata:
    """
    邮件元数据（列表摘要所需的全部字段）

    Attributes:
        mailbox: 所属邮箱名
        id: 邮件 ID，由写入方分配，在邮箱内唯一
        from_address: 发件人
        to: 收件人列表，保持写入顺序
        subject: 主题，可以为空
        date: 邮件时间，保留原始时区偏移
        size: 邮件大小（字节），写入方未计算时为 0
    """

    mailbox: str
    id: str
    from_address: Address
    date: Timestamp
    to: Tuple[Address, ...] = field(default=())
    subject: str = field(default="")
    size: int = field(default=0)

    def __post_init__(self) -> None:
        # 收件人统一存为 tuple，调用方后续修改原列表不会影响元数据
        object.__setattr__(self, "to", tuple(self.to))
        self._validate()

    def _validate(self) -> None:
        try:
            canonical = parse_mailbox_name(self.mailbox)
        except MailboxError as e:
            raise InvalidOperationException(
                operation="create_metadata",
                reason=f"Invalid mailbox name: {self.mailbox!r}"
            ) from e

        # 查询方总是按规范化后的名字寻址
        if canonical != self.mailbox:
            raise InvalidOperationException(
                operation="create_metadata",
                reason=f"Mailbox name must be normalised: {self.mailbox!r} (expected {canonical!r})"
            )

        if not self.id:
            raise InvalidOperationException(
                operation="create_metadata",
                reason="Message ID cannot be empty"
            )

        if self.size < 0:
            raise InvalidOperationException(
                operation="create_metadata",
                reason=f"Message size cannot be negative: {self.size}"
            )


@dataclass(frozen=True)
class Envelope:
    """
    解析后的邮件内容

    Attributes:
        text: 纯文本正文
        html: HTML 正文
        headers: 原始头部，名称保留原始大小写，值保留原始顺序（含重复）
    """

    text: str = field(default="")
    html: str = field(default="")
    headers: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        frozen = {name: tuple(values) for name, values in self.headers.items()}
        object.__setattr__(self, "headers", MappingProxyType(frozen))

    def header_values(self, name: str) -> Tuple[str, ...]:
        """按原始名称获取头部值，不存在返回空 tuple"""
        return self.headers.get(name, ())


@dataclass(frozen=True)
class Message:
    """
    邮件 = 元数据 + 内容

    实例不可变，存储层可以直接返回引用而不必担心调用方修改。

    Attributes:
        metadata: 元数据
        envelope: 解析后的内容，写入方未提供时为 None
    """

    metadata: Metadata
    envelope: Optional[Envelope] = None

    @classmethod
    def create(
        cls,
        mailbox: str,
        id: str,
        from_address: Address,
        date: Timestamp,
        to: Sequence[Address] = (),
        subject: str = "",
        size: int = 0,
        envelope: Optional[Envelope] = None,
    ) -> "Message":
        """
        工厂方法：创建邮件

        Args:
            mailbox: 所属邮箱名
            id: 邮件 ID
            from_address: 发件人
            date: 邮件时间
            to: 收件人列表
            subject: 主题
            size: 大小（字节）
            envelope: 解析后的内容（可选）

        Returns:
            Message 实例
        """
        metadata = Metadata(
            mailbox=mailbox,
            id=id,
            from_address=from_address,
            date=date,
            to=tuple(to),
            subject=subject,
            size=size,
        )
        return cls(metadata=metadata, envelope=envelope)

    @property
    def mailbox(self) -> str:
        return self.metadata.mailbox

    @property
    def id(self) -> str:
        return self.metadata.id

    @property
    def has_envelope(self) -> bool:
        return self.envelope is not None
