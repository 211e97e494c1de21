"""
邮件文档渲染

把领域对象转换为对外的 JSON 结构。字段名和格式是对外契约的一部分：

- 地址：无显示名为 "<addr>"，有显示名为 "Name <addr>"
- 时间：RFC 3339，秒以下保留到纳秒（去掉末尾的 0），保留原始时区偏移
- size：非负整数，未计算时为 0
"""

from typing import Any, Dict, Iterable, List

from domain.mailbox.entities.message import Message, Metadata
from domain.mailbox.value_objects.address import Address
from domain.mailbox.value_objects.timestamp import Timestamp


def format_address(address: Address) -> str:
    """格式化邮件地址"""
    if address.has_name:
        return f"{address.name} <{address.address}>"
    return f"<{address.address}>"


def format_timestamp(value: Timestamp) -> str:
    """
    格式化时间戳

    例如 2012-02-01T10:11:12.000000253-08:00；纳秒为 0 时不输出小数部分，
    UTC 偏移为 0 时输出 "Z"。
    """
    moment = value.moment
    text = (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )

    if value.nanosecond:
        text += "." + f"{value.nanosecond:09d}".rstrip("0")

    offset = int(value.utcoffset.total_seconds())
    if offset == 0:
        return text + "Z"

    sign = "-" if offset < 0 else "+"
    hours, remainder = divmod(abs(offset), 3600)
    return text + f"{sign}{hours:02d}:{remainder // 60:02d}"


def render_summary(metadata: Metadata) -> Dict[str, Any]:
    """渲染邮件摘要（不含正文和头部）"""
    return {
        "mailbox": metadata.mailbox,
        "id": metadata.id,
        "from": format_address(metadata.from_address),
        "to": [format_address(address) for address in metadata.to],
        "subject": metadata.subject,
        "date": format_timestamp(metadata.date),
        "size": metadata.size,
    }


def render_listing(items: Iterable[Metadata]) -> List[Dict[str, Any]]:
    """渲染邮箱列表，保持输入顺序"""
    return [render_summary(metadata) for metadata in items]


def render_message(message: Message) -> Dict[str, Any]:
    """
    渲染完整邮件

    摘要字段之外增加 body（text/html）和 header（名称 -> 值列表）。
    没有 envelope 的邮件渲染为空正文和空头部。
    """
    document = render_summary(message.metadata)
    envelope = message.envelope

    if envelope is None:
        document["body"] = {"text": "", "html": ""}
        document["header"] = {}
        return document

    document["body"] = {"text": envelope.text, "html": envelope.html}
    document["header"] = {name: list(values) for name, values in envelope.headers.items()}
    return document
