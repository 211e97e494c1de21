"""纳秒精度时间戳值对象"""

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from domain.common.base_value_object import BaseValueObject
from domain.common.exceptions import InvalidValueObjectException

_RFC3339_PATTERN = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})[Tt](\d{2}):(\d{2}):(\d{2})"
    r"(?:\.(\d{1,9}))?"
    r"([Zz]|[+-]\d{2}:\d{2})$"
)


@dataclass(frozen=True)
class Timestamp(BaseValueObject):
    """
    带固定时区偏移的纳秒精度时间戳

    datetime 只有微秒精度，因此秒以下部分单独存放在 nanosecond 中。
    时区偏移原样保留，不会转换为 UTC。

    Attributes:
        moment: 精确到秒的带时区 datetime（microsecond 必须为 0）
        nanosecond: 秒以下的纳秒数，0 <= nanosecond < 10**9
    """

    moment: datetime
    nanosecond: int = 0

    def validate(self) -> None:
        if self.moment.tzinfo is None or self.moment.utcoffset() is None:
            raise InvalidValueObjectException(
                value_object_type="Timestamp",
                value=self.moment,
                reason="Timestamp requires a timezone-aware datetime"
            )

        if self.moment.microsecond != 0:
            raise InvalidValueObjectException(
                value_object_type="Timestamp",
                value=self.moment,
                reason="Sub-second precision must be given as nanosecond"
            )

        if not 0 <= self.nanosecond < 1_000_000_000:
            raise InvalidValueObjectException(
                value_object_type="Timestamp",
                value=self.nanosecond,
                reason=f"Invalid nanosecond: {self.nanosecond}. Must be between 0 and 999999999"
            )

    @classmethod
    def from_datetime(cls, value: datetime, nanosecond: Optional[int] = None) -> "Timestamp":
        """
        从 datetime 创建时间戳

        Args:
            value: 带时区的 datetime
            nanosecond: 纳秒数，不提供则取 value 的微秒部分

        Returns:
            Timestamp 实例
        """
        if nanosecond is None:
            nanosecond = value.microsecond * 1000
        return cls(moment=value.replace(microsecond=0), nanosecond=nanosecond)

    @classmethod
    def parse(cls, value: str) -> "Timestamp":
        """
        解析 RFC 3339 时间字符串，秒以下最多 9 位

        Raises:
            InvalidValueObjectException: 格式不合法
        """
        match = _RFC3339_PATTERN.match(value)
        if match is None:
            raise InvalidValueObjectException(
                value_object_type="Timestamp",
                value=value,
                reason="Not an RFC 3339 timestamp"
            )

        year, month, day, hour, minute, second, fraction, offset = match.groups()

        try:
            if offset in ("Z", "z"):
                tz = timezone.utc
            else:
                hours, minutes = int(offset[1:3]), int(offset[4:6])
                if minutes >= 60:
                    raise ValueError(f"offset minutes must be in 0..59, got {minutes}")
                sign = -1 if offset[0] == "-" else 1
                tz = timezone(sign * timedelta(hours=hours, minutes=minutes))

            moment = datetime(
                int(year), int(month), int(day),
                int(hour), int(minute), int(second),
                tzinfo=tz,
            )
        except ValueError as e:
            raise InvalidValueObjectException(
                value_object_type="Timestamp",
                value=value,
                reason=str(e)
            ) from e

        nanosecond = int(fraction.ljust(9, "0")) if fraction else 0
        return cls(moment=moment, nanosecond=nanosecond)

    @property
    def utcoffset(self) -> timedelta:
        """原始 UTC 偏移"""
        return self.moment.utcoffset()  # type: ignore

    def to_datetime(self) -> datetime:
        """转换为 datetime（截断到微秒）"""
        return self.moment.replace(microsecond=self.nanosecond // 1000)
