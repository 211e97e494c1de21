"""邮件地址值对象"""

from dataclasses import dataclass

from domain.common.base_value_object import BaseValueObject
from domain.common.exceptions import InvalidValueObjectException


@dataclass(frozen=True)
class Address(BaseValueObject):
    """
    邮件地址值对象

    Attributes:
        address: 地址字符串，例如 from1@host
        name: 显示名，没有时为空字符串
    """

    address: str
    name: str = ""

    def validate(self) -> None:
        if not self.address or not self.address.strip():
            raise InvalidValueObjectException(
                value_object_type="Address",
                value=self.address,
                reason="Address cannot be empty"
            )

    @property
    def has_name(self) -> bool:
        """是否带显示名"""
        return bool(self.name)
