"""邮箱查询 API 路由"""

from typing import Callable, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from application.handlers.mailbox.get_mailbox_message_handler import GetMailboxMessageHandler
from application.handlers.mailbox.list_mailbox_messages_handler import ListMailboxMessagesHandler
from application.mailbox.outcomes import MailboxQueryResult, QueryStatus
from application.queries.mailbox.get_mailbox_message import GetMailboxMessageQuery
from application.queries.mailbox.list_mailbox_messages import ListMailboxMessagesQuery


router = APIRouter(prefix="/mailbox", tags=["Mailbox"])


# ============ Handler 依赖注入 ============

_list_handler_getter: Optional[Callable[[], ListMailboxMessagesHandler]] = None


def set_list_handler_getter(getter: Optional[Callable[[], ListMailboxMessagesHandler]]) -> None:
    """设置 list handler 获取器（由 DI 容器调用）"""
    global _list_handler_getter
    _list_handler_getter = getter


def get_list_messages_handler() -> Optional[ListMailboxMessagesHandler]:
    """获取 ListMailboxMessagesHandler 实例"""
    if _list_handler_getter is None:
        return None
    return _list_handler_getter()


_get_handler_getter: Optional[Callable[[], GetMailboxMessageHandler]] = None


def set_get_handler_getter(getter: Optional[Callable[[], GetMailboxMessageHandler]]) -> None:
    """设置 get handler 获取器（由 DI 容器调用）"""
    global _get_handler_getter
    _get_handler_getter = getter


def get_message_handler() -> Optional[GetMailboxMessageHandler]:
    """获取 GetMailboxMessageHandler 实例"""
    if _get_handler_getter is None:
        return None
    return _get_handler_getter()


# ============ Response DTOs ============


class MessageSummaryDTO(BaseModel):
    """邮件摘要 DTO"""

    model_config = ConfigDict(populate_by_name=True)

    mailbox: str = Field(..., description="邮箱名")
    id: str = Field(..., description="邮件 ID")
    from_: str = Field(..., alias="from", description="发件人，如 <from1@host>")
    to: List[str] = Field(..., description="收件人列表，保持原始顺序")
    subject: str = Field(..., description="主题")
    date: str = Field(..., description="RFC 3339 时间，保留纳秒和原始时区偏移")
    size: int = Field(..., ge=0, description="大小（字节），未计算时为 0")


class MessageBodyDTO(BaseModel):
    """邮件正文 DTO"""

    text: str = Field(..., description="纯文本正文")
    html: str = Field(..., description="HTML 正文")


class MessageDTO(MessageSummaryDTO):
    """完整邮件 DTO"""

    body: MessageBodyDTO = Field(..., description="正文")
    header: Dict[str, List[str]] = Field(..., description="原始头部，名称 -> 值列表")


class ErrorResponseDTO(BaseModel):
    """错误响应 DTO"""

    detail: str = Field(..., description="错误详情")
    error_code: Optional[str] = Field(default=None, description="错误代码，如 message_not_found")


# ============ API Endpoints ============


def _failure_response(result: MailboxQueryResult) -> Optional[JSONResponse]:
    """把失败结果转换为 HTTP 错误响应，成功时返回 None"""
    if result.status == QueryStatus.NOT_FOUND:
        status_code, default_detail = status.HTTP_404_NOT_FOUND, "Message not found"
    elif result.status == QueryStatus.INTERNAL_FAILURE:
        status_code, default_detail = status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal error"
    else:
        return None

    return JSONResponse(
        status_code=status_code,
        content={"detail": result.message or default_detail, "error_code": result.error_code},
    )


def _require_handler(handler):
    if handler is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Handler not configured. Please configure dependency injection.",
        )
    return handler


@router.get(
    "/{name}",
    responses={
        200: {"model": List[MessageSummaryDTO], "description": "邮件摘要列表（按到达顺序）"},
        500: {"model": ErrorResponseDTO, "description": "邮箱名非法或邮箱读取失败"},
    },
    summary="列出邮箱内的邮件",
    description="""
    返回邮箱内所有邮件的摘要，按到达顺序排列。

    **状态说明：**
    - **200 OK**: 成功，空邮箱返回 `[]`
    - **500 Internal Server Error**: 邮箱名非法，或邮箱读取失败
    """,
)
def list_mailbox(
    name: str,
    handler: Optional[ListMailboxMessagesHandler] = Depends(get_list_messages_handler),
):
    """列出邮箱内的邮件"""
    handler = _require_handler(handler)

    result = handler.handle(ListMailboxMessagesQuery(mailbox=name))
    failure = _failure_response(result)
    if failure is not None:
        return failure

    return JSONResponse(status_code=status.HTTP_200_OK, content=result.data)


@router.get(
    "/{name}/{message_id}",
    responses={
        200: {"model": MessageDTO, "description": "完整邮件"},
        404: {"model": ErrorResponseDTO, "description": "邮件不存在"},
        500: {"model": ErrorResponseDTO, "description": "邮箱名非法、邮箱读取失败或正文读取失败"},
    },
    summary="获取单封邮件",
    description="""
    返回邮件摘要字段，以及 `body`（text/html）和 `header`（原始头部）。

    **状态说明：**
    - **200 OK**: 成功
    - **404 Not Found**: 邮箱中没有该邮件
    - **500 Internal Server Error**: 邮箱名非法、邮箱读取失败或正文读取失败
    """,
)
def get_mailbox_message(
    name: str,
    message_id: str,
    handler: Optional[GetMailboxMessageHandler] = Depends(get_message_handler),
):
    """获取单封邮件"""
    handler = _require_handler(handler)

    result = handler.handle(GetMailboxMessageQuery(mailbox=name, message_id=message_id))
    failure = _failure_response(result)
    if failure is not None:
        return failure

    return JSONResponse(status_code=status.HTTP_200_OK, content=result.data)
