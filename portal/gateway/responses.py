"""게이트웨이 응답 본문 형식.

Gateway response envelopes:
    목록 (list):   {success, status, data, pagination}
    단건 (item):   {success, status, data}
    메시지 (message): {success, status, message}
"""

from typing import Any


def list_body(items: list[Any], page: dict[str, Any], current_page: int, limit: int) -> dict[str, Any]:
    """목록 응답 — Wrap a downstream page.

    Args:
        items: 반환할 행 (Rows to return, possibly enriched or scoped)
        page: 다운스트림 페이지 본문 (Downstream ``{items, currentPage, totalItems, totalPages}``)
        current_page: 요청 페이지 (Requested page)
        limit: 페이지당 항목 수 (Requested page size)
    """
    return {
        "success": True,
        "status": 200,
        "data": items,
        "pagination": {
            "currentPage": current_page,
            "totalPages": page.get("totalPages", 0),
            "totalItems": page.get("totalItems", 0),
            "itemsPerPage": limit,
        },
    }


def item_body(data: Any, status: int = 200) -> dict[str, Any]:
    return {"success": True, "status": status, "data": data}


def message_body(message: str) -> dict[str, Any]:
    return {"success": True, "status": 200, "message": message}
