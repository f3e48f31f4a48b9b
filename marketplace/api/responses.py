"""
API 응답 형식
{"status", "message", "errors", "data"}
"""

from typing import Any, List, Optional

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def success(request: Request, data: Any = None, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    """성공 응답 (message: Succeed to <METHOD> data)"""
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(
            {
                "status": True,
                "message": f"Succeed to {request.method} data",
                "errors": None,
                "data": data,
            }
        ),
    )


def failure(
    request: Request,
    errors: List[str],
    status_code: int = status.HTTP_400_BAD_REQUEST,
    message: Optional[str] = None,
) -> JSONResponse:
    """실패 응답 (message: Failed to <METHOD> data 또는 지정값)"""
    return JSONResponse(
        status_code=status_code,
        content={
            "status": False,
            "message": message or f"Failed to {request.method} data",
            "errors": errors,
            "data": None,
        },
    )
