from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse


def success_response(
    data: Any, message: str = "Success", status_code: int = status.HTTP_200_OK
):
    return JSONResponse(
        status_code=status_code,
        content={
            "statusCode": status_code,
            "message": message,
            "data": data,
        },
    )
