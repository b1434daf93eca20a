from enum import Enum
from typing import Any

from fastapi import HTTPException
from pydantic import BaseModel


def ok(data: Any, status: str = "ok"):
    if isinstance(data, BaseModel):
        data = data.model_dump(mode="json", by_alias=True)
    return {"status": status, "data": data, "error": None}


def err(message: str, code: str | Enum = "bad_request", http_status: int = 400):
    if isinstance(code, Enum):
        code = code.value
    raise HTTPException(
        status_code=http_status,
        detail={"status": "error", "data": None, "error": {"code": code, "message": message}},
    )
