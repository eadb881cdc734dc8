"""ResponseEnvelope — the uniform success/fail wrapper of every reply.

Wire form::

    {"status": "success", "data": <payload>}
    {"status": "fail", "error_detail": "<message>"}

The CLI client parses replies with the same model.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel

if TYPE_CHECKING:
    from walletd.errors.walletd_errors import WalletdError

STATUS_SUCCESS = "success"
STATUS_FAIL = "fail"


class ResponseEnvelope(BaseModel):
    """Success or fail reply wrapper."""

    status: Literal["success", "fail"]
    data: Any = None
    error_detail: str | None = None

    @classmethod
    def success(cls, data: Any = None) -> ResponseEnvelope:
        """Wrap a handler payload; models and dataclasses become plain JSON."""
        return cls(status=STATUS_SUCCESS, data=jsonable_encoder(data))

    @classmethod
    def fail(cls, error: WalletdError | str) -> ResponseEnvelope:
        """Wrap an error message."""
        detail = error if isinstance(error, str) else error.message
        return cls(status=STATUS_FAIL, error_detail=detail)

    @property
    def ok(self) -> bool:
        return self.status == STATUS_SUCCESS

    def to_content(self) -> dict[str, Any]:
        """Wire form: ``data`` and ``error_detail`` appear only when set."""
        content: dict[str, Any] = {"status": self.status}
        if self.data is not None:
            content["data"] = self.data
        if self.error_detail is not None:
            content["error_detail"] = self.error_detail
        return content

    def to_response(self, status_code: int = 200) -> JSONResponse:
        return JSONResponse(status_code=status_code, content=self.to_content())


def fail_response(error: WalletdError) -> JSONResponse:
    """Fail envelope sent with the error's own HTTP status."""
    return ResponseEnvelope.fail(error).to_response(status_code=error.status_code)
