from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

from .errors import ApiError, AuthError

ApiCallback = Callable[[Optional[BaseException], Any, int], Any]

FAILED = "failed"
SUCCEEDED = "succeeded"
EMPTY = "empty"


@dataclass(frozen=True)
class ApiResult:
    """Outcome of one API call: ``(error, body, status_code)``.

    ``body`` may be set alongside ``error`` when the response was not valid
    JSON; it then holds the raw response text.
    """

    error: BaseException | None
    body: Any
    status_code: int

    def __iter__(self) -> Iterator[Any]:
        return iter((self.error, self.body, self.status_code))

    @property
    def state(self) -> str:
        if self.error is not None:
            return FAILED
        if self.body is None:
            return EMPTY
        return SUCCEEDED

    @property
    def ok(self) -> bool:
        return self.error is None and 200 <= self.status_code < 300

    def deliver(self, callback: ApiCallback | None) -> "ApiResult":
        if callback is not None:
            callback(self.error, self.body, self.status_code)
        return self

    def raise_for_error(self) -> Any:
        if self.error is not None:
            raise self.error
        if self.status_code >= 400:
            msg = f"request failed with {self.status_code}"
            details = None
            if isinstance(self.body, dict):
                details = json.dumps(self.body, ensure_ascii=False)
                msg = str(self.body.get("Message") or self.body.get("message") or msg)
            elif self.body:
                details = str(self.body)[:1000]
            if self.status_code in (401, 403):
                raise AuthError(self.status_code, msg, details)
            raise ApiError(self.status_code, msg, details)
        return self.body
