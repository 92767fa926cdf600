from __future__ import annotations

from typing import Any, Dict, Mapping, Optional


class NowClientError(Exception):
    """Base error for client failures. ``error`` holds the normalized value."""

    def __init__(self, message: str, *, error: Any = None):
        super().__init__(message)
        self.error = error if error is not None else message


class MissingParameterError(NowClientError):
    """A required parameter was absent; raised before any request is sent."""

    def __init__(self, code: str, message: str):
        super().__init__(message, error={"code": code, "message": message})
        self.code = code
        self.message = message


class InvalidBodyError(NowClientError):
    """A request body failed validation; raised before any request is sent."""

    def __init__(self, message: str):
        super().__init__(message, error={"code": "invalid_body", "message": message})
        self.code = "invalid_body"
        self.message = message


class MissingTokenError(ValueError):
    """Raised when no API token could be resolved."""


class NowHTTPError(NowClientError):
    def __init__(
        self,
        *,
        status_code: int,
        method: str,
        url: str,
        data: Any = None,
    ):
        super().__init__(f"{status_code} {method} {url}", error=data)
        self.status_code = status_code
        self.method = method
        self.url = url
        self.data = data


class NowParseError(NowClientError):
    pass


class NowAPIError(NowClientError):
    """Transport or remote failure; ``error`` is the normalized error shape."""

    def __init__(self, error: Any, *, cause: Optional[BaseException] = None):
        super().__init__(str(error), error=error)
        self.cause = cause


def normalize_error(failure: BaseException) -> Any:
    """
    Reduce a failure to the most specific error shape available:
    the nested ``data.err`` structure, then the ``data`` payload,
    then the failure's string form.
    """
    data = getattr(failure, "data", None)
    if isinstance(data, Mapping) and data.get("err"):
        return data["err"]
    if data:
        return data
    return str(failure)


def _pair(code: str, param: str) -> Dict[str, str]:
    return {"code": code, "message": f"Missing `{param}` parameter"}


MISSING_ID = _pair("missing_id", "id")
MISSING_FILE_ID = _pair("missing_file_id", "fileId")
MISSING_BODY = _pair("missing_body", "body")
MISSING_CN = _pair("missing_cn", "cn")
MISSING_ALIAS = _pair("missing_alias", "alias")
MISSING_NAME = _pair("missing_name", "name")
MISSING_VALUE = _pair("missing_value", "value")
MISSING_CERT = _pair("missing_cert", "cert")
MISSING_KEY = _pair("missing_key", "key")
MISSING_RECORD_ID = _pair("missing_record_id", "recordId")


def missing(pair: Mapping[str, str]) -> MissingParameterError:
    return MissingParameterError(pair["code"], pair["message"])


__all__ = [
    "NowClientError",
    "NowAPIError",
    "NowHTTPError",
    "NowParseError",
    "MissingParameterError",
    "MissingTokenError",
    "InvalidBodyError",
    "normalize_error",
    "missing",
    "MISSING_ID",
    "MISSING_FILE_ID",
    "MISSING_BODY",
    "MISSING_CN",
    "MISSING_ALIAS",
    "MISSING_NAME",
    "MISSING_VALUE",
    "MISSING_CERT",
    "MISSING_KEY",
    "MISSING_RECORD_ID",
]
