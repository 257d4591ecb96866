# Copyright (c) MFNav.
# SPDX-License-Identifier: MIT
"""Fund Data Domain Exceptions.

Synopsis:
    One exception per terminal failure of the NAV history pipeline. Each
    carries a stable ``code`` and the HTTP status it maps to, so adapters can
    turn any of them into a ``{"error": message}`` response without a lookup
    table.

Design:
    * Client-input failures map to 400.
    * Upstream and serialization failures map to 500.
    * Default messages are the client-visible texts; callers only override
      them when the message must embed a cause.

Layer:
    domain/exceptions
"""

from __future__ import annotations

from typing import Any, ClassVar

from mfnav_api.domain.exceptions.base import DomainError


class FundDataError(DomainError):
    """Base class for NAV history pipeline failures.

    Attributes:
        code: Stable, machine-readable error code.
        http_status: HTTP status the failure maps to at the boundary.
        default_message: Message used when none is supplied.
    """

    code = "FUND_DATA_ERROR"
    http_status: ClassVar[int] = 500
    default_message: ClassVar[str] = "internal server error"

    def __init__(self, message: str | None = None, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message or self.default_message, details=details)


class FundDataClientError(FundDataError):
    """Failures caused by the caller's input (HTTP 400)."""

    http_status = 400


class FundDataServerError(FundDataError):
    """Failures caused by the upstream API or by this service (HTTP 500)."""

    http_status = 500


# --------------------------------------------------------------------------- #
# Client errors
# --------------------------------------------------------------------------- #


class MissingParameter(FundDataClientError):
    """The fund identifier query parameter is absent or empty."""

    code = "MISSING_PARAMETER"
    default_message = "mutualFundID query parameter is required"


class InvalidParameter(FundDataClientError):
    """The fund identifier does not parse as an integer."""

    code = "INVALID_PARAMETER"
    default_message = "mutualFundID must be an integer"


class IncompleteDateRange(FundDataClientError):
    """Only one of ``start``/``end`` was supplied."""

    code = "INCOMPLETE_DATE_RANGE"
    default_message = "both start and end dates are required in the format dd-mm-yyyy"


class InvalidDateFormat(FundDataClientError):
    """A range bound is not a valid ``dd-mm-yyyy`` date."""

    code = "INVALID_DATE_FORMAT"
    default_message = "invalid date format. use dd-mm-yyyy"

    @classmethod
    def for_side(cls, side: str) -> InvalidDateFormat:
        """Build the error naming which bound (``start`` or ``end``) failed."""
        return cls(f"invalid {side} date format. use dd-mm-yyyy", details={"side": side})


class FutureEndDate(FundDataClientError):
    """The end bound is after the current date."""

    code = "FUTURE_END_DATE"
    default_message = "end date cannot be in the future"


class InvertedRange(FundDataClientError):
    """The start bound is after the end bound."""

    code = "INVERTED_RANGE"
    default_message = "start date cannot be after end date"


class InvalidFundId(FundDataClientError):
    """Upstream answered with empty metadata for the requested fund."""

    code = "INVALID_FUND_ID"
    default_message = "Invalid mutualFundID"


# --------------------------------------------------------------------------- #
# Server errors
# --------------------------------------------------------------------------- #


class UpstreamUnavailable(FundDataServerError):
    """The upstream call failed at the transport level (DNS, connect, timeout)."""

    code = "UPSTREAM_UNAVAILABLE"
    default_message = "error fetching data from API"

    @classmethod
    def from_cause(cls, exc: BaseException) -> UpstreamUnavailable:
        """Build the error embedding the underlying transport error text."""
        return cls(f"{cls.default_message}: {_describe(exc)}")


class UpstreamDecodeError(FundDataServerError):
    """The upstream body is not JSON or does not match the fund schema."""

    code = "UPSTREAM_DECODE_ERROR"
    default_message = "error decoding API response"

    @classmethod
    def from_cause(cls, exc: BaseException | str) -> UpstreamDecodeError:
        """Build the error embedding the decoder's complaint."""
        reason = exc if isinstance(exc, str) else _describe(exc)
        return cls(f"{cls.default_message}: {reason}")


class ResponseSerializationError(FundDataServerError):
    """The success body could not be rendered as JSON."""

    code = "RESPONSE_SERIALIZATION_ERROR"
    default_message = "error creating JSON response"


def _describe(exc: BaseException) -> str:
    # httpx timeouts often stringify to "", fall back to the class name.
    text = str(exc).strip()
    return text or type(exc).__name__
