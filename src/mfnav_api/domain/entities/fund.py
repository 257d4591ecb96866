# Copyright (c) MFNav.
# SPDX-License-Identifier: MIT
"""Fund Entities (Domain Layer).

Synopsis:
    Immutable primitives for a mutual fund's metadata and its historical NAV
    series, plus the optional inclusive date window used to filter it.

Design:
    * ``NavPoint`` keeps the upstream ``date``/``nav`` strings verbatim; the
      domain never reformats provider values.
    * ``FundMetadata.is_empty`` is an explicit all-fields-default predicate.
      Upstream answers an unknown scheme code with an empty ``meta`` object
      rather than an HTTP error, so this is how unknown funds are detected.

Layer:
    domain/entities
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from mfnav_api.domain.entities.base import BaseEntity

# Day-month-year with zero padding and a four-digit year (e.g. "02-01-2023").
NAV_DATE_FORMAT = "%d-%m-%Y"


@dataclass(frozen=True)
class FundMetadata(BaseEntity):
    """Descriptive metadata for a mutual fund scheme.

    Attributes:
        fund_house: Asset management company name.
        scheme_type: Scheme type label (e.g. "Open Ended Schemes").
        scheme_category: Scheme category label.
        scheme_code: Numeric scheme code.
        scheme_name: Human-readable scheme name.
    """

    fund_house: str = ""
    scheme_type: str = ""
    scheme_category: str = ""
    scheme_code: int = 0
    scheme_name: str = ""

    @classmethod
    def empty(cls) -> FundMetadata:
        """Return the all-defaults sentinel."""
        return cls()

    def is_empty(self) -> bool:
        """Return True when every field still holds its default value."""
        return (
            self.fund_house == ""
            and self.scheme_type == ""
            and self.scheme_category == ""
            and self.scheme_code == 0
            and self.scheme_name == ""
        )


@dataclass(frozen=True)
class NavPoint(BaseEntity):
    """A single NAV observation as published upstream.

    Attributes:
        date: Observation date in ``dd-mm-yyyy`` form (not validated here).
        nav: Decimal NAV value as a string.
    """

    date: str
    nav: str


@dataclass(frozen=True)
class FundSeries(BaseEntity):
    """Decoded upstream document: metadata plus the NAV sequence in upstream order."""

    metadata: FundMetadata
    points: tuple[NavPoint, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class DateRange(BaseEntity):
    """Inclusive calendar-date window.

    Attributes:
        start: First day included.
        end: Last day included.
    """

    start: date
    end: date

    def __post_init__(self) -> None:
        """Enforce ``start <= end``."""
        super().__post_init__()
        if self.start > self.end:
            raise ValueError("DateRange.start must be <= DateRange.end.")

    def contains(self, day: date) -> bool:
        """Return True if ``day`` falls inside the window (both ends inclusive)."""
        return self.start <= day <= self.end

    def label(self) -> str:
        """Return the ``"<start> to <end>"`` period label in ``dd-mm-yyyy`` form."""
        return f"{self.start.strftime(NAV_DATE_FORMAT)} to {self.end.strftime(NAV_DATE_FORMAT)}"
