from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Optional

from .localization import is_german

USD = ("USD", "$")
EUR = ("EUR", "€")

CHILD_RATE = Decimal("0.5")
INFANT_RATE = Decimal("0.25")

WHOLE = Decimal("1")
CENTS = Decimal("0.01")


def to_decimal(value: Any) -> Decimal:
    if value is None or value == "":
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_half_up(value: Decimal, exponent: Decimal = WHOLE) -> Decimal:
    return value.quantize(exponent, rounding=ROUND_HALF_UP)


def as_number(value: Decimal):
    """JSON friendly form of a money amount: ``150`` rather than ``150.00``."""
    if value == value.to_integral_value():
        return int(value)
    return float(value)


@dataclass(frozen=True)
class PriceQuote:
    amount: Decimal
    base_amount: Decimal
    currency: str
    symbol: str
    discount: int
    is_on_sale: bool

    @property
    def formatted(self) -> str:
        amount = self.amount
        if amount == amount.to_integral_value():
            return f"{self.symbol}{int(amount)}"
        return f"{self.symbol}{amount:.2f}"

    def as_dict(self) -> Dict[str, Any]:
        return {
            "amount": as_number(self.amount),
            "base_amount": as_number(self.base_amount),
            "currency": self.currency,
            "symbol": self.symbol,
            "discount": self.discount,
            "is_on_sale": self.is_on_sale,
            "formatted": self.formatted,
        }


@dataclass(frozen=True)
class BookingQuote:
    unit: PriceQuote
    adults: int
    children: int
    infants: int
    total: Decimal

    def as_dict(self) -> Dict[str, Any]:
        return {
            "unit_price": as_number(self.unit.amount),
            "adults": self.adults,
            "children": self.children,
            "infants": self.infants,
            "total_price": as_number(self.total),
            "currency": self.unit.currency,
            "currency_symbol": self.unit.symbol,
        }


def resolve_price(tour, locale: Optional[str] = None) -> PriceQuote:
    """
    Price a single adult seat on ``tour`` for a visitor using ``locale``.

    German visitors see the EUR price when one is set; everybody else, and German
    visitors of tours without a EUR price, see USD. A discount only applies while
    the tour is on sale, and a discounted amount is rounded half up to a whole unit.
    """
    price_eur = to_decimal(getattr(tour, "price_eur", None))
    if is_german(locale) and price_eur > 0:
        base, (currency, symbol) = price_eur, EUR
    else:
        base, (currency, symbol) = to_decimal(getattr(tour, "price", None)), USD

    discount = int(getattr(tour, "discount", 0) or 0)
    on_sale = bool(getattr(tour, "on_sale", False)) and discount > 0
    if on_sale:
        amount = round_half_up(base - base * Decimal(discount) / Decimal(100))
    else:
        amount = base
    return PriceQuote(
        amount=amount,
        base_amount=base,
        currency=currency,
        symbol=symbol,
        discount=discount if on_sale else 0,
        is_on_sale=on_sale,
    )


def compute_booking_total(unit_price, adults: int, children: int = 0, infants: int = 0) -> Decimal:
    """Children pay half and infants a quarter of the adult price."""
    price = to_decimal(unit_price)
    total = price * adults + price * children * CHILD_RATE + price * infants * INFANT_RATE
    return round_half_up(total, CENTS)


def quote_booking(tour, locale: Optional[str], adults: int, children: int = 0, infants: int = 0) -> BookingQuote:
    unit = resolve_price(tour, locale)
    return BookingQuote(
        unit=unit,
        adults=adults,
        children=children,
        infants=infants,
        total=compute_booking_total(unit.amount, adults, children, infants),
    )
