"""Derived values computed from raw record fields.

Amounts are kept exact here; rounding only happens when an amount is spelled
out in words.
"""

from dataclasses import dataclass

from ghana_legal_docs.models.records import (
    DurationUnit,
    RentFrequency,
    TenancyRecord,
    VehicleTransferRecord,
)
from ghana_legal_docs.utils.formatters import format_currency, number_to_words


def periods_in_term(record: TenancyRecord) -> float:
    """Number of rent periods covered by the lease term.

    Monthly rent over a term in years is 12 periods a year; yearly rent over a
    term in months is a fraction of a year (e.g. 6 months -> 0.5).
    """
    duration = record.duration_value
    if record.rent_frequency == RentFrequency.MONTH:
        return duration * 12 if record.duration_unit == DurationUnit.YEARS else duration
    return duration if record.duration_unit == DurationUnit.YEARS else duration / 12


def total_rent(record: TenancyRecord) -> float:
    return record.rent_amount * periods_in_term(record)


def additional_terms_number(record: TenancyRecord) -> int:
    """Number of the ADDITIONAL TERMS section: right after CAUTION FEE if present"""
    return 5 if record.caution_fee > 0 else 4


def outstanding_balance(total_price: float, amount_paid: float) -> float:
    return max(0.0, total_price - amount_paid)


def amount_phrase(amount: float) -> str:
    """``GH₵1,500.00 (One Thousand Five Hundred Ghana Cedis)``"""
    return f"{format_currency(amount)} ({number_to_words(amount)} Ghana Cedis)"


@dataclass(frozen=True)
class TenancyFigures:
    rent: float
    total: float
    caution_fee: float
    rent_per: str                  # 'monthly' | 'yearly'
    terms_number: int

    @classmethod
    def from_record(cls, record: TenancyRecord) -> "TenancyFigures":
        return cls(
            rent=record.rent_amount,
            total=total_rent(record),
            caution_fee=record.caution_fee,
            rent_per="monthly" if record.rent_frequency == RentFrequency.MONTH else "yearly",
            terms_number=additional_terms_number(record),
        )


@dataclass(frozen=True)
class VehicleFigures:
    total_price: float
    amount_paid: float
    balance: float

    @property
    def has_part_payment(self) -> bool:
        return self.amount_paid > 0

    @property
    def has_balance(self) -> bool:
        return self.balance > 0

    @classmethod
    def from_record(cls, record: VehicleTransferRecord) -> "VehicleFigures":
        # Recomputed from the inputs; never read from a stored balance
        return cls(
            total_price=record.total_price,
            amount_paid=record.amount_paid,
            balance=outstanding_balance(record.total_price, record.amount_paid),
        )
