"""Input records for the two agreement types.

Field names are snake_case in Python; JSON snapshots (drafts, API payloads)
use the camelCase names produced by the form layer, e.g. ``landlordName``.
"""

from datetime import date
from enum import Enum
from typing import ClassVar, List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel


def _today() -> str:
    return date.today().isoformat()


class DocumentType(str, Enum):
    """Supported agreement types (also the draft keys)"""
    TENANCY = "tenancy"
    VEHICLE_TRANSFER = "vehicle-transfer"


class PropertyType(str, Enum):
    SINGLE_ROOM = "Single Room Self-Contained"
    CHAMBER_AND_HALL = "Chamber and Hall Self-Contained"
    TWO_BEDROOM = "Two Bedroom Apartment"
    THREE_BEDROOM = "Three Bedroom House"
    STORE = "Commercial Store"
    OTHER = "Other"


class PaymentStatus(str, Enum):
    PAID_FULL = "Paid in Full"
    PART_PAYMENT = "Part Payment"
    NOT_PAID = "Not Yet Paid"


class LandlordTitle(str, Enum):
    LANDLORD = "Landlord"
    LANDLADY = "Landlady"


class DurationUnit(str, Enum):
    MONTHS = "Months"
    YEARS = "Years"


class RentFrequency(str, Enum):
    MONTH = "Month"
    YEAR = "Year"


class _Record(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_snapshot(self) -> dict:
        """JSON-ready dict using the form layer's camelCase keys"""
        return self.model_dump(mode="json", by_alias=True)


class TenancyRecord(_Record):
    """A tenancy agreement as entered in the form"""
    document_type: ClassVar[DocumentType] = DocumentType.TENANCY

    date_of_agreement: str = Field(default_factory=_today)
    landlord_title: LandlordTitle = LandlordTitle.LANDLORD
    landlord_name: str = ""
    landlord_phone: str = ""
    tenant_name: str = ""
    tenant_phone: str = ""

    property_location: str = ""
    property_type: PropertyType = PropertyType.SINGLE_ROOM
    property_details: str = "A residential dwelling comprising of..."

    start_date: str = Field(default_factory=_today)
    duration_value: int = Field(default=1, ge=1)
    duration_unit: DurationUnit = DurationUnit.YEARS
    rent_amount: float = Field(default=0, ge=0, allow_inf_nan=False)
    rent_frequency: RentFrequency = RentFrequency.YEAR
    caution_fee: float = Field(default=0, ge=0, allow_inf_nan=False)
    payment_status: PaymentStatus = PaymentStatus.PAID_FULL
    payment_note: Optional[str] = ""

    witness1_name: str = Field(default="", alias="witness1Name")
    witness1_phone: str = Field(default="", alias="witness1Phone")
    witness2_name: str = Field(default="", alias="witness2Name")
    witness2_phone: str = Field(default="", alias="witness2Phone")
    include_phone_numbers: bool = True
    custom_clauses: List[str] = Field(default_factory=list)


class VehicleTransferRecord(_Record):
    """A vehicle sale between a seller and a buyer"""
    document_type: ClassVar[DocumentType] = DocumentType.VEHICLE_TRANSFER

    date_of_agreement: str = Field(default_factory=_today)
    seller_name: str = ""
    seller_location: str = ""
    seller_phone: str = ""
    buyer_name: str = ""
    buyer_location: str = ""
    buyer_phone: str = ""

    vehicle_color: str = ""
    vehicle_make: str = ""
    vehicle_model: str = ""
    registration_number: str = ""

    total_price: float = Field(default=0, ge=0, allow_inf_nan=False)
    amount_paid: float = Field(default=0, ge=0, allow_inf_nan=False)
    payment_deadline: str = ""

    include_phone_numbers: bool = True
    witness1_name: str = Field(default="", alias="witness1Name")
    witness1_phone: str = Field(default="", alias="witness1Phone")
    witness2_name: str = Field(default="", alias="witness2Name")
    witness2_phone: str = Field(default="", alias="witness2Phone")

    @computed_field(alias="outstandingBalance")
    @property
    def outstanding_balance(self) -> float:
        """Always derived from price and amount paid; a stored value is ignored"""
        return max(0.0, self.total_price - self.amount_paid)


RECORD_TYPES = {
    DocumentType.TENANCY: TenancyRecord,
    DocumentType.VEHICLE_TRANSFER: VehicleTransferRecord,
}


def record_from_snapshot(document_type: DocumentType | str, snapshot: dict):
    """Build the record for ``document_type`` from a camelCase JSON snapshot"""
    record_cls = RECORD_TYPES[DocumentType(document_type)]
    return record_cls.model_validate(snapshot)
