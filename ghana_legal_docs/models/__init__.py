"""Data models"""

from ghana_legal_docs.models.records import (
    DocumentType,
    PropertyType,
    PaymentStatus,
    LandlordTitle,
    DurationUnit,
    RentFrequency,
    TenancyRecord,
    VehicleTransferRecord,
    record_from_snapshot,
)
from ghana_legal_docs.models.document import (
    SIGNATURE_LINE,
    SignatureBlock,
    ParagraphSection,
    NumberedListSection,
    SignatureSection,
    DocumentIR,
    heading_text,
)

__all__ = [
    "DocumentType",
    "PropertyType",
    "PaymentStatus",
    "LandlordTitle",
    "DurationUnit",
    "RentFrequency",
    "TenancyRecord",
    "VehicleTransferRecord",
    "record_from_snapshot",
    "SIGNATURE_LINE",
    "SignatureBlock",
    "ParagraphSection",
    "NumberedListSection",
    "SignatureSection",
    "DocumentIR",
    "heading_text",
]
