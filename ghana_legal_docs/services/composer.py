"""Narrative composer: records -> DocumentIR.

This is the only place where agreement wording and conditional sections are
decided. Renderers and the preview consume the returned DocumentIR as-is.
"""

import logging
from typing import List, Optional, Union

from ghana_legal_docs.models.document import (
    DocumentIR,
    NumberedListSection,
    ParagraphSection,
    SignatureBlock,
    SignatureSection,
)
from ghana_legal_docs.models.records import (
    DocumentType,
    DurationUnit,
    TenancyRecord,
    VehicleTransferRecord,
)
from ghana_legal_docs.services.calculator import (
    TenancyFigures,
    VehicleFigures,
    amount_phrase,
)
from ghana_legal_docs.utils.formatters import (
    BLANK,
    SIGNATURE_BLANK,
    blank_or_value,
    calculate_end_date,
    format_date,
    format_date_with_ordinal,
    phone_suffix,
)

logger = logging.getLogger(__name__)

Record = Union[TenancyRecord, VehicleTransferRecord]

TENANCY_GOVERNING_LAW = (
    "This Agreement shall be governed by and construed in accordance with the Rent Act, "
    "1963 (Act 220) and other applicable laws of the Republic of Ghana."
)
VEHICLE_GOVERNING_LAW = "This Agreement shall be governed by the laws of the Republic of Ghana."
VEHICLE_DEFAULT_CLAUSE = (
    "If the Buyer fails to pay the outstanding balance within the agreed period, the Seller "
    "reserves the right to withhold all vehicle documents and may take any lawful steps "
    "necessary to recover either the vehicle or the amount owed."
)


class _Numbering:
    """Hands out contiguous section numbers starting at 1"""

    def __init__(self):
        self._current = 0

    def next(self) -> int:
        self._current += 1
        return self._current


def _party(name: str, phone: str, include_phone: bool) -> str:
    shown = blank_or_value(name)
    if shown == BLANK:
        return shown
    return f"{shown}{phone_suffix(phone, include_phone)}"


def _signature(role_label: str, name: str, phone: str, include_phone: bool) -> SignatureBlock:
    shown = blank_or_value(name, SIGNATURE_BLANK)
    # placeholder name wins over phone disclosure
    contact = "" if shown == SIGNATURE_BLANK else phone_suffix(phone, include_phone)
    return SignatureBlock(role_label=role_label, display_name=shown, display_contact=contact)


def _witnesses(record: Record) -> SignatureSection:
    include = record.include_phone_numbers
    return SignatureSection(
        heading="WITNESSES",
        blocks=[
            _signature("WITNESS 1", record.witness1_name, record.witness1_phone, include),
            _signature("WITNESS 2", record.witness2_name, record.witness2_phone, include),
        ],
    )


def _primary_party(name: str) -> str:
    value = blank_or_value(name, "")
    return value.strip()


def _duration_text(record: TenancyRecord) -> str:
    unit = "year" if record.duration_unit == DurationUnit.YEARS else "month"
    plural = "" if record.duration_value == 1 else "s"
    return f"{record.duration_value} {unit}{plural}"


def compose_tenancy(record: TenancyRecord) -> DocumentIR:
    figures = TenancyFigures.from_record(record)
    numbering = _Numbering()
    title = record.landlord_title.value
    include = record.include_phone_numbers

    sections: List = [
        ParagraphSection(paragraphs=[
            f"This Tenancy Agreement is made on this {format_date_with_ordinal(record.date_of_agreement)}, "
            f"between {_party(record.landlord_name, record.landlord_phone, include)} "
            f"(hereinafter the \"{title}\") and "
            f"{_party(record.tenant_name, record.tenant_phone, include)} (hereinafter the \"Tenant\")."
        ]),
        ParagraphSection(heading="PROPERTY DESCRIPTION", number=numbering.next(), paragraphs=[
            f"The {title} agrees to let and the Tenant agrees to take the property described as: "
            f"{record.property_type.value} located at {blank_or_value(record.property_location)}."
        ]),
        ParagraphSection(heading="TERM OF TENANCY", number=numbering.next(), paragraphs=[
            f"The term of this tenancy shall be for a period of {_duration_text(record)}, "
            f"commencing from {format_date(record.start_date) or BLANK} and ending on "
            f"{calculate_end_date(record.start_date, record.duration_value, record.duration_unit) or BLANK}."
        ]),
        ParagraphSection(heading="RENT", number=numbering.next(), paragraphs=[
            f"The {figures.rent_per} rent for the property is {amount_phrase(figures.rent)}. "
            f"The total rent for the entire period is {amount_phrase(figures.total)}."
        ]),
    ]

    if figures.caution_fee > 0:
        sections.append(ParagraphSection(heading="CAUTION FEE", number=numbering.next(), paragraphs=[
            f"A refundable caution fee of {amount_phrase(figures.caution_fee)} has been paid by "
            f"the Tenant to the {title}."
        ]))

    clauses = [clause.strip() for clause in record.custom_clauses if clause and clause.strip()]
    if clauses:
        sections.append(NumberedListSection(
            heading="ADDITIONAL TERMS", number=numbering.next(), items=clauses,
        ))

    sections.extend([
        ParagraphSection(heading="GOVERNING LAW", paragraphs=[TENANCY_GOVERNING_LAW]),
        SignatureSection(heading="SIGNATURES", blocks=[
            _signature(title.upper(), record.landlord_name, record.landlord_phone, include),
            _signature("TENANT", record.tenant_name, record.tenant_phone, include),
        ]),
        _witnesses(record),
    ])

    logger.debug("Composed tenancy agreement with %d sections", len(sections))
    return DocumentIR(
        document_type=DocumentType.TENANCY,
        title="TENANCY AGREEMENT",
        label="Tenancy_Agreement",
        primary_party=_primary_party(record.tenant_name),
        sections=sections,
    )


def _deadline_text(payment_deadline: Optional[str]) -> str:
    if not payment_deadline:
        return BLANK
    return format_date_with_ordinal(payment_deadline).replace(" day of ", " ")


def compose_vehicle_transfer(record: VehicleTransferRecord) -> DocumentIR:
    figures = VehicleFigures.from_record(record)
    numbering = _Numbering()
    include = record.include_phone_numbers

    if figures.has_part_payment:
        payment_terms = (
            f"The Buyer has made a part payment of {amount_phrase(figures.amount_paid)}, leaving an "
            f"outstanding balance of {amount_phrase(figures.balance)}. The Buyer agrees to pay the "
            f"remaining amount by {_deadline_text(record.payment_deadline)}."
        )
    else:
        payment_terms = "Payment shall be made in full upon signing of this Agreement."

    if figures.has_balance:
        handover = "only after the Buyer has paid the outstanding balance in full."
        ownership = (
            "only after complete payment of the total purchase price. Until then, the Seller "
            "remains the lawful owner of the vehicle."
        )
    else:
        handover = "upon signing of this Agreement."
        ownership = "upon signing of this Agreement and receipt of full payment."

    sections: List = [
        ParagraphSection(paragraphs=[
            f"This Vehicle Transfer Agreement is made on this "
            f"{format_date_with_ordinal(record.date_of_agreement)}, between "
            f"{blank_or_value(record.seller_name)} of {blank_or_value(record.seller_location)} "
            f"(\"the Seller\") and {blank_or_value(record.buyer_name)} of "
            f"{blank_or_value(record.buyer_location)} (\"the Buyer\")."
        ]),
        ParagraphSection(heading="VEHICLE DETAILS", number=numbering.next(), paragraphs=[
            f"The Seller agrees to sell to the Buyer a {blank_or_value(record.vehicle_color)} "
            f"{blank_or_value(record.vehicle_make)} {blank_or_value(record.vehicle_model)} with "
            f"registration number {blank_or_value(record.registration_number)}. The Buyer confirms "
            f"that he/she has inspected the vehicle and accepts it in its current condition."
        ]),
        ParagraphSection(heading="PURCHASE PRICE AND PAYMENT TERMS", number=numbering.next(), paragraphs=[
            f"The total agreed purchase price of the vehicle is {amount_phrase(figures.total_price)}. "
            f"{payment_terms}"
        ]),
        ParagraphSection(heading="TRANSFER OF DOCUMENTS", number=numbering.next(), paragraphs=[
            "The Seller shall hand over all relevant documents—including the registration "
            "certificate, insurance papers, and any other ownership documents—" + handover
        ]),
        ParagraphSection(heading="OWNERSHIP AND RESPONSIBILITY", number=numbering.next(), paragraphs=[
            f"Full ownership and legal rights to the vehicle will transfer to the Buyer {ownership}"
        ]),
    ]

    if figures.has_balance:
        sections.append(ParagraphSection(
            heading="DEFAULT CLAUSE", number=numbering.next(), paragraphs=[VEHICLE_DEFAULT_CLAUSE],
        ))

    sections.extend([
        ParagraphSection(heading="GOVERNING LAW", paragraphs=[VEHICLE_GOVERNING_LAW]),
        SignatureSection(heading="SIGNATURES", blocks=[
            _signature("SELLER", record.seller_name, record.seller_phone, include),
            _signature("BUYER", record.buyer_name, record.buyer_phone, include),
        ]),
        _witnesses(record),
    ])

    logger.debug("Composed vehicle transfer agreement with %d sections", len(sections))
    return DocumentIR(
        document_type=DocumentType.VEHICLE_TRANSFER,
        title="VEHICLE TRANSFER AGREEMENT",
        label="Vehicle_Transfer_Agreement",
        primary_party=_primary_party(record.buyer_name),
        sections=sections,
    )


def compose(record: Record) -> DocumentIR:
    """Compose the agreement for either record type"""
    if isinstance(record, TenancyRecord):
        return compose_tenancy(record)
    if isinstance(record, VehicleTransferRecord):
        return compose_vehicle_transfer(record)
    raise TypeError(f"Unsupported record type: {type(record).__name__}")
