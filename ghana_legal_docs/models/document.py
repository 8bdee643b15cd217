"""Format-agnostic document representation shared by every renderer"""

import re
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from ghana_legal_docs.models.records import DocumentType

SIGNATURE_LINE = "Signature: ........................................"


class SignatureBlock(BaseModel):
    """One signing party: role label, displayed name, displayed contact"""
    role_label: str
    display_name: str
    display_contact: str = ""

    def lines(self) -> List[str]:
        return [self.role_label, f"{self.display_name}{self.display_contact}", SIGNATURE_LINE]


class ParagraphSection(BaseModel):
    """A heading (numbered or not) followed by paragraphs"""
    kind: Literal["paragraphs"] = "paragraphs"
    heading: Optional[str] = None
    number: Optional[int] = None
    paragraphs: List[str] = Field(min_length=1)


class NumberedListSection(BaseModel):
    """A numbered heading followed by an itemised list (1., 2., ...)"""
    kind: Literal["numbered_list"] = "numbered_list"
    heading: str
    number: Optional[int] = None
    items: List[str] = Field(min_length=1)

    @property
    def paragraphs(self) -> List[str]:
        return [f"{index}. {item}" for index, item in enumerate(self.items, start=1)]


class SignatureSection(BaseModel):
    """Signing parties or witnesses"""
    kind: Literal["signatures"] = "signatures"
    heading: str
    number: Optional[int] = None
    blocks: List[SignatureBlock]

    @property
    def paragraphs(self) -> List[str]:
        return [line for block in self.blocks for line in block.lines()]


Section = Annotated[
    Union[ParagraphSection, NumberedListSection, SignatureSection],
    Field(discriminator="kind"),
]


def heading_text(section) -> Optional[str]:
    """Display heading, e.g. ``4. CAUTION FEE`` or ``GOVERNING LAW``"""
    if not section.heading:
        return None
    if section.number is None:
        return section.heading
    return f"{section.number}. {section.heading}"


class DocumentIR(BaseModel):
    """Composed agreement, produced once and consumed by all renderers"""
    document_type: DocumentType
    title: str
    label: str                  # file name label, e.g. 'Tenancy_Agreement'
    primary_party: str = ""     # used in the download file name
    sections: List[Section]

    @property
    def signature_blocks(self) -> List[SignatureBlock]:
        return [
            block
            for section in self.sections
            if isinstance(section, SignatureSection)
            for block in section.blocks
        ]

    @property
    def filename_stem(self) -> str:
        """``Tenancy_Agreement_Kofi Mensah`` or ``..._Draft`` when unnamed"""
        party = re.sub(r'[\\/:*?"<>|]+', "_", self.primary_party).strip() or "Draft"
        return f"{self.label}_{party}"

    def text_lines(self) -> List[str]:
        """Plain text of the document in reading order.

        Every renderer must reproduce exactly this sequence of lines.
        """
        lines = [self.title]
        for section in self.sections:
            heading = heading_text(section)
            if heading:
                lines.append(heading)
            lines.extend(section.paragraphs)
        return lines
