"""Canned tenancy clauses, grouped by category.

The composer never sees categories: selections are resolved to plain clause
strings before they are added to a record's ``custom_clauses``.
"""

from typing import Dict, Iterable, List

CLAUSE_LIBRARY: Dict[str, List[str]] = {
    "Restrictions & Rules": [
        "The Tenant shall not keep any pets (dogs, cats, or other animals) on the premises.",
        "No loud music or noise that disturbs other neighbors is permitted after 10 PM.",
        "Smoking is strictly prohibited inside the rooms or indoor common areas.",
        "The Tenant shall not conduct any religious services or commercial business on the premises.",
    ],
    "Maintenance & Repairs": [
        "The Tenant is responsible for the repair/replacement of all electrical bulbs, switches, "
        "and sockets damaged during the tenancy.",
        "The Tenant shall maintain the garden/compound and keep it tidy at all times.",
        "Any blockage of drains or sewage caused by the Tenant's negligence shall be cleared at "
        "the Tenant's cost.",
        "The Tenant shall replace any broken window panes or glass caused by their actions.",
    ],
    "Utilities & Bills": [
        "The Tenant agrees to pay a fixed monthly service fee of GH₵ 100 for water and sanitation.",
        "Electricity is shared; the Tenant shall pay 50% of the total monthly bill presented by "
        "the Landlord.",
        "The Tenant is responsible for purchasing their own prepaid electricity credits for their "
        "separate meter.",
        "The Tenant shall pay for waste collection services directly to the service provider.",
    ],
    "Termination & Security": [
        "The Landlord reserves the right to inspect the premises with 24 hours prior notice to "
        "the Tenant.",
        "The Tenant must return all keys to the Landlord immediately upon vacating the premises.",
        "The Tenant is responsible for the security of their own personal belongings; the "
        "Landlord is not liable for theft.",
    ],
}


def list_categories() -> List[str]:
    return list(CLAUSE_LIBRARY)


def get_clauses(category: str) -> List[str]:
    """Clauses of one category; KeyError for an unknown category"""
    return list(CLAUSE_LIBRARY[category])


def resolve_clauses(selections: Iterable[str]) -> List[str]:
    """Turn ``"Category:N"`` selections (N is 1-based) into clause text.

    Order of the selections is kept, and a clause selected twice is only
    added once.

    >>> resolve_clauses(["Restrictions & Rules:3"])
    ['Smoking is strictly prohibited inside the rooms or indoor common areas.']
    """
    resolved: List[str] = []
    for selection in selections:
        category, _, index = selection.rpartition(":")
        if not category or not index.strip().isdigit():
            raise ValueError(f"Invalid clause selection '{selection}', expected 'Category:N'")
        clauses = CLAUSE_LIBRARY.get(category.strip())
        if clauses is None:
            raise ValueError(f"Unknown clause category '{category.strip()}'")
        position = int(index.strip())
        if not 1 <= position <= len(clauses):
            raise ValueError(f"Category '{category.strip()}' has no clause {position}")
        clause = clauses[position - 1]
        if clause not in resolved:
            resolved.append(clause)
    return resolved
