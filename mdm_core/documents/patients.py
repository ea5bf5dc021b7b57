# mdm_core/documents/patients.py
"""
Patient identity helpers.

There is no Patient entity: a patient is whatever set of documents shares a
name and date of birth (or, for grouping, a claim number). These helpers
normalise the free-text values ingestion writes into those columns and
decide when two documents describe the same person.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from django.utils.dateparse import parse_date, parse_datetime

PLACEHOLDER_VALUES = frozenset({"", "not specified", "undefined", "n/a", "na"})
CLAIM_PLACEHOLDER_VALUES = PLACEHOLDER_VALUES | {"notspecified", "unspecified", "none", "unknown"}

# US-style dates ingestion sometimes writes verbatim
_EXTRA_DATE_FORMATS = ("%m/%d/%Y",)

DOB_TOLERANCE_DAYS = 2
MAX_NAME_EDITS = 2
MAX_NAME_EDIT_RATIO = 0.15

_NON_ALNUM = re.compile(r"[^A-Za-z0-9]")
_NAME_SPLIT = re.compile(r"[\s,]+")


def is_placeholder(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in PLACEHOLDER_VALUES


def normalize_claim_number(value: Optional[str]) -> str:
    """Alphanumerics only, upper-cased; placeholders become ""."""
    if (value or "").strip().lower() in CLAIM_PLACEHOLDER_VALUES:
        return ""
    return _NON_ALNUM.sub("", value).upper()


def _name_parts(value: Optional[str]) -> list[str]:
    return [p for p in _NAME_SPLIT.split((value or "").strip().lower()) if p]


def normalize_patient_name(value: Optional[str]) -> str:
    """
    Order-insensitive name key built from the first and last name:
    "Doe, Jane A" and "jane doe" both map to "doe jane".
    Single-letter parts (initials) are dropped.
    """
    if is_placeholder(value):
        return ""
    parts = [p for p in _name_parts(value) if len(p) > 1]
    if len(parts) >= 2:
        parts = sorted([parts[0], parts[-1]])
    return " ".join(parts)


def last_name(value: Optional[str]) -> str:
    """Last whitespace/comma separated part, lower-cased; "" for single names."""
    parts = _name_parts(value)
    return parts[-1] if len(parts) > 1 else ""


def parse_loose_date(value: Optional[str]) -> Optional[date]:
    """
    Date from YYYY-MM-DD, an ISO 8601 datetime or MM/DD/YYYY; None when empty.
    Raises ValueError for anything else.
    """
    raw = (value or "").strip()
    if not raw:
        return None

    parsed_date = parse_date(raw)
    if parsed_date is not None:
        return parsed_date

    parsed_dt = parse_datetime(raw.replace("Z", "+00:00"))
    if parsed_dt is not None:
        return parsed_dt.date()

    for fmt in _EXTRA_DATE_FORMATS:
        try:
            return datetime.strptime(raw, fmt).date()
        except ValueError:
            continue

    raise ValueError(f"Invalid date: {raw!r}")


def normalize_date_string(value: Optional[str]) -> str:
    """YYYY-MM-DD for any date parse_loose_date accepts; "" for empty input."""
    parsed = parse_loose_date(value)
    return parsed.isoformat() if parsed else ""


def date_key(value: Optional[str]) -> str:
    """Best-effort YYYY-MM-DD for lookups; unparseable values are kept as-is."""
    try:
        return normalize_date_string(value)
    except ValueError:
        return (value or "").strip()


def date_lookup_values(value: str) -> set[str]:
    """Stored forms a caller-supplied date may match: the raw text and its normalised key."""
    raw = (value or "").strip()
    return {raw, date_key(raw)}


def levenshtein(a: str, b: str) -> int:
    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i]
        for j, cb in enumerate(b, start=1):
            current.append(min(
                previous[j] + 1,
                current[j - 1] + 1,
                previous[j - 1] + (ca != cb),
            ))
        previous = current
    return previous[-1]


def names_match(a: str, b: str) -> bool:
    """Normalised names equal, or within two edits / 15% of the longer name."""
    if a == b:
        return True
    if not a or not b:
        return False
    distance = levenshtein(a, b)
    return distance <= MAX_NAME_EDITS or distance / max(len(a), len(b)) <= MAX_NAME_EDIT_RATIO


@dataclass(frozen=True)
class PatientKey:
    name: str
    last: str
    dob: Optional[date]
    claim: str

    @classmethod
    def for_values(cls, patient_name: str, dob: str, claim_number: str) -> "PatientKey":
        try:
            parsed_dob = parse_loose_date(dob)
        except ValueError:
            parsed_dob = None
        return cls(
            name=normalize_patient_name(patient_name),
            last=last_name(patient_name),
            dob=parsed_dob,
            claim=normalize_claim_number(claim_number),
        )


def _dobs_close(a: Optional[date], b: Optional[date]) -> bool:
    return a is not None and b is not None and abs((a - b).days) <= DOB_TOLERANCE_DAYS


def is_same_patient(a: PatientKey, b: PatientKey) -> bool:
    """
    Two claims decide on their own. Otherwise: same last name with close
    DOBs, or matching names whose DOBs agree (a missing DOB never disagrees).
    """
    if a.claim and b.claim:
        return a.claim == b.claim

    if a.last and a.last == b.last and _dobs_close(a.dob, b.dob):
        return True

    if not names_match(a.name, b.name):
        return False
    if a.dob and b.dob:
        return _dobs_close(a.dob, b.dob)
    return True
