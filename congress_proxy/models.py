"""Typed records for the ProPublica payloads served by the proxy."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Mapping


def _text(payload: Mapping[str, Any], key: str) -> str:
    value = payload.get(key)
    if value is None:
        return ""
    return str(value)


@dataclass(frozen=True)
class UpcomingBill:
    """A bill scheduled for floor consideration in one chamber."""

    resource_type: ClassVar[str] = "legislation"

    bill_id: str
    description: str
    bill_number: str
    bill_slug: str
    chamber: str
    congress: str
    bill_url: str

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "UpcomingBill":
        return cls(
            bill_id=_text(payload, "bill_id"),
            description=_text(payload, "description"),
            bill_number=_text(payload, "bill_number"),
            bill_slug=_text(payload, "bill_slug"),
            chamber=_text(payload, "chamber"),
            congress=_text(payload, "congress"),
            bill_url=_text(payload, "bill_url"),
        )

    @property
    def resource_id(self) -> str:
        return self.bill_id

    def attributes(self) -> Dict[str, str]:
        return {
            "name": self.description,
            "number": self.bill_number,
            "slug": self.bill_slug,
            "chamber": self.chamber,
            "congress": self.congress,
            "url": self.bill_url,
        }


@dataclass(frozen=True)
class Representative:
    """Sparse member record for a bill cosponsor."""

    resource_type: ClassVar[str] = "representative"

    cosponsor_id: str
    name: str
    cosponsor_party: str
    cosponsor_state: str

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Representative":
        return cls(
            cosponsor_id=_text(payload, "cosponsor_id"),
            name=_text(payload, "name"),
            cosponsor_party=_text(payload, "cosponsor_party"),
            cosponsor_state=_text(payload, "cosponsor_state"),
        )

    @property
    def resource_id(self) -> str:
        return self.cosponsor_id

    def attributes(self) -> Dict[str, str]:
        return {
            "name": self.name,
            "party-id": self.cosponsor_party,
            "state": self.cosponsor_state,
        }


@dataclass(frozen=True)
class Statement:
    """Congressional statement referencing a bill; identified by its URL."""

    resource_type: ClassVar[str] = "statement"

    url: str
    title: str
    type: str
    name: str

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Statement":
        return cls(
            url=_text(payload, "url"),
            title=_text(payload, "title"),
            type=_text(payload, "type"),
            name=_text(payload, "name"),
        )

    @property
    def resource_id(self) -> str:
        return self.url

    def attributes(self) -> Dict[str, str]:
        return {"title": self.title, "type": self.type, "speaker": self.name}


@dataclass(frozen=True)
class Bill:
    resource_type: ClassVar[str] = "legislation"

    bill_id: str
    short_title: str
    number: str
    bill_slug: str
    congress: str
    gpo_pdf_uri: str

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Bill":
        return cls(
            bill_id=_text(payload, "bill_id"),
            short_title=_text(payload, "short_title"),
            number=_text(payload, "number"),
            bill_slug=_text(payload, "bill_slug"),
            congress=_text(payload, "congress"),
            gpo_pdf_uri=_text(payload, "gpo_pdf_uri"),
        )

    @property
    def resource_id(self) -> str:
        return self.bill_id

    def attributes(self) -> Dict[str, str]:
        return {
            "name": self.short_title,
            "number": self.number,
            "slug": self.bill_slug,
            "congress": self.congress,
            "url": self.gpo_pdf_uri,
        }
