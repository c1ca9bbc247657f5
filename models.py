"""Data models for the Endorser & GDP Map"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class EndorserCategory(Enum):
    """Closed set of endorser categories, in legend order"""
    FINANCE = "Finance"
    FLEETS = "Fleets and Users"
    KNOWLEDGE = "Knowledge and Service Organ"
    MANUFACTURERS = "Manufacturers and Suppliers"
    OTHER = "Other"
    SUBNATIONAL = "Subnational Governments"
    UTILITIES = "Utilities and Infrastructure Providers"

    @classmethod
    def parse(cls, label: Optional[str]) -> Optional["EndorserCategory"]:
        """Exact, case-sensitive lookup; None for anything unrecognized"""
        if not isinstance(label, str):
            return None
        try:
            return cls(label)
        except ValueError:
            return None

    @property
    def label(self) -> str:
        return self.value


@dataclass(frozen=True)
class GdpBucket:
    lower_bound: float  # inclusive
    color: str


@dataclass(frozen=True)
class CategoryStyle:
    color: str
    css_class: str


@dataclass(frozen=True)
class ClusterIcon:
    """Render descriptor handed to the marker-cluster icon factory"""
    member_count: int
    css_class: str
    pixel_size: int
    anchor: Tuple[float, float]

    @property
    def html(self) -> str:
        return f"<div><span>{self.member_count}</span></div>"

    @property
    def class_name(self) -> str:
        return f"custom-cluster {self.css_class}"

    def to_dict(self) -> dict:
        return {
            'html': self.html,
            'className': self.class_name,
            'iconSize': [self.pixel_size, self.pixel_size],
            'iconAnchor': list(self.anchor),
        }
