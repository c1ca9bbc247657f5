"""Color lookup tables for GDP buckets and endorser categories"""

import logging
import math
from typing import Dict, List, Optional

from models import CategoryStyle, EndorserCategory, GdpBucket

logger = logging.getLogger(__name__)

# Descending by lower bound; the last bucket is the catch-all
GDP_BUCKETS: List[GdpBucket] = [
    GdpBucket(27_360_000_000_000.0, '#081D58'),
    GdpBucket(1_025_602_500_000.0, '#17347B'),
    GdpBucket(511_432_500_000.0, '#225EA8'),
    GdpBucket(331_112_500_000.0, '#1D91C0'),
    GdpBucket(245_838_000_000.0, '#41B6C4'),
    GdpBucket(90_867_500_000.0, '#7FCDBB'),
    GdpBucket(77_022_500_000.0, '#C7E9B4'),
    GdpBucket(12_332_500_000.0, '#EDF8B1'),
    GdpBucket(520_000_000.0, '#FFFFD9'),
    GdpBucket(0.0, '#f7fbff'),
]

DEFAULT_GDP_COLOR = GDP_BUCKETS[-1].color

# Ascending cutoffs, catch-all excluded
GDP_THRESHOLDS: List[float] = [b.lower_bound for b in reversed(GDP_BUCKETS[:-1])]

CATEGORY_COLORS: Dict[EndorserCategory, str] = {
    EndorserCategory.FINANCE: '#0095D3',
    EndorserCategory.FLEETS: '#5CC4BD',
    EndorserCategory.KNOWLEDGE: '#9C6EB0',
    EndorserCategory.MANUFACTURERS: '#D1D439',
    EndorserCategory.OTHER: '#FF9E18',
    EndorserCategory.SUBNATIONAL: '#EF4E00',
    EndorserCategory.UTILITIES: '#76BC21',
}

CATEGORY_CLASSES: Dict[EndorserCategory, str] = {
    EndorserCategory.FINANCE: 'cluster-finance',
    EndorserCategory.FLEETS: 'cluster-fleets',
    EndorserCategory.KNOWLEDGE: 'cluster-knowledge',
    EndorserCategory.MANUFACTURERS: 'cluster-manufacturers',
    EndorserCategory.OTHER: 'cluster-other',
    EndorserCategory.SUBNATIONAL: 'cluster-subnational',
    EndorserCategory.UTILITIES: 'cluster-utilities',
}

DEFAULT_ENDORSER_COLOR = '#ffffff'
DEFAULT_CATEGORY_CLASS = 'cluster-default'


def _as_number(value) -> Optional[float]:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    except OverflowError:
        # Ints beyond float range still order correctly
        return math.inf if value > 0 else -math.inf
    if math.isnan(number):
        return None
    return number


def get_gdp_bucket_index(gdp) -> int:
    """Bucket index for a GDP value: 0 is the catch-all, 9 the top bucket."""
    value = _as_number(gdp)
    top = len(GDP_BUCKETS) - 1
    if value is None:
        return 0
    for i, bucket in enumerate(GDP_BUCKETS[:-1]):
        if value >= bucket.lower_bound:
            return top - i
    return 0


def get_gdp_color(gdp) -> str:
    """Fill color for a GDP value; anything below the lowest cutoff gets the catch-all."""
    index = get_gdp_bucket_index(gdp)
    return GDP_BUCKETS[len(GDP_BUCKETS) - 1 - index].color


def get_endorser_color(category: Optional[str]) -> str:
    member = EndorserCategory.parse(category)
    if member is None:
        return DEFAULT_ENDORSER_COLOR
    return CATEGORY_COLORS[member]


def get_category_class(category: Optional[str]) -> str:
    member = EndorserCategory.parse(category)
    if member is None:
        return DEFAULT_CATEGORY_CLASS
    return CATEGORY_CLASSES[member]


def get_category_style(category: Optional[str]) -> CategoryStyle:
    return CategoryStyle(
        color=get_endorser_color(category),
        css_class=get_category_class(category),
    )


class ColorScheme:
    """Stylesheet and contrast helpers built on the category tables"""

    def __init__(self):
        self.category_colors = CATEGORY_COLORS
        self.category_classes = CATEGORY_CLASSES
        self.contrast_threshold = 4.5  # WCAG AA standard

    def calculate_contrast_ratio(self, color1: str, color2: str) -> float:
        """Calculate contrast ratio between two colors for accessibility"""
        r1, g1, b1 = tuple(int(color1[i:i+2], 16) for i in (1, 3, 5))
        r2, g2, b2 = tuple(int(color2[i:i+2], 16) for i in (1, 3, 5))

        l1 = self._relative_luminance(r1, g1, b1)
        l2 = self._relative_luminance(r2, g2, b2)

        if l1 > l2:
            return (l1 + 0.05) / (l2 + 0.05)
        else:
            return (l2 + 0.05) / (l1 + 0.05)

    def _relative_luminance(self, r: int, g: int, b: int) -> float:
        def gamma_correct(c):
            if c <= 0.03928:
                return c / 12.92
            else:
                return pow((c + 0.055) / 1.055, 2.4)

        return (0.2126 * gamma_correct(r / 255.0)
                + 0.7152 * gamma_correct(g / 255.0)
                + 0.0722 * gamma_correct(b / 255.0))

    def get_text_color(self, background_color: str) -> str:
        """Get appropriate text color (black or white) for background"""
        contrast_with_white = self.calculate_contrast_ratio(background_color, "#FFFFFF")
        contrast_with_black = self.calculate_contrast_ratio(background_color, "#000000")

        if contrast_with_white > contrast_with_black:
            return "#FFFFFF"
        else:
            return "#000000"

    def cluster_css(self) -> str:
        """Stylesheet for the cluster icon classes emitted by the icon factory"""
        rules = [
            ".custom-cluster { border-radius: 50%; border: 2px solid #FFFFFF; "
            "box-shadow: 0 1px 3px rgba(0,0,0,0.3); }",
            ".custom-cluster div { width: 100%; height: 100%; display: flex; "
            "align-items: center; justify-content: center; font-weight: bold; "
            "font-family: Arial, sans-serif; }",
        ]
        for category, css_class in self.category_classes.items():
            color = self.category_colors[category]
            text_color = self.get_text_color(color)
            rules.append(
                f".custom-cluster.{css_class} {{ background-color: {color}; color: {text_color}; }}"
            )
        rules.append(
            f".custom-cluster.{DEFAULT_CATEGORY_CLASS} {{ background-color: {DEFAULT_ENDORSER_COLOR}; "
            f"color: {self.get_text_color(DEFAULT_ENDORSER_COLOR)}; }}"
        )
        logger.debug(f"Generated cluster stylesheet with {len(rules)} rules")
        return "\n".join(rules)

    def cluster_style_html(self) -> str:
        return f"<style>\n{self.cluster_css()}\n</style>"
