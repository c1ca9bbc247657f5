"""Combined Endorsers / GDP legend for the map"""

import logging
from dataclasses import asdict, dataclass
from typing import Dict, List

from branca.element import MacroElement
from jinja2 import Template

from models import EndorserCategory
from utils.color_scheme import CATEGORY_COLORS, GDP_THRESHOLDS, get_gdp_color

logger = logging.getLogger(__name__)

SWATCH_STYLE = "width: 18px; height: 18px; display: inline-block; margin-right: 8px;"


@dataclass(frozen=True)
class LegendRow:
    color: str
    label: str


def category_rows() -> List[LegendRow]:
    return [LegendRow(CATEGORY_COLORS[c], c.label) for c in EndorserCategory]


def gdp_rows() -> List[LegendRow]:
    """One row per GDP cutoff, labelled in billions; the last row is open-ended."""
    rows = []
    for i, threshold in enumerate(GDP_THRESHOLDS):
        # +1 keeps the lookup inside the bucket that starts at this cutoff
        color = get_gdp_color(threshold + 1)
        low = f"${threshold / 1e9:.1f}"
        if i + 1 < len(GDP_THRESHOLDS):
            label = f"{low}&ndash;${GDP_THRESHOLDS[i + 1] / 1e9:.1f}B"
        else:
            label = f"{low}+B"
        rows.append(LegendRow(color, label))
    return rows


def legend_rows() -> Dict[str, List[Dict[str, str]]]:
    return {
        'endorsers': [asdict(r) for r in category_rows()],
        'gdp': [asdict(r) for r in gdp_rows()],
    }


def _swatch(row: LegendRow) -> str:
    return f'<i style="background:{row.color}; {SWATCH_STYLE}"></i> {row.label}<br>'


def build_legend_html() -> str:
    """Static legend fragment: 7 category swatches then 9 GDP swatches"""
    parts = ['<strong>Endorsers</strong><br>']
    parts.extend(_swatch(row) for row in category_rows())
    parts.append('<br><strong>GDP (Billions)</strong><br>')
    parts.extend(_swatch(row) for row in gdp_rows())
    return ''.join(parts)


class MapLegend(MacroElement):
    """Leaflet control holding the legend fragment"""

    _template = Template(
        """
        {% macro script(this, kwargs) %}
        var {{ this.get_name() }} = L.control({position: {{ this.position|tojson }}});
        {{ this.get_name() }}.onAdd = function () {
            var div = L.DomUtil.create('div', 'info legend');
            div.style.backgroundColor = 'rgba(255, 255, 255, 0.5)';
            div.style.padding = '10px';
            div.style.borderRadius = '8px';
            div.innerHTML = {{ this.html|tojson }};
            return div;
        };
        {{ this.get_name() }}.addTo({{ this._parent.get_name() }});
        {% endmacro %}
        """
    )

    def __init__(self, position: str = 'bottomright'):
        super().__init__()
        self._name = 'MapLegend'
        self.position = position
        self.html = build_legend_html()
        logger.debug(f"Legend built with {len(GDP_THRESHOLDS)} GDP rows")
