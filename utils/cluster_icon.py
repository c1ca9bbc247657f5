"""Cluster icon aggregation for endorser marker clusters.

A visual cluster is created and destroyed by Leaflet.markercluster in the
browser, so the aggregation rule exists twice: as pure Python (used for
tests and any server-side rendering) and as the JavaScript
``iconCreateFunction`` generated from the same tables and size constants.

Rule:
    * tally member categories, skipping members without one; labels outside
      the known set are tallied together as "unrecognized"
    * the category with the strictly greatest count wins; on a tie the
      category declared first in ``EndorserCategory`` wins, and
      "unrecognized" loses to every known category
    * icon size is ``min(base + growth * members, max)``, square, anchored
      at its center
"""

import json
import logging
from typing import Dict, Iterable, Optional

from config import Config
from models import ClusterIcon, EndorserCategory
from utils.color_scheme import CATEGORY_CLASSES, DEFAULT_CATEGORY_CLASS

logger = logging.getLogger(__name__)

# Tally key for non-empty labels outside the known set
UNRECOGNIZED = None

# Tie-break order: declaration order, unrecognized last
_RANK_ORDER = list(EndorserCategory) + [UNRECOGNIZED]


def tally_categories(categories: Iterable[Optional[str]]) -> Dict[Optional[EndorserCategory], int]:
    """Count members per category in tie-break order, omitting zero counts"""
    counts: Dict[Optional[EndorserCategory], int] = {key: 0 for key in _RANK_ORDER}
    for label in categories:
        if not label:
            continue
        counts[EndorserCategory.parse(label)] += 1
    return {key: n for key, n in counts.items() if n > 0}


def dominant_category(tally: Dict[Optional[EndorserCategory], int]) -> Optional[EndorserCategory]:
    """Category with the strictly greatest count; first-declared wins ties"""
    best = None
    best_count = 0
    for key in _RANK_ORDER:
        count = tally.get(key, 0)
        if count > best_count:
            best, best_count = key, count
    return best


def cluster_icon_size(member_count: int,
                      base_size: int = Config.CLUSTER_BASE_SIZE,
                      per_member: int = Config.CLUSTER_SIZE_PER_MEMBER,
                      max_size: int = Config.CLUSTER_MAX_SIZE) -> int:
    return min(base_size + per_member * max(member_count, 0), max_size)


def build_cluster_icon(categories: Iterable[Optional[str]],
                       member_count: Optional[int] = None,
                       config=Config) -> ClusterIcon:
    """Compute the icon descriptor for one visual cluster.

    Args:
        categories: Category property of every member marker (None allowed)
        member_count: Number of markers in the cluster; defaults to the
            number of categories given, including missing ones
        config: Source of the size constants

    Returns:
        ClusterIcon with the dominant category's CSS class and the capped size
    """
    categories = list(categories)
    if member_count is None:
        member_count = len(categories)

    winner = dominant_category(tally_categories(categories))
    css_class = CATEGORY_CLASSES[winner] if winner is not None else DEFAULT_CATEGORY_CLASS

    size = cluster_icon_size(
        member_count,
        base_size=config.CLUSTER_BASE_SIZE,
        per_member=config.CLUSTER_SIZE_PER_MEMBER,
        max_size=config.CLUSTER_MAX_SIZE,
    )
    return ClusterIcon(
        member_count=member_count,
        css_class=css_class,
        pixel_size=size,
        anchor=(size / 2, size / 2),
    )


_ICON_CREATE_TEMPLATE = """function(cluster) {
    var order = %(order)s;
    var classes = %(classes)s;
    var counts = {};
    cluster.getAllChildMarkers().forEach(function(marker) {
        var props = marker.feature && marker.feature.properties;
        var category = props ? props.Category : null;
        if (!category) { return; }
        var key = Object.prototype.hasOwnProperty.call(classes, category) ? category : '';
        counts[key] = (counts[key] || 0) + 1;
    });
    var best = null;
    var bestCount = 0;
    order.concat(['']).forEach(function(key) {
        if ((counts[key] || 0) > bestCount) {
            best = key;
            bestCount = counts[key];
        }
    });
    var categoryClass = best ? classes[best] : %(default_class)s;
    var count = cluster.getChildCount();
    var size = Math.min(%(base)d + count * %(per_member)d, %(max)d);
    return L.divIcon({
        html: '<div><span>' + count + '</span></div>',
        className: 'custom-cluster ' + categoryClass,
        iconSize: L.point(size, size),
        iconAnchor: [size / 2, size / 2]
    });
}"""


def icon_create_function(config=Config) -> str:
    """JavaScript iconCreateFunction mirroring build_cluster_icon"""
    order = [category.label for category in EndorserCategory]
    classes = {category.label: CATEGORY_CLASSES[category] for category in EndorserCategory}
    js = _ICON_CREATE_TEMPLATE % {
        'order': json.dumps(order),
        'classes': json.dumps(classes),
        'default_class': json.dumps(DEFAULT_CATEGORY_CLASS),
        'base': config.CLUSTER_BASE_SIZE,
        'per_member': config.CLUSTER_SIZE_PER_MEMBER,
        'max': config.CLUSTER_MAX_SIZE,
    }
    logger.debug("Generated cluster iconCreateFunction")
    return js
