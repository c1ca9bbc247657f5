import pytest
from hypothesis import given, strategies as st

from models import EndorserCategory
from utils.cluster_icon import (
    build_cluster_icon, cluster_icon_size, dominant_category, icon_create_function,
    tally_categories,
)


@pytest.mark.parametrize('members,size', [(0, 30), (10, 50), (35, 100), (1000, 100)])
def test_cluster_size(members, size):
    assert cluster_icon_size(members) == size


def test_icon_is_square_and_anchored_at_center():
    icon = build_cluster_icon(['Finance'] * 10)
    assert icon.pixel_size == 50
    assert icon.anchor == (25, 25)
    assert icon.to_dict()['iconSize'] == [50, 50]
    assert icon.html == '<div><span>10</span></div>'
    assert icon.class_name == 'custom-cluster cluster-finance'


def test_majority_wins():
    icon = build_cluster_icon(['Finance'] * 3 + ['Other'] * 5)
    assert icon.css_class == 'cluster-other'
    assert icon.member_count == 8


def test_single_category_cluster():
    assert build_cluster_icon(['Utilities and Infrastructure Providers']).css_class == 'cluster-utilities'
    assert build_cluster_icon(['Subnational Governments'] * 40).css_class == 'cluster-subnational'


def test_members_without_category_are_skipped_but_counted():
    icon = build_cluster_icon([None, '', 'Fleets and Users', None])
    assert icon.css_class == 'cluster-fleets'
    assert icon.member_count == 4
    assert icon.pixel_size == 38


def test_no_categorized_members_gives_default_class():
    icon = build_cluster_icon([None, None])
    assert icon.css_class == 'cluster-default'


def test_unrecognized_majority_gives_default_class():
    icon = build_cluster_icon(['Mystery', 'Mystery', 'Finance'])
    assert icon.css_class == 'cluster-default'


def test_tie_goes_to_first_declared_category():
    tally = tally_categories(['Other', 'Finance', 'Other', 'Finance'])
    assert dominant_category(tally) is EndorserCategory.FINANCE


def test_tie_with_unrecognized_goes_to_known_category():
    tally = tally_categories(['Mystery', 'Other'])
    assert dominant_category(tally) is EndorserCategory.OTHER


def test_tally_omits_zero_counts():
    tally = tally_categories(['Finance', 'Finance', 'Other', 'Nope', None])
    assert tally == {EndorserCategory.FINANCE: 2, EndorserCategory.OTHER: 1, None: 1}


def test_explicit_member_count_overrides_list_length():
    icon = build_cluster_icon(['Finance'], member_count=35)
    assert icon.pixel_size == 100


labels = st.one_of(st.none(), st.sampled_from([c.label for c in EndorserCategory]), st.text(max_size=5))


@given(st.lists(labels, max_size=60))
def test_dominant_category_has_maximal_count(categories):
    tally = tally_categories(categories)
    winner = dominant_category(tally)
    if not tally:
        assert winner is None
    else:
        assert tally[winner] == max(tally.values())


def test_icon_create_function_mirrors_tables():
    js = icon_create_function()
    assert js.startswith('function(cluster)')
    assert '"Finance": "cluster-finance"' in js
    assert '"cluster-default"' in js
    assert 'Math.min(30 + count * 2, 100)' in js
    assert "className: 'custom-cluster ' + categoryClass" in js
    assert 'iconAnchor: [size / 2, size / 2]' in js


def test_icon_create_function_uses_configured_sizes():
    class SmallIcons:
        CLUSTER_BASE_SIZE = 20
        CLUSTER_SIZE_PER_MEMBER = 1
        CLUSTER_MAX_SIZE = 60

    assert 'Math.min(20 + count * 1, 60)' in icon_create_function(SmallIcons)
    assert build_cluster_icon(['Other'] * 50, config=SmallIcons).pixel_size == 60
