import copy

import pytest

from markermap.block import BLOCK_CLASS_NAME
from markermap.renderer import render_markup


@pytest.fixture
def attributes():
    return {
        'mapImageUrl': '/media/map.png',
        'markerIconUrl': '/media/pin.png',
        'locations': [
            {'top': '25.00%', 'left': '50.00%', 'url': 'https://example.com', 'tooltip': 'Harbor'},
            {'top': '10.00%', 'left': '90.00%', 'url': '', 'tooltip': ''},
        ],
    }


def test_full_markup_shape(attributes):
    attributes['locations'] = attributes['locations'][:1]
    expected = (
        f'<div class="{BLOCK_CLASS_NAME}"><div class="map-container">'
        '<img src="/media/map.png" alt="Map"/>'
        '<div class="markers">'
        '<a href="https://example.com" class="marker" '
        'style="top:25.00%;left:50.00%;background-image:url(/media/pin.png)" '
        'target="_parent" rel="noopener noreferrer">'
        '<span class="tooltip">Harbor</span></a>'
        '</div></div></div>'
    )
    assert render_markup(attributes) == expected


def test_render_is_idempotent_and_pure(attributes):
    snapshot = copy.deepcopy(attributes)
    first = render_markup(attributes)
    second = render_markup(attributes)
    assert first == second
    assert attributes == snapshot


def test_empty_url_falls_back_to_hash(attributes):
    markup = render_markup(attributes)
    assert '<a href="#" class="marker"' in markup


def test_missing_url_and_tooltip_keys_are_tolerated():
    markup = render_markup({'locations': [{'top': '1%', 'left': '2%'}]})
    assert 'href="#"' in markup
    assert '<span class="tooltip"></span>' in markup


def test_tooltip_is_always_present(attributes):
    markup = render_markup(attributes)
    assert markup.count('<span class="tooltip">') == 2


def test_markers_keep_their_order(attributes):
    markup = render_markup(attributes)
    assert markup.index('top:25.00%') < markup.index('top:10.00%')


def test_absent_map_image_omits_img():
    markup = render_markup({'locations': []})
    assert '<img' not in markup


def test_absent_locations_renders_empty_wrapper():
    markup = render_markup({'mapImageUrl': '/m.png'})
    assert '<div class="markers"></div>' in markup
    assert render_markup(None).endswith('<div class="markers"></div></div></div>')


def test_absent_icon_omits_background_image():
    markup = render_markup({'locations': [{'top': '1%', 'left': '2%', 'url': '', 'tooltip': ''}]})
    assert 'style="top:1%;left:2%"' in markup
    assert 'background-image' not in markup


def test_out_of_range_and_malformed_positions_render_as_is():
    markup = render_markup({'locations': [{'top': '150%', 'left': 'abc', 'url': '', 'tooltip': ''}]})
    assert 'top:150%;left:abc' in markup


def test_values_are_html_escaped():
    markup = render_markup({
        'mapImageUrl': '/m.png?a=1&b="2"',
        'locations': [{'top': '1%', 'left': '1%', 'url': 'https://x.test/?q=<script>', 'tooltip': '<b>Fish & Chips</b>'}],
    })
    assert 'src="/m.png?a=1&amp;b=&quot;2&quot;"' in markup
    assert 'href="https://x.test/?q=&lt;script&gt;"' in markup
    assert '<span class="tooltip">&lt;b&gt;Fish &amp; Chips&lt;/b&gt;</span>' in markup


def test_malformed_locations_render_no_markers():
    assert 'class="marker"' not in render_markup({'locations': 'abc'})
    assert 'class="marker"' not in render_markup({'locations': {'top': '1%'}})

    markup = render_markup({'locations': ['junk', {'top': '1%', 'left': '2%', 'tooltip': 'Kept'}]})
    assert markup.count('class="marker"') == 1
    assert '<span class="tooltip">Kept</span>' in markup
