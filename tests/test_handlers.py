from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from markermap.edit import MarkerMapController, normalize_click_payload, setup_editor_handlers

RECT = {'top': 10, 'left': 20, 'width': 200, 'height': 100}


class FakeMediaLibrary:
    """Confirms immediately with a fixed resource."""

    def __init__(self, url):
        self.url = url
        self.requested_types = []

    def open(self, allowed_types, on_select):
        self.requested_types.append(allowed_types)
        on_select({'url': self.url, 'id': 42})


@pytest.fixture
def controller():
    return MarkerMapController({})


@pytest.fixture
def handlers(controller):
    return setup_editor_handlers(controller, FakeMediaLibrary('/media/picked.png'))


def test_normalize_click_payload_handles_dict():
    payload = {'clientX': 120, 'clientY': 60, 'rect': RECT}
    assert normalize_click_payload(payload) == (120.0, 60.0, RECT)


def test_normalize_click_payload_handles_event_args():
    event = SimpleNamespace(args={'clientX': '5', 'clientY': '6'})
    assert normalize_click_payload(event) == (5.0, 6.0, None)


@pytest.mark.parametrize('raw', [None, 'click', [1, 2], {'clientX': 1}, {'clientX': 'a', 'clientY': 2}])
def test_normalize_click_payload_rejects_garbage(raw):
    assert normalize_click_payload(raw) is None


def test_map_click_respects_toggle(handlers, controller):
    click = SimpleNamespace(args={'clientX': 120, 'clientY': 60, 'rect': RECT})

    assert handlers['handle_map_click'](click) is None
    assert controller.locations == []

    handlers['toggle_add_marker'](SimpleNamespace(value=True))
    marker = handlers['handle_map_click'](click)
    assert marker == {'top': '50.00%', 'left': '50.00%', 'url': '', 'tooltip': ''}

    handlers['toggle_add_marker'](SimpleNamespace(value=False))
    handlers['handle_map_click'](click)
    assert len(controller.locations) == 1


def test_media_pickers_write_selected_url(handlers, controller):
    handlers['open_map_image']()
    handlers['open_marker_icon']()
    assert controller.attributes['mapImageUrl'] == '/media/picked.png'
    assert controller.attributes['markerIconUrl'] == '/media/picked.png'


def test_media_pickers_request_images(controller):
    library = FakeMediaLibrary('/x.png')
    handlers = setup_editor_handlers(controller, library)
    handlers['open_map_image']()
    assert library.requested_types == [['image']]


def test_field_edit_and_removal(handlers, controller):
    handlers['toggle_add_marker'](SimpleNamespace(value=True))
    for x in (20, 120):
        handlers['handle_map_click']({'clientX': x, 'clientY': 10, 'rect': RECT})

    handlers['update_location'](1, 'url', 'https://example.com')
    assert controller.locations[1]['url'] == 'https://example.com'

    handlers['remove_location'](0)
    assert len(controller.locations) == 1
    assert controller.locations[0]['url'] == 'https://example.com'


@patch('markermap.edit.handlers.ui')
def test_failures_are_reported_not_raised(mock_ui):
    controller = MagicMock()
    controller.update_location.side_effect = RuntimeError('disk full')
    handlers = setup_editor_handlers(controller, FakeMediaLibrary('/x.png'))

    handlers['update_location'](0, 'url', 'x')

    mock_ui.notify.assert_called_once()
    assert 'disk full' in mock_ui.notify.call_args[0][0]
