"""
Tests for block stores.

Tests both JsonBlockStore and MemoryBlockStore implementations.
"""

import json

import pytest

from markermap.block import default_attributes
from markermap.storage import (
    BlockNotFoundError,
    BlockStore,
    JsonBlockStore,
    MemoryBlockStore,
    create_store,
)

SAMPLE = {
    'mapImageUrl': '/media/map.png',
    'markerIconUrl': '/media/pin.png',
    'locations': [
        {'top': '25.00%', 'left': '25.00%', 'url': 'https://example.com', 'tooltip': 'Harbor'},
        {'top': 'oops', 'left': '120%', 'url': '', 'tooltip': ''},
    ],
}


@pytest.fixture(params=['json', 'memory'])
def store(request, tmp_path):
    if request.param == 'json':
        return JsonBlockStore(str(tmp_path / 'blocks'))
    return MemoryBlockStore()


class TestBlockStores:
    """Behaviour shared by every store."""

    def test_conforms_to_protocol(self, store):
        assert isinstance(store, BlockStore)

    def test_create_block_uses_defaults(self, store):
        block_id = store.create_block()
        assert store.block_exists(block_id)
        assert store.load_attributes(block_id) == default_attributes()
        assert store.load_attributes(block_id) == {'locations': []}

    def test_save_and_reload_verbatim(self, store):
        block_id = store.create_block()
        store.save_attributes(block_id, SAMPLE)
        assert store.load_attributes(block_id) == SAMPLE

    def test_list_blocks(self, store):
        ids = {store.create_block(), store.create_block()}
        assert set(store.list_blocks()) == ids

    def test_delete_block(self, store):
        block_id = store.create_block()
        store.delete_block(block_id)
        assert not store.block_exists(block_id)
        with pytest.raises(BlockNotFoundError):
            store.load_attributes(block_id)
        # Deleting twice is harmless
        store.delete_block(block_id)

    def test_unknown_block_raises_key_error(self, store):
        with pytest.raises(KeyError):
            store.load_attributes('missing')

    def test_non_dict_attributes_rejected(self, store):
        block_id = store.create_block()
        with pytest.raises(ValueError):
            store.save_attributes(block_id, ['not', 'a', 'dict'])


class TestJsonBlockStore:

    def test_one_file_per_block(self, tmp_path):
        store = JsonBlockStore(str(tmp_path / 'blocks'))
        block_id = store.create_block()
        store.save_attributes(block_id, SAMPLE)

        path = tmp_path / 'blocks' / f'{block_id}.json'
        assert path.exists()
        with path.open('r', encoding='utf-8') as f:
            assert json.load(f) == SAMPLE

    def test_persists_across_instances(self, tmp_path):
        block_id = JsonBlockStore(str(tmp_path)).create_block()
        JsonBlockStore(str(tmp_path)).save_attributes(block_id, SAMPLE)
        assert JsonBlockStore(str(tmp_path)).load_attributes(block_id) == SAMPLE

    def test_corrupt_file_loads_defaults(self, tmp_path):
        (tmp_path / 'broken.json').write_text('{not json', encoding='utf-8')
        (tmp_path / 'listy.json').write_text('[1, 2]', encoding='utf-8')
        store = JsonBlockStore(str(tmp_path))

        assert store.load_attributes('broken') == default_attributes()
        assert store.load_attributes('listy') == default_attributes()

    def test_path_traversal_ids_are_rejected(self, tmp_path):
        store = JsonBlockStore(str(tmp_path / 'blocks'))
        assert not store.block_exists('../secrets')
        with pytest.raises(BlockNotFoundError):
            store.load_attributes('../secrets')


def test_memory_store_returns_copies():
    store = MemoryBlockStore()
    block_id = store.create_block()
    loaded = store.load_attributes(block_id)
    loaded['locations'].append({'top': '1%'})
    assert store.load_attributes(block_id) == {'locations': []}


def test_factory_defaults_to_json(tmp_path, monkeypatch):
    monkeypatch.delenv('MARKER_MAP_STORAGE', raising=False)
    store = create_store(blocks_dir=tmp_path, config={})
    assert isinstance(store, JsonBlockStore)
    assert store.store_type == 'json'


def test_factory_honours_config_and_env(tmp_path, monkeypatch):
    monkeypatch.delenv('MARKER_MAP_STORAGE', raising=False)
    assert isinstance(create_store(blocks_dir=tmp_path, config={'storage': 'memory'}), MemoryBlockStore)

    monkeypatch.setenv('MARKER_MAP_STORAGE', 'memory')
    assert isinstance(create_store(blocks_dir=tmp_path, config={'storage': 'json'}), MemoryBlockStore)


def test_factory_unknown_type_falls_back_to_json(tmp_path):
    store = create_store(blocks_dir=tmp_path, force_store='postgres')
    assert isinstance(store, JsonBlockStore)
