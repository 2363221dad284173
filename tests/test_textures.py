import pygame

from evilpikmin.textures import TextureStore


def _write_bmp(path, size):
    surface = pygame.Surface(size)
    surface.fill((10, 20, 30))
    pygame.image.save(surface, str(path))
    return path


def test_load_and_get(tmp_path):
    store = TextureStore()
    path = _write_bmp(tmp_path / "guy_sheet.bmp", (32, 16))
    assert store.load_texture(str(path), "guy_sheet")
    texture = store.get("guy_sheet")
    assert texture.get_size() == (32, 16)
    assert texture.get_at((0, 0))[:3] == (10, 20, 30)


def test_missing_file_is_not_stored(tmp_path):
    store = TextureStore()
    assert not store.load_texture(str(tmp_path / "absent.bmp"), "absent")
    assert store.get("absent") is None
    assert "absent" not in store.textures


def test_unknown_name_gives_none():
    assert TextureStore().get("nothing") is None


def test_destroy_clears(tmp_path):
    store = TextureStore()
    path = _write_bmp(tmp_path / "rock.bmp", (8, 8))
    store.load_texture(str(path), "rock")
    store.destroy_textures()
    assert store.get("rock") is None
    assert store.textures == {}


def test_instance_is_shared():
    assert TextureStore.instance() is TextureStore.instance()
    assert TextureStore() is not TextureStore.instance()