import pygame

from dtd.hud_renderer import BUY_MENU_POSITION, BUY_MENU_SCALE, HudRenderer
from dtd.sprite_cache import SPRITE_SIZE, SpriteCache

BLACK = (0, 0, 0, 255)


class FakeAssets:
    def __init__(self, textures):
        self.textures = textures

    def get_texture(self, asset_id):
        return self.textures.get(asset_id)


def _black_cache():
    black = pygame.Surface((32, 32), pygame.SRCALPHA)
    black.fill(BLACK)
    return SpriteCache(FakeAssets({"texture_black": black}))


def test_buy_menu_is_centred_and_scaled():
    renderer = HudRenderer(_black_cache())
    renderer.render_buy_menu()
    center = (int(BUY_MENU_POSITION.x), int(BUY_MENU_POSITION.y))
    assert renderer.surface.get_at(center) == BLACK
    rects = pygame.mask.from_surface(renderer.surface).get_bounding_rects()
    assert len(rects) == 1
    assert rects[0].width == SPRITE_SIZE[0] * BUY_MENU_SCALE[0]
    assert rects[0].centerx == center[0]


def test_buy_menu_without_black_texture_draws_nothing():
    renderer = HudRenderer(SpriteCache(FakeAssets({})))
    renderer.render_buy_menu()
    assert pygame.mask.from_surface(renderer.surface).count() == 0