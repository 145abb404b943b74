import logging
import pygame
from tetris_config import CONFIG
from tetris_game import new_game
from tetris_input import Controls
from tetris_layout import compute_dims
from tetris_render import RenderAssets
from tetris_rng import UniformRandom

log = logging.getLogger(__name__)


def now_seconds():
    return pygame.time.get_ticks() / 1000.0


def main():
    logging.basicConfig(level=CONFIG["LOG_LEVEL"], format="%(asctime)s %(name)s %(levelname)s %(message)s")
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.KEYUP])

    dims = compute_dims()
    screen = pygame.display.set_mode((dims.total_w, dims.total_h))
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 30)

    render = RenderAssets(dims, font)
    clock = pygame.time.Clock()

    rng = UniformRandom(CONFIG["SEED"])
    log.debug("piece source seeded with %d", rng.seed)
    game = new_game(now_seconds(), rng)
    controls = Controls()

    while True:
        clock.tick(CONFIG["FPS"])

        if not controls.apply(pygame.event.get(), game):
            break

        game.tick(now_seconds())

        render.draw(screen, game)
        if game.over:
            render.draw_game_over(screen)
        pygame.display.flip()

    pygame.quit()


if __name__ == '__main__':
    main()
