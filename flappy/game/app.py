# flappy/game/app.py
import sys, argparse, logging
import pygame
from pygame import K_ESCAPE

from .config import WIDTH, HEIGHT, FPS, SEED_DEFAULT
from .controls import map_event
from .events import ActivateInput, SpawnSample, TimeAdvance
from .machine import Game
from .render import Renderer
from .settings import Assets, GameConfig
from .timing import GapSampler, SpawnClock, clamp_dt
from .viewport import viewport_of

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Flappy — side-scrolling arcade game")
    p.add_argument("--seed", type=int, default=None,
                   help="Gap sampler seed. Omit for SEED_DEFAULT, use -1 for random each launch.")
    p.add_argument("--width", type=int, default=WIDTH, help="Initial window width")
    p.add_argument("--height", type=int, default=HEIGHT, help="Initial window height")
    p.add_argument("--fps", type=int, default=FPS, help="Frame cap")
    p.add_argument("--bird", type=str, default=None, help="Player sprite image")
    p.add_argument("--background", type=str, default=None, help="Scrolling background image")
    p.add_argument("--debug", action="store_true", help="Verbose logging")
    return p.parse_args(argv)


def run(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    # Resolve seed: None -> SEED_DEFAULT; -1 -> random
    if args.seed is None:
        seed = SEED_DEFAULT
    elif args.seed == -1:
        seed = None
    else:
        seed = args.seed

    config = GameConfig()
    assets = Assets(player_image=args.bird, background_image=args.background)
    sampler = GapSampler(config, seed=seed)
    logger.info("Gap sampler seed: %s", sampler.seed)

    pygame.init()
    pygame.display.set_caption("Flappy")
    screen = pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)
    clock = pygame.time.Clock()

    game = Game(config, sampler=sampler, assets=assets)
    game.handle(viewport_of(screen).ready_event())
    renderer = Renderer(assets)
    spawn_clock = SpawnClock(config.spawn_interval_ms)

    while True:
        dt = clamp_dt(clock.tick(args.fps) / 1000.0)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if event.type == pygame.KEYDOWN and event.key == K_ESCAPE:
                pygame.quit(); sys.exit()
            game_event = map_event(event)
            if isinstance(game_event, ActivateInput) and not game.playing:
                # fresh run: spawn timer restarts with it
                spawn_clock.reset()
            game.handle(game_event)

        if game.playing:
            for _ in range(spawn_clock.tick(dt)):
                game.handle(SpawnSample(sampler.sample(game.state.viewport_height)))
            game.handle(TimeAdvance(dt))

        renderer.draw(screen, game.state)
        pygame.display.flip()


if __name__ == "__main__":
    run()
