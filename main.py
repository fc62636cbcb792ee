import argparse
import json
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

import pygame

from settings import WINDOW_WIDTH, WINDOW_HEIGHT, TITLE, FPS
from engine.error_handler import ConfigurationError, VillageError, log_error, logger
from engine.sprites.sprite_cache import SpriteCache
from ui.minimap import Minimap
from ui.village_renderer import VillageRenderer
from vault import NoteScanner, TagAnalyzer
from world.generation.config import VillageGeneratorOptions
from world.village import VillageData, VillageGenerator

PAN_SPEED = 600.0  # World units per second at zoom 1
ZOOM_STEP = 1.25


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a markdown vault as a village.")
    parser.add_argument("vault", type=Path, help="Vault folder containing markdown notes")
    parser.add_argument("--seed", help="Village seed (overrides the config file)")
    parser.add_argument("--config", type=Path, help="JSON file with generator options")
    parser.add_argument("--top-tags", type=int, help="Number of tags to turn into zones (3-20)")
    parser.add_argument("--max-villagers", type=int, help="Villager cap (10-500)")
    parser.add_argument("--export", type=Path, help="Write an overview PNG instead of opening a window")
    parser.add_argument("--json", type=Path, help="Write the generated village as JSON")
    return parser.parse_args(argv)


def build_options(args: argparse.Namespace) -> VillageGeneratorOptions:
    """Config file first, then command-line overrides."""
    # Without a seed the vault folder name keeps the village stable
    if args.config is not None:
        options = VillageGeneratorOptions.load(args.config, seed=args.seed, default_seed=args.vault.name)
    else:
        options = VillageGeneratorOptions.from_dict({"seed": args.seed or args.vault.name})

    overrides = {}
    if args.top_tags is not None:
        overrides["top_tag_count"] = args.top_tags
    if args.max_villagers is not None:
        overrides["max_villagers"] = args.max_villagers
    return replace(options, **overrides).validate()


def generate(vault: Path, options: VillageGeneratorOptions) -> VillageData:
    generator = VillageGenerator(TagAnalyzer(vault), NoteScanner(vault), options)
    return generator.generate()


def run_preview(data: VillageData, regenerate) -> None:
    """Window with arrow-key panning, +/- zoom and R to regenerate from the vault."""
    pygame.init()
    pygame.display.set_caption(f"{TITLE} - {data.seed}")
    screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
    clock = pygame.time.Clock()

    renderer = VillageRenderer(SpriteCache())
    minimap = Minimap()
    zoom = 1.0
    cam_x = data.spawn_point.x - WINDOW_WIDTH / 2
    cam_y = data.spawn_point.y - WINDOW_HEIGHT / 2

    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS):
                    zoom = min(4.0, zoom * ZOOM_STEP)
                elif event.key == pygame.K_MINUS:
                    zoom = max(0.1, zoom / ZOOM_STEP)
                elif event.key == pygame.K_r:
                    try:
                        data = regenerate()
                    except VillageError as e:
                        log_error(e, "regenerate")

        keys = pygame.key.get_pressed()
        step = PAN_SPEED * dt / zoom
        if keys[pygame.K_LEFT]:
            cam_x -= step
        if keys[pygame.K_RIGHT]:
            cam_x += step
        if keys[pygame.K_UP]:
            cam_y -= step
        if keys[pygame.K_DOWN]:
            cam_y += step

        renderer.render(data, screen, (cam_x, cam_y), zoom)
        screen.blit(minimap.render(data), (10, 10))
        pygame.display.flip()

    pygame.quit()


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        options = build_options(args)
        data = generate(args.vault, options)
    except ConfigurationError as e:
        logger.error(e.user_message)
        return 2
    except VillageError as e:
        logger.error(e.user_message)
        return 1

    if args.json is not None:
        args.json.write_text(json.dumps(data.to_dict(), indent=2), encoding="utf-8")

    if args.export is not None:
        pygame.init()
        overview = VillageRenderer(SpriteCache()).render_overview(data, (WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.image.save(overview, str(args.export))
        pygame.quit()
        return 0

    if args.json is None:
        run_preview(data, lambda: generate(args.vault, options))
    return 0


if __name__ == "__main__":
    sys.exit(main())
