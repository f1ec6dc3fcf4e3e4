#!/usr/bin/env python3
"""Arkanoid - Standalone Entry Point.

Usage:
    python -m games.Arkanoid.main
    python -m games.Arkanoid.main --width 1024 --height 768
    python -m games.Arkanoid.main --log-level DEBUG
"""

import argparse
import sys
from typing import Any, Dict, List, Optional

import pygame

from gamekit.games import GameState, GameLoop, PygameFrameScheduler
from gamekit.games.input import InputEvent, InputManager
from gamekit.games.input.sources import MouseInputSource
from gamekit.logging import (
    get_logger, configure_logging, register_sink, create_sink, close_all_sinks,
)
from games.Arkanoid.config import SCREEN_WIDTH, SCREEN_HEIGHT, FPS, default_config
from games.Arkanoid.game_mode import ArkanoidMode

log = get_logger('arkanoid.main')


def add_game_arguments(parser: argparse.ArgumentParser, arg_defs: List[Dict[str, Any]]) -> None:
    """Add BaseGame-style argument definitions to an argparse parser."""
    for arg_def in arg_defs:
        kwargs = {}
        if 'type' in arg_def:
            kwargs['type'] = arg_def['type']
        if 'default' in arg_def:
            kwargs['default'] = arg_def['default']
        if 'help' in arg_def:
            kwargs['help'] = arg_def['help']
        if 'action' in arg_def:
            kwargs['action'] = arg_def['action']
            kwargs.pop('type', None)  # action and type are mutually exclusive
        if 'choices' in arg_def:
            kwargs['choices'] = arg_def['choices']
        parser.add_argument(arg_def['name'], **kwargs)


def apply_input(
    game: ArkanoidMode,
    loop: GameLoop,
    events: List[InputEvent],
    restart_requested: bool = False,
) -> None:
    """Feed one pass worth of input to the game.

    A game that goes from over to playing here gets a fresh loop, so no
    frame scheduled for the finished game survives into the new one.

    Args:
        game: The running game
        loop: Frame loop driving game
        events: Pointer events collected this pass
        restart_requested: True if the restart key was pressed
    """
    was_over = game.state == GameState.GAME_OVER
    game.handle_input(events)
    if restart_requested:
        game.restart()

    if was_over and game.state == GameState.PLAYING:
        loop.start()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Arkanoid - Standalone")

    # Display options
    parser.add_argument('--width', type=int, default=SCREEN_WIDTH, help='Playfield width')
    parser.add_argument('--height', type=int, default=SCREEN_HEIGHT, help='Playfield height')

    add_game_arguments(parser, ArkanoidMode.get_arguments())
    parser.set_defaults(fps=FPS)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run Arkanoid standalone."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = default_config().with_playfield(args.width, args.height)
    except ValueError as e:
        parser.error(str(e))

    if args.log_level:
        configure_logging(level=args.log_level)
    register_sink('session', create_sink('session'))

    # No surface, no game: report once and exit before the loop exists
    try:
        pygame.init()
        screen = pygame.display.set_mode((args.width, args.height))
        pygame.display.set_caption("Arkanoid")
        pygame.font.init()
    except pygame.error as e:
        log.critical("Cannot open a %dx%d display: %s", args.width, args.height, e)
        pygame.quit()
        close_all_sinks()
        return 1

    game = ArkanoidMode(config=config, skin=args.skin)
    input_manager = InputManager(MouseInputSource())
    scheduler = PygameFrameScheduler(fps=args.fps)

    def render_frame() -> None:
        game.render(screen)
        pygame.display.flip()

    loop = GameLoop(step=game.update, render=render_frame, scheduler=scheduler)

    print("\n" + "=" * 50)
    print("ARKANOID")
    print("=" * 50)
    print("Controls:")
    print("  - Move the mouse to steer the paddle")
    print("  - Play Again (or R) after a game over")
    print("  - ESC to quit")
    print("=" * 50 + "\n")

    loop.start()
    running = True

    try:
        while running:
            # Mouse events become InputEvents; everything else is re-posted
            input_manager.update(0.0)

            restart_requested = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_r:
                        restart_requested = True

            apply_input(game, loop, input_manager.get_events(), restart_requested)

            scheduler.tick()
    finally:
        loop.stop()
        close_all_sinks()
        pygame.quit()

    return 0


if __name__ == "__main__":
    sys.exit(main())
