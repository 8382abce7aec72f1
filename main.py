# main.py

import argparse
import logging
import re
import sys
import cProfile, pstats
import numpy as np
import pygame
import constants
import logger_setup
from config import load_config
from controls import action_for_key
from exceptions import ConfigurationError, UnknownPaletteError
from fire_animation import AnimationState, FireAnimation, SimulationParameters
from palette import Palette, resolve_ramp
from renderer import GlyphRenderer

# Get the application's dedicated logger
logger = logging.getLogger("doom_fire")

TICK_EVENT = pygame.USEREVENT + 1
MONOSPACE_FONTS = "dejavusansmono,menlo,consolas,couriernew,monospace"

_DURATION_RE = re.compile(r"^\s*(\d+(?:\.\d*)?|\.\d+)\s*(ms|s)?\s*$")


def parse_duration(text: str) -> int:
    """
    Parses a tick interval such as '50ms', '0.1s' or '40' (milliseconds).
    Returns whole milliseconds.
    """
    match = _DURATION_RE.match(text)
    if not match:
        raise argparse.ArgumentTypeError(f"invalid duration '{text}' (expected e.g. 50ms or 0.1s)")
    value = float(match.group(1))
    if match.group(2) == "s":
        value *= 1000.0
    return int(round(value))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Doom fire effect on a character grid',
        epilog='Errors (unknown palette, unreadable config, display failure) are '
               'reported on stderr with exit status 1.'
    )

    # Unset options fall back to the 'simulation' section of the config file
    parser.add_argument('--char', default=None,
                        help=f'Glyph used to draw the fire (default: {constants.DEFAULT_GLYPH})')
    parser.add_argument('--speed', type=parse_duration, default=None,
                        help=f'Tick interval, e.g. 30ms or 0.1s (default: {constants.DEFAULT_TICK_INTERVAL_MS}ms)')
    parser.add_argument('--palette', default=None,
                        help=f'Color palette: {", ".join(sorted(constants.PALETTES))} (default: {constants.DEFAULT_PALETTE}); '
                             'an unknown name lists the available ones on stderr and exits 1')
    parser.add_argument('--decay', type=float, default=None,
                        help=f'Heat decay intensity, higher gives shorter flames (default: {constants.DEFAULT_DECAY})')
    parser.add_argument('--no-flicker', action='store_true',
                        help='Disable flicker')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for the random generator (default: master_seed from config)')
    parser.add_argument('--config', default='config.json',
                        help='Path to the JSON config file (default: config.json)')
    parser.add_argument('--profile', action='store_true',
                        help='Run under cProfile and print the top 20 functions on exit')
    return parser


def resolve_settings(args: argparse.Namespace, config: dict) -> dict:
    """Command-line values win over the config file, which wins over the defaults."""
    sim_config = config['simulation']
    return {
        'char': args.char if args.char is not None else sim_config['char'],
        'palette': args.palette if args.palette is not None else sim_config['palette'],
        'speed_ms': args.speed if args.speed is not None else sim_config['speed_ms'],
        'decay': args.decay if args.decay is not None else sim_config['decay'],
        'flicker': False if args.no_flicker else bool(sim_config['flicker']),
        'seed': args.seed if args.seed is not None else config.get('master_seed'),
    }


def run_event_loop(animation: FireAnimation, renderer: GlyphRenderer, screen: pygame.Surface):
    """
    Processes one event at a time until the animation is stopped.
    The tick timer is one-shot and re-armed after every tick, so interval
    changes take effect on the next tick and ticks never pile up.
    """
    pygame.time.set_timer(TICK_EVENT, animation.parameters.tick_interval_ms, 1)

    while animation.state is not AnimationState.STOPPED:
        event = pygame.event.wait()

        if event.type == pygame.QUIT:
            animation.stop()

        elif event.type == pygame.KEYDOWN:
            action = action_for_key(event.key, event.unicode, event.mod)
            if action is not None:
                animation.apply(action)

        elif event.type == pygame.VIDEORESIZE:
            screen = pygame.display.get_surface()
            animation.resize(*renderer.grid_size(event.w, event.h))

        elif event.type == TICK_EVENT:
            if animation.tick():
                renderer.draw(screen, animation)
                pygame.display.flip()

                # --- Logging (throttled) ---
                if animation.tick_count % constants.STATS_LOG_EVERY_TICKS == 0:
                    stats = animation.get_stats()
                    logger.debug(
                        f"Tick={stats['tick']}, "
                        f"LiveCells={stats.get('live_cells', 0)}, "
                        f"MeanHeat={stats.get('mean_heat', 0.0):.2f}, "
                        f"Wind={stats['wind']:+d}, "
                        f"Decay={stats['decay']:.1f}, "
                        f"Flicker={stats['flicker']}, "
                        f"Interval={stats['tick_interval_ms']}ms"
                    )
            pygame.time.set_timer(TICK_EVENT, animation.parameters.tick_interval_ms, 1)

    pygame.time.set_timer(TICK_EVENT, 0)


def main(argv=None) -> int:
    """
    Main function to initialize and run the fire animation.
    Returns the process exit status.
    """
    args = build_parser().parse_args(argv)

    # --- Setup ---
    try:
        config = load_config(args.config)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    settings = resolve_settings(args, config)

    # Reject an unknown palette before any simulation state exists
    try:
        resolve_ramp(settings['palette'])
    except UnknownPaletteError as e:
        print(e, file=sys.stderr)
        return 1

    logger_setup.setup_logging(config)
    logger.info("Application starting...")
    logger.info(f"Resolved settings: {settings}")

    # Initialize the master random number generator (RNG)
    rng = np.random.default_rng(settings['seed'])
    logger.info(f"Master RNG initialized with seed: {settings['seed']}")

    parameters = SimulationParameters(
        wind=0,
        decay_rate=settings['decay'],
        flicker=settings['flicker'],
        tick_interval_ms=settings['speed_ms'],
    )

    display_config = config['display']
    profiler = cProfile.Profile() if args.profile else None

    try:
        # --- Initialization ---
        pygame.init()
        screen = pygame.display.set_mode(
            (display_config['width'], display_config['height']), pygame.RESIZABLE
        )
        pygame.display.set_caption(constants.TITLE)
        font = pygame.font.SysFont(MONOSPACE_FONTS, display_config['font_size'])

        palette = Palette.build(settings['palette'], settings['char'], font)
        renderer = GlyphRenderer(font, settings['char'])
        animation = FireAnimation(palette, parameters, rng)

        # The window size is known once the display exists
        animation.resize(*renderer.grid_size(*screen.get_size()))

        if profiler is not None:
            profiler.enable()
        run_event_loop(animation, renderer, screen)
    except KeyboardInterrupt:
        logger.info("Interrupted.")
    except pygame.error as e:
        logger.exception("Rendering backend failed.")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        if profiler is not None:
            profiler.disable()
            logger.info("Profiling complete. Printing stats...")
            stats = pstats.Stats(profiler).sort_stats('cumtime')
            stats.print_stats(20)
        pygame.quit()

    logger.info("Application shutting down.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
