"""
Convert Points - Map points between image space and rect space
"""

import sys
from pathlib import Path
import argparse
import copy
import re

import yaml

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from quadmap.core.errors import QuadMapError
from quadmap.core.rect_space import RectSpace
from quadmap.core.types import Point
from quadmap.utils.config_loader import load_config, validate_config, DEFAULT_CONFIG
from quadmap.utils.logger import setup_logger, log_config

# x,y with optional sign and exponent; a leading minus would otherwise parse as an option
POINT_PATTERN = re.compile(
    r'^[-+]?(\d+\.?\d*|\.\d+)(e[-+]?\d+)?,'
    r'[-+]?(\d+\.?\d*|\.\d+)(e[-+]?\d+)?$',
    re.IGNORECASE
)


def parse_point(text: str) -> Point:
    """Parse 'x,y' into a Point"""
    try:
        x, y = text.split(',')
        return Point(float(x), float(y))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid point '{text}', expected x,y")


def parse_args(argv=None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        description='Map points between an image quad and its rect (UV) space'
    )

    parser.add_argument(
        'points',
        nargs='*',
        type=parse_point,
        help='Points to convert, each as x,y'
    )

    parser.add_argument(
        '--config', '-c',
        type=str,
        default=None,
        help='Config file path (default: built-in defaults)'
    )

    parser.add_argument(
        '--quad', '-q',
        type=float,
        nargs=8,
        default=None,
        metavar=('X0', 'Y0', 'X1', 'Y1', 'X2', 'Y2', 'X3', 'Y3'),
        help='Image quad corners in TL, TR, BR, BL order (overrides config)'
    )

    parser.add_argument(
        '--to',
        type=str,
        default='rect',
        choices=['rect', 'image'],
        help='Target space (default: rect)'
    )

    parser.add_argument(
        '--log-level',
        type=str,
        default=None,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging level (overrides logging.level from config)'
    )

    argv = list(sys.argv[1:] if argv is None else argv)
    point_args = [a for a in argv if POINT_PATTERN.match(a)]
    args = parser.parse_args([a for a in argv if not POINT_PATTERN.match(a)])

    args.points = [parse_point(a) for a in point_args] + args.points
    if not args.points:
        parser.error("at least one point x,y is required")
    return args


def main(argv=None):
    """Main function"""
    args = parse_args(argv)

    # Until the config is read, only the command line decides the level
    logger = setup_logger(name='quadmap', log_level=args.log_level or 'WARNING')

    try:
        if args.config:
            config = load_config(args.config)
        else:
            config = copy.deepcopy(DEFAULT_CONFIG)

        if args.quad is not None:
            q = args.quad
            config['quad'] = [[q[0], q[1]], [q[2], q[3]], [q[4], q[5]], [q[6], q[7]]]

        validate_config(config)

        logging_config = config.get('logging') or {}
        logger = setup_logger(
            name='quadmap',
            log_level=args.log_level or logging_config.get('level', 'WARNING'),
            log_dir=logging_config.get('log_dir'),
            colored=logging_config.get('colored', True)
        )

        if config.get('quad') is None:
            logger.error("No quad given (use --quad or a config with 'quad')")
            return 1

        log_config(logger, config)

        space = RectSpace.from_config(config['quad'], config)
        convert = space.to_rect if args.to == 'rect' else space.to_image

        for point in args.points:
            x, y = convert(point)
            print(f"{x:.6f} {y:.6f}")

    except (QuadMapError, FileNotFoundError, yaml.YAMLError) as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
