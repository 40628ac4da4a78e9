"""
Command line entry point for grapho_hills.
"""

import argparse
import sys

from .io.loaders import load_text, puzzle_input_path
from .pipeline.pipeline import Pipeline
from .pipeline_config import PIPELINE_CONFIG, HillClimbError

MODES = {
    'forward': ['solve_forward'],
    'reverse': ['solve_reverse'],
    'both': ['solve_forward', 'solve_reverse'],
}


def build_parser():
    parser = argparse.ArgumentParser(
        description="Hill climbing: shortest paths over an elevation grid"
    )
    parser.add_argument('-d', '--data-dir', help="Directory holding the puzzle inputs")
    parser.add_argument('-i', '--input', help="Explicit input file (overrides --data-dir)")
    parser.add_argument('--day', type=int, default=12, help="Puzzle day number (default: 12)")
    parser.add_argument('-m', '--mode', choices=sorted(MODES), default='both',
                        help="Search mode (default: both)")
    parser.add_argument('-v', '--verbose', action='store_true', help="Log pipeline progress")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.input and not args.data_dir:
        parser.error("one of --data-dir or --input is required")

    path = args.input or puzzle_input_path(args.data_dir, args.day)
    try:
        text = load_text(path)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    config = dict(PIPELINE_CONFIG)
    config['logger'] = {'level': 'INFO' if args.verbose else 'WARNING', 'console': True}
    pipeline = Pipeline.from_text(text, config)

    print("Day 12: Hill Climbing Algorithm")
    try:
        pipeline.run_steps(['parse_height_map', 'create_graph'] + MODES[args.mode])
    except HillClimbError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    results = pipeline.context['results']
    if 'forward' in results:
        print(f" Puzzle 1: {results['forward']}")
    if 'reverse' in results:
        print(f" Puzzle 2: {results['reverse']}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
