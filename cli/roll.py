"""Roll dice locally and report which image each result would use.

Usage: python -m cli.roll --die d6 --count 10 [--seed 42] [--assets assets]
"""

from __future__ import annotations

import argparse
from collections import Counter

from src.game.dice import DICE, die_for_command, roll
from src.game.images import asset_path
from src.utils.crypto import create_rng
from src.utils.placeholder import placeholder_url


def main() -> None:
    parser = argparse.ArgumentParser(description="Simulate dice rolls")
    parser.add_argument(
        "--die",
        choices=[die.command for die in DICE],
        default="d20",
        help="Die to roll",
    )
    parser.add_argument("--count", type=int, default=10, help="Number of rolls")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed")
    parser.add_argument("--assets", default="assets", help="Assets directory")
    parser.add_argument("--quiet", action="store_true", help="Only print totals")
    args = parser.parse_args()

    die = die_for_command(args.die)
    assert die is not None
    rng = create_rng(args.seed)
    faces: Counter[int] = Counter()
    missing = 0

    print(f"Rolling {die.label} x{args.count}...")
    for i in range(args.count):
        value = roll(die, rng)
        faces[value] += 1
        path = asset_path(args.assets, die, value)
        if path.is_file():
            source = str(path)
        else:
            source = placeholder_url(die.label, value)
            missing += 1
        if not args.quiet:
            print(f"  {i + 1:4d}. {value:2d}  {source}")

    print("\nResults:")
    for value in range(1, die.faces + 1):
        print(f"  {value:2d}: {faces[value]}")
    print(f"  Placeholder fallbacks: {missing}/{args.count}")


if __name__ == "__main__":
    main()
