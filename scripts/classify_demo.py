"""
Demo driver for classbreaks.

Classifies the census reference dataset (or values given on the command
line) and prints the result as JSON. With --top, also prints the best few
Jenks partitions.
"""

import json
import logging
import sys
from pathlib import Path

# Add src to path so we can import classbreaks
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root / "src"))

from classbreaks import ClassificationConfig, ClassificationError, ClassificationMethod, classify
from classbreaks.common.datasets import ALL_STATES_S1701
from classbreaks.jenks import get_all_possible_jenks

logger = logging.getLogger("classify_demo")


def parse_values(raw: str) -> list:
    """Parse comma-separated numbers, keeping ints as ints."""
    values = []
    for token in raw.split(","):
        token = token.strip()
        if not token:
            continue
        try:
            values.append(int(token))
        except ValueError:
            values.append(float(token))
    return values


def print_top_partitions(data: list, num_classes: int, top: int) -> None:
    """Print the highest-GVF Jenks partitions."""
    ranked = get_all_possible_jenks(sorted(data), num_classes)
    print("=================================")
    print("     Top classifications:")
    print("=================================")
    for idx, scored in enumerate(ranked[:top]):
        print(f"#{idx + 1}")
        print(f"GVF={scored.gvf}")
        print("[")
        for values in scored.partition:
            print(f"\t{list(values)}")
        print("]")
        print()


def main() -> int:
    import argparse

    parser = argparse.ArgumentParser(description="Compute class breakpoints")
    parser.add_argument(
        "--method",
        choices=[m.name.lower() for m in ClassificationMethod],
        default="quantile",
        help="Classification method",
    )
    parser.add_argument("--classes", type=int, default=5, help="Number of classes")
    parser.add_argument("--tolerance", type=float, help="Jenks: accept first partition with GVF >= tolerance")
    parser.add_argument("--values", type=str, help="Comma-separated values (default: census dataset)")
    parser.add_argument("--top", type=int, default=0, help="Jenks: also print the N best partitions")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s | %(levelname)s | %(message)s",
    )

    data = parse_values(args.values) if args.values else list(ALL_STATES_S1701)

    try:
        config = ClassificationConfig(
            num_classes=args.classes,
            method=ClassificationMethod[args.method.upper()],
            tolerance=args.tolerance,
            sort_input=True,
        )
    except ValueError as e:
        parser.error(str(e))

    try:
        result = classify(data, config)
    except ClassificationError as e:
        logger.error(str(e))
        return 1

    print(json.dumps(result.to_dict(), indent=2))

    if args.top and config.method is ClassificationMethod.JENKS:
        print_top_partitions(data, config.num_classes, args.top)

    if args.verbose and result.timings is not None:
        print(result.timings.summary())

    return 0


if __name__ == "__main__":
    sys.exit(main())
