import argparse
import logging
import sys

from pathlib import Path

from matplotlib.figure import Figure

from benchmark import Benchmark, format_report
from config import COORDINATE_TYPES, DISTRIBUTIONS, MODES, BenchmarkConfig, load_config
from convex_layers_naive import NaiveHullBuilder
from geometry import Point
from graham_scan import graham_scan
from visualization import plot_benchmark, plot_layers, plot_points, save_figure

logger = logging.getLogger(__name__)


def load_points(filename: str | Path, coordinate_type: str = "float") -> list[Point]:
    """
    Read points from a text file: the first line holds the number of points,
    each following line one "x y" pair. Blank lines are skipped.
    """
    parse = int if coordinate_type == "int" else float
    points = []

    with open(filename, 'r', encoding='utf-8') as f:
        lines = [(i, line.strip()) for i, line in enumerate(f, start=1)]
    lines = [(i, line) for i, line in lines if line]
    if not lines:
        raise ValueError(f"{filename}: file is empty")

    first_no, first = lines[0]
    try:
        n = int(first)
    except ValueError:
        raise ValueError(f"{filename}:{first_no}: expected number of points, got {first!r}") from None

    if len(lines) - 1 < n:
        raise ValueError(f"{filename}: expected {n} points, found {len(lines) - 1}")

    for line_no, line in lines[1:n + 1]:
        fields = line.split()
        if len(fields) != 2:
            raise ValueError(f"{filename}:{line_no}: expected two coordinates, got {line!r}")
        try:
            x, y = map(parse, fields)
        except ValueError:
            raise ValueError(f"{filename}:{line_no}: invalid {coordinate_type} coordinates {line!r}") from None
        points.append(Point(x, y))

    logger.debug("Loaded %d points from %s", len(points), filename)
    return points


def format_point(p: Point) -> str:
    return f"{p.x} {p.y}"


def run_hull(args) -> int:
    points = load_points(args.points_file, args.coordinates)

    try:
        if args.layers:
            builder = NaiveHullBuilder()
            layers = builder.compute_layers(points)
        else:
            hull = graham_scan(points)
    except AssertionError as e:
        raise ValueError(
            f"Hull is not strictly convex, nearly collinear {args.coordinates} points "
            f"were misclassified; try --coordinates int: {e}"
        ) from e

    if args.layers:
        for depth, layer in enumerate(layers):
            print(f"# layer {depth}: {len(layer)} points")
            for p in layer:
                print(format_point(p))
        print(f"# layers: {len(layers)}, pops: {builder.pops}")
    else:
        layers = [list(hull)]
        print(len(hull))
        for p in hull:
            print(format_point(p))
        print(f"# pops: {hull.pops}")

    if args.plot:
        fig = Figure(figsize=(6, 6))
        ax = fig.add_subplot(111)
        plot_points(points, ax, s=2, c='k')
        plot_layers(layers, ax)
        ax.set_aspect('equal')
        save_figure(fig, args.plot)
        logger.info("Saved plot to %s", args.plot)
    return 0


def run_bench(args) -> int:
    config = load_config(args.config) if args.config else BenchmarkConfig()
    config = config.replace(
        sizes=args.sizes,
        trials=args.trials,
        distribution=args.distribution,
        coordinate_type=args.coordinates,
        mode=args.mode,
        seed=args.seed,
    )

    benchmark = Benchmark(config)
    stats = benchmark.run()
    print(format_report(stats, config, benchmark.total_time))

    if args.plot:
        fig = Figure(figsize=(10, 4))
        plot_benchmark(stats, fig, "Layers" if config.mode == "layers" else "Hulls")
        save_figure(fig, args.plot)
        logger.info("Saved plot to %s", args.plot)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Graham scan convex hull and benchmark")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    hull_parser = subparsers.add_parser("hull", help="Compute the convex hull of points from a file")
    hull_parser.add_argument("points_file", help="File with the number of points followed by 'x y' lines")
    hull_parser.add_argument(
        "--coordinates",
        choices=COORDINATE_TYPES,
        default="float",
        help="Coordinate type; int is exact, float may misclassify nearly collinear points",
    )
    hull_parser.add_argument("--layers", action="store_true", help="Peel all convex layers")
    hull_parser.add_argument("--plot", help="Save a plot of the hull to this file")
    hull_parser.set_defaults(func=run_hull)

    bench_parser = subparsers.add_parser("bench", help="Run the repeated-trial benchmark")
    bench_parser.add_argument("--config", help="YAML file with benchmark parameters")
    bench_parser.add_argument("--sizes", type=int, nargs="+", help="Point set sizes")
    bench_parser.add_argument("--trials", type=int, help="Trials per size")
    bench_parser.add_argument("--distribution", choices=DISTRIBUTIONS)
    bench_parser.add_argument("--coordinates", choices=COORDINATE_TYPES)
    bench_parser.add_argument("--mode", choices=MODES)
    bench_parser.add_argument("--seed", type=int)
    bench_parser.add_argument("--plot", help="Save benchmark curves to this file")
    bench_parser.set_defaults(func=run_bench)

    return parser


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        return args.func(args)
    except (OSError, ValueError) as e:
        logger.exception("An error occurred: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
