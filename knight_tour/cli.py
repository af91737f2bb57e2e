"""Command-line interface for the knight's tour solver."""

import argparse
import sys
import json
from typing import Optional, Tuple

from .core.notation import parse_coordinate, square_name
from .solvers import WarnsdorffSolver
from .benchmark import Benchmark
from .benchmark.visualizer import Visualizer
from .display import format_steps, plot_tour, animate_tour

INVALID_INPUT_MESSAGE = 'Invalid square. Examples: E4, e4, "4 5"'

EXIT_NO_TOUR = 1
EXIT_INVALID_INPUT = 2
EXIT_SOLVER_ERROR = 3


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Knight's Tour Solver (8x8, Warnsdorff + backtracking)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Find a tour from E4 and list the steps
  python -m knight_tour.cli solve E4 --steps

  # Same square, given as row and column
  python -m knight_tour.cli solve "4 5"

  # Save a picture and an animation of the tour
  python -m knight_tour.cli solve a1 --plot tour.png --animate tour.gif

  # Try every start square
  python -m knight_tour.cli benchmark --output results/
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Find a tour from one square")
    solve_parser.add_argument(
        "square", nargs="?", default=None,
        help='Start square, e.g. E4 or "4 5" (prompted for if omitted)'
    )
    solve_parser.add_argument(
        "--steps", action="store_true",
        help="List the squares in visiting order"
    )
    solve_parser.add_argument(
        "--json", action="store_true",
        help="Print the result as JSON"
    )
    solve_parser.add_argument(
        "--plot", type=str, default=None,
        help="Save a PNG of the tour to this path"
    )
    solve_parser.add_argument(
        "--animate", type=str, default=None,
        help="Save a GIF animation of the tour to this path"
    )
    solve_parser.add_argument(
        "--ms-per-step", type=int, default=350,
        help="Animation speed in milliseconds per move (default: 350)"
    )
    solve_parser.add_argument(
        "--no-center-tiebreak", action="store_true",
        help="Order equal-degree moves by enumeration order only"
    )
    solve_parser.add_argument(
        "--max-iterations", type=int, default=None,
        help="Give up after this many search calls (default: no limit)"
    )
    solve_parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Show detailed search statistics"
    )

    # Benchmark command
    bench_parser = subparsers.add_parser("benchmark", help="Run the solvers from many start squares")
    bench_parser.add_argument(
        "--squares", nargs="+", default=None,
        help="Start squares to test (default: all 64)"
    )
    bench_parser.add_argument(
        "--timeout", "-t", type=float, default=30.0,
        help="Seconds allowed per square per solver (default: 30)"
    )
    bench_parser.add_argument(
        "--max-iterations", type=int, default=None,
        help="Search budget per square per solver (default: no limit)"
    )
    bench_parser.add_argument(
        "--output", "-o", type=str, default="results",
        help="Output directory for results (default: results)"
    )
    bench_parser.add_argument(
        "--no-charts", action="store_true",
        help="Skip chart generation"
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "solve":
        cmd_solve(args)
    elif args.command == "benchmark":
        cmd_benchmark(args)


def prompt_square() -> Tuple[int, int]:
    """Ask for a start square until the answer parses."""
    while True:
        try:
            text = input("Start square: ")
        except EOFError:
            print()
            print("No start square given.")
            sys.exit(EXIT_INVALID_INPUT)
        square = parse_coordinate(text)
        if square is not None:
            return square
        print(INVALID_INPUT_MESSAGE)


def cmd_solve(args):
    """Handle the solve command."""
    if args.square is None:
        square: Optional[Tuple[int, int]] = prompt_square()
    else:
        square = parse_coordinate(args.square)
        if square is None:
            print(f"{INVALID_INPUT_MESSAGE} (got {args.square!r})")
            sys.exit(EXIT_INVALID_INPUT)

    row, col = square
    name = square_name(row, col)

    solver = WarnsdorffSolver(
        use_center_tiebreak=not args.no_center_tiebreak,
        max_iterations=args.max_iterations
    )
    solution, stats = solver.solve(row, col)

    if args.json:
        print(json.dumps({
            "start": {"row": row, "col": col, "square": name},
            "board": solution.to_2d_list() if solution is not None else None,
            "steps": [
                {"step": step, "row": r, "col": c, "square": square_name(r, c)}
                for step, r, c in solution.get_steps()
            ] if solution is not None else [],
            "stats": stats.to_dict()
        }, indent=2))
    elif solution is not None:
        kind = "closed" if stats.extra.get("closed") else "open"
        print(f"✓ Tour from {name} ({kind}) found in {stats.time_seconds:.4f}s")
        print(solution)
        if args.steps:
            print()
            for line in format_steps(solution):
                print(line)
    else:
        if stats.extra.get("error"):
            print(f"✗ Search from {name} failed: {stats.extra['error']}")
        elif stats.extra.get("aborted"):
            print(f"✗ Search from {name} stopped after {stats.iterations:,} iterations.")
        else:
            print(f"✗ No knight's tour found from {name}.")

    if args.verbose and not args.json:
        print(f"  Iterations: {stats.iterations:,}")
        print(f"  Backtracks: {stats.backtracks:,}")
        print(f"  Nodes explored: {stats.nodes_explored:,}")
        print(f"  Memory: {stats.memory_bytes / 1024:.2f} KB")

    if solution is None:
        sys.exit(EXIT_SOLVER_ERROR if stats.extra.get("error") else EXIT_NO_TOUR)

    if args.plot:
        print(f"Tour image saved to {plot_tour(solution, args.plot)}")
    if args.animate:
        print(f"Animation saved to {animate_tour(solution, args.animate, args.ms_per_step)}")


def cmd_benchmark(args):
    """Handle the benchmark command."""
    squares = None
    if args.squares:
        squares = []
        for text in args.squares:
            square = parse_coordinate(text)
            if square is None:
                print(f"{INVALID_INPUT_MESSAGE} (got {text!r})")
                sys.exit(EXIT_INVALID_INPUT)
            squares.append(square)

    benchmark = Benchmark(
        squares=squares,
        timeout_seconds=args.timeout,
        max_iterations=args.max_iterations
    )

    print("=" * 60)
    print("KNIGHT'S TOUR BENCHMARK")
    print("=" * 60)
    print(f"Start squares: {len(benchmark.squares)}")
    print(f"Solvers: {', '.join(benchmark.solvers.keys())}")
    print(f"Output directory: {args.output}")
    print("=" * 60)

    results = benchmark.run()
    summary = benchmark.get_summary()

    print("\n" + "=" * 60)
    print("RESULTS SUMMARY")
    print("=" * 60)

    for algo, stats in summary["results_by_algorithm"].items():
        print(f"\n{algo}:")
        print(f"  Coverage: {stats['coverage']:.1f}% ({stats['total_solved']}/{stats['total_tested']})")
        print(f"  Closed tours: {stats['closed_tours']}")
        print(f"  Avg Time: {stats['avg_time_seconds']:.4f}s (max {stats['max_time_seconds']:.4f}s)")
        print(f"  Avg Backtracks: {stats['avg_backtracks']:,.1f}")
        if stats["failed_squares"]:
            print(f"  Failed from: {', '.join(stats['failed_squares'])}")

    benchmark.save_results(args.output)

    if not args.no_charts:
        print("\nGenerating charts...")
        visualizer = Visualizer(results, args.output)
        charts = visualizer.generate_all()
        visualizer.generate_summary_table()
        print(f"Charts saved to {args.output}/")
        for chart in charts:
            print(f"  - {chart.split('/')[-1]}")

    print("\n" + "=" * 60)
    print("Benchmark complete!")


if __name__ == "__main__":
    main()
