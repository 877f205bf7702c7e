import argparse
import logging
from collections import Counter

from hexworld import MapConfig, PathConfig, Terrain, generate
from hexworld.hexgrid import is_cube


def cube_arg(text: str):
    try:
        parts = tuple(int(p) for p in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected x,y,z integers, got {text!r}") from None
    if not is_cube(parts):
        raise argparse.ArgumentTypeError(f"{text!r} is not a cube coordinate (x+y+z must be 0)")
    return parts


def _build(args):
    cfg = MapConfig(seed=args.seed, radius=args.radius, tile_size=args.tile_size)
    return generate(config=cfg)


def cmd_generate(args):
    grid, seed = _build(args)
    counts = Counter(t.terrain for t in grid)
    print(f"Seed: {seed}")
    print(f"Tiles: {len(grid)}")
    for terrain in Terrain:
        print(f"  {terrain.label:<6} {counts.get(terrain, 0)}")
    print(f"Vegetation: {sum(1 for t in grid if t.has_vegetation)}")


def cmd_path(args):
    grid, seed = _build(args)
    start = grid.get(args.start)
    goal = grid.get(args.goal)
    if start is None or goal is None:
        raise SystemExit(f"both ends must lie within radius {args.radius}")
    path = grid.find_path(start, goal, step_offset=args.step,
                          config=PathConfig(time_budget_ms=args.budget_ms))
    print(f"Seed: {seed}")
    print(f"Complete: {path.complete}")
    print(f"Length: {len(path)} (renew at {path.renew_at})")
    for t in path:
        print("  " + ",".join(str(v) for v in t.grid_position))


def main(argv=None):
    ap = argparse.ArgumentParser(description="Hex world generator and path finder")
    ap.add_argument("--verbose", action="store_true", help="Log generation progress")
    sub = ap.add_subparsers()

    def add_map_args(p):
        p.add_argument("--seed", type=int, default=0, help="0 picks a random seed")
        p.add_argument("--radius", type=int, default=20)
        p.add_argument("--tile-size", type=float, default=2.0)

    ap_gen = sub.add_parser("generate", help="Generate a map and print terrain counts")
    add_map_args(ap_gen)
    ap_gen.set_defaults(func=cmd_generate)

    ap_path = sub.add_parser("path", help="Find a path between two cells")
    add_map_args(ap_path)
    ap_path.add_argument("--from", dest="start", type=cube_arg, required=True, help="e.g. '0,0,0'")
    ap_path.add_argument("--to", dest="goal", type=cube_arg, required=True, help="e.g. '3,-1,-2'")
    ap_path.add_argument("--step", type=float, default=None, help="Max height step")
    ap_path.add_argument("--budget-ms", type=float, default=100.0)
    ap_path.set_defaults(func=cmd_path)

    args = ap.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    if hasattr(args, "func"):
        args.func(args)
    else:
        ap.print_help()


if __name__ == "__main__":
    main()
