import argparse
import logging

from config import AppConfig
from runners.run_snake import main as snake

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Grid snake")
    p.add_argument("mode", nargs="?", default="play", choices=["play"])
    p.add_argument("--grid", type=int, default=None, help="cells per side (square grid)")
    p.add_argument("--cell", type=int, default=None, help="cell size in pixels")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--log-dir", default=None, help="append finished games to <dir>/games.csv")
    p.add_argument("--no-grid-lines", action="store_true")
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args(argv)

def config_from_args(args) -> AppConfig:
    cfg = AppConfig(seed=args.seed, log_dir=args.log_dir,
                    render_grid_lines=not args.no_grid_lines)
    if args.grid is not None:
        cfg = cfg.with_(grid_w=args.grid, grid_h=args.grid,
                        start_pos=(args.grid // 2, args.grid // 2))
    if args.cell is not None:
        cfg = cfg.with_(render_cell=args.cell)
    return cfg.validate()

def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if args.mode == "play":
        snake(config_from_args(args))

if __name__ == "__main__":
    main()
