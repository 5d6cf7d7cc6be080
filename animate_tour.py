# animate_tour.py
# Generate a random graph, build a nearest-neighbour tour from a chosen node
# and save the step-by-step construction as a GIF plus a final PNG.
#
# Usage:
#   python animate_tour.py --seed 2025 --start 0
#   python animate_tour.py --interactive        # Random button + click a node
#
import argparse
import logging
import random
from pathlib import Path

import matplotlib
import matplotlib.pyplot as plt
import imageio

from nntour import GraphConfig, TourSession, ActivationOutcome, drive
from nntour.render import GraphRenderer, frame_rgb


def build_config(args):
    return GraphConfig(
        width=args.width,
        height=args.height,
        min_nodes=args.min_nodes,
        max_nodes=args.max_nodes,
        min_separation=args.min_sep,
        scale_factor=args.scale,
        distance_cap=args.cap,
        tick_interval_ms=args.tick_ms,
        seed=args.seed,
    )


def animate_to_gif(cfg, start, out_gif, out_png):
    fig = plt.figure(figsize=(cfg.width / 100, cfg.height / 100))
    ax = fig.add_axes([0, 0, 1, 1])
    renderer = GraphRenderer(ax, cfg)
    frames = []

    def draw(*a, **kw):
        renderer(*a, **kw)
        frames.append(frame_rgb(fig))

    weights = []
    session = TourSession(cfg, draw=draw, on_weight_changed=weights.append)
    points, matrix = session.on_generate_requested()
    if start is None:
        start = random.Random(cfg.seed).randrange(len(points))
    outcome = session.on_point_activated(start)
    if outcome is not ActivationOutcome.STARTED:
        plt.close(fig)
        raise SystemExit(f"Cannot start from node {start}: graph has {len(points)} nodes")

    # no real pause needed between ticks when rendering offline
    drive(session.animator, sleep=lambda s: None)

    Path(out_gif).parent.mkdir(parents=True, exist_ok=True)
    with imageio.get_writer(out_gif, mode="I", duration=cfg.tick_interval_ms / 1000.0) as writer:
        for frame in frames:
            writer.append_data(frame)

    result = session.result
    renderer(points, matrix, path=result.final_path, cumulative_cost=result.total_cost)
    fig.savefig(out_png, dpi=100)
    plt.close(fig)
    return points, result, weights[-1]


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--width", type=float, default=800.0)
    ap.add_argument("--height", type=float, default=600.0)
    ap.add_argument("--min-nodes", type=int, default=3)
    ap.add_argument("--max-nodes", type=int, default=9)
    ap.add_argument("--min-sep", type=float, default=38.0, help="minimum node separation (px)")
    ap.add_argument("--scale", type=float, default=0.2, help="pixel -> weight scale factor")
    ap.add_argument("--cap", type=float, default=99.0, help="maximum edge weight")
    ap.add_argument("--tick-ms", type=int, default=1000, help="delay between steps")
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--start", type=int, default=None, help="start node (random if omitted)")
    ap.add_argument("--outdir", default="animations")
    ap.add_argument("--interactive", action="store_true", help="open the interactive viewer")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")
    cfg = build_config(args)

    if args.interactive:
        from nntour.viewer import TourViewer
        TourViewer(cfg).show()
        return

    matplotlib.use("Agg")
    tag = f"seed{cfg.seed}" if cfg.seed is not None else "random"
    out_gif = str(Path(args.outdir) / f"nn_tour_{tag}.gif")
    out_png = str(Path(args.outdir) / f"nn_tour_{tag}_final.png")
    points, result, weight = animate_to_gif(cfg, args.start, out_gif, out_png)
    print("Nodes:", len(points), "(intended", str(points.intended) + ")")
    print("Tour:", " -> ".join(str(c) for c in result.final_path))
    print(f"Total Path Weight: {weight:.0f}")
    print("Saved:", out_gif)
    print("Saved:", out_png)


if __name__ == "__main__":
    main()
