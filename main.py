"""
main.py — Bootstrap

1. Load tuning
2. Create the app
3. Push the arena scene (builds a seeded world)
4. Run

    python main.py --seed 7
"""

import argparse
from core import tuning
from core.app import App
from scenes.arena_scene import ArenaScene


def main():
    parser = argparse.ArgumentParser(description="Snowfield Pursuit")
    parser.add_argument("--seed", type=int, default=None,
                        help="scenery/spawn seed (default: [world] seed in tuning.toml)")
    parser.add_argument("--tuning", default=None,
                        help="path to an alternate tuning.toml")
    parser.add_argument("--frames", type=int, default=None,
                        help="quit after this many frames")
    args = parser.parse_args()

    tuning.load(args.tuning)
    seed = args.seed if args.seed is not None else int(tuning.get("world", "seed", 0))
    print(f"[MAIN] Starting arena, seed {seed}")

    app = App(title="Snowfield Pursuit", size=(960, 640))
    app.push_scene(ArenaScene(seed=seed))
    app.run(max_frames=args.frames)


if __name__ == "__main__":
    main()
