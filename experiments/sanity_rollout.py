# /experiments/sanity_rollout.py
"""
Sanity rollouts for RocketRunEnv:
- Runs RANDOM and/or TINY-HEURISTIC policies over fixed action seeds
- Writes an episodes CSV for notebook analysis
- Saves per-episode action sequences (and optionally observations)

The level is fixed, so the "seed" only drives the random policy's RNG.

Usage examples (from repo root):
  # Run both policies over 10 default seeds, frame_skip=4, save traces:
  python -m experiments.sanity_rollout --policies both --save-traces

  # Only heuristic, also save observations for deeper debugging:
  python -m experiments.sanity_rollout --policies heuristic --seeds 1 --save-traces --save-obs
"""

from __future__ import annotations
import argparse
import csv
from pathlib import Path
from typing import List, Tuple

import numpy as np

from rocket_run.env.platformer_env import RocketRunEnv


# ------------------------ Policies ------------------------

def random_policy_init(action_seed: int):
    rng = np.random.RandomState(action_seed)
    def act(_obs: np.ndarray) -> int:
        return int(rng.randint(0, 6))
    return act

def tiny_heuristic_policy_init():
    """
    Very small rule: always walk right; jump (right+jump) when the near
    probe (+60) sees a chasm, or when a platform is coming up at +120.
    """
    def act(obs: np.ndarray) -> int:
        falling = obs[3] == 1.0
        chasm_60, plat_120 = obs[8], obs[12]
        if not falling and (chasm_60 == 1.0 or plat_120 > 0.0):
            return 5
        return 2
    return act


# ------------------------ Rollout core ------------------------

def ensure_dir(p: Path):
    p.mkdir(parents=True, exist_ok=True)

def write_episode_row(csv_path: Path, header: List[str], row: List):
    exists = csv_path.exists()
    with csv_path.open("a", newline="") as f:
        w = csv.writer(f)
        if not exists:
            w.writerow(header)
        w.writerow(row)

def run_one_episode(policy_name: str,
                    seed: int,
                    frame_skip: int,
                    steps_limit: int,
                    save_traces: bool,
                    save_obs: bool,
                    out_dir: Path) -> Tuple[int, float, int, int, str, bool, bool]:
    """
    Returns: (ep_len, ret_sum, score, lives, status, terminated, truncated)
    Also writes traces to disk if requested.
    """
    env = RocketRunEnv(frame_skip=frame_skip)

    if policy_name == "random":
        policy = random_policy_init(10_000 + seed)
    elif policy_name == "heuristic":
        policy = tiny_heuristic_policy_init()
    else:
        raise ValueError("Unknown policy")

    actions: List[int] = []
    obs_list: List[np.ndarray] = []

    ret_sum = 0.0
    ep_len = 0
    term = trunc = False

    try:
        obs, info = env.reset(seed=seed)
        if save_obs:
            obs_list.append(obs.copy())

        for _ in range(steps_limit):
            a = policy(obs)
            actions.append(int(a))

            obs, r, term, trunc, info = env.step(a)
            ret_sum += float(r)
            ep_len += 1

            if save_obs:
                obs_list.append(obs.copy())

            if term or trunc:
                break
    finally:
        env.close()

    if save_traces:
        trace_dir = out_dir / "traces" / policy_name
        ensure_dir(trace_dir)
        np.save(trace_dir / f"{seed}_actions.npy", np.asarray(actions, dtype=np.int8))
        if save_obs:
            np.save(trace_dir / f"{seed}_obs.npy", np.asarray(obs_list, dtype=np.float32))

    return ep_len, ret_sum, int(info["score"]), int(info["lives"]), str(info["status"]), bool(term), bool(trunc)


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--policies", type=str, default="both",
                    choices=["random", "heuristic", "both"],
                    help="Which policy to run")
    ap.add_argument("--seeds", type=str, default="",
                    help="Comma-separated seeds. If empty, uses 10 defaults: 101..110")
    ap.add_argument("--frame-skip", type=int, default=4,
                    help="Sim frames per decision step")
    ap.add_argument("--steps", type=int, default=5_000,
                    help="Hard cap on decision steps (env may truncate earlier)")
    ap.add_argument("--out-dir", type=str, default="experiments/runs",
                    help="Directory to store episodes.csv and traces/")
    ap.add_argument("--save-traces", action="store_true",
                    help="Save action sequences (and optional obs)")
    ap.add_argument("--save-obs", action="store_true",
                    help="Also save observations per step (larger files)")
    args = ap.parse_args()

    out_dir = Path(args.out_dir)
    ensure_dir(out_dir)

    if args.seeds.strip():
        seeds = [int(s) for s in args.seeds.split(",") if s.strip()]
    else:
        seeds = list(range(101, 111))

    episodes_csv = out_dir / "episodes.csv"
    header = [
        "policy_name", "seed", "frame_skip",
        "episode_len_decisions", "return_sum", "score", "lives", "status",
        "terminated", "truncated",
    ]

    to_run = ["random", "heuristic"] if args.policies == "both" else [args.policies]

    print(f"Running policies={to_run} on {len(seeds)} seeds (frame_skip={args.frame_skip})")
    print(f"Writing summaries to {episodes_csv}")

    for policy_name in to_run:
        for seed in seeds:
            ep_len, ret_sum, score, lives, status, terminated, truncated = run_one_episode(
                policy_name=policy_name,
                seed=seed,
                frame_skip=args.frame_skip,
                steps_limit=args.steps,
                save_traces=args.save_traces,
                save_obs=args.save_obs,
                out_dir=out_dir
            )
            write_episode_row(episodes_csv, header, [
                policy_name, seed, args.frame_skip,
                ep_len, f"{ret_sum:.2f}", score, lives, status,
                int(terminated), int(truncated),
            ])
            print(f"[{policy_name}] seed={seed}  len={ep_len}  ret={ret_sum:.2f}  "
                  f"score={score} lives={lives} status={status}")

    print("✓ Sanity rollouts complete")


if __name__ == "__main__":
    main()
