# /experiments/sanity_rollout.py
"""
Sanity rollouts for FlappyEnv:
- Runs RANDOM and/or TINY-HEURISTIC policies over fixed seeds
- Prints one summary line per episode and a per-policy mean

Usage examples (from repo root):
  # Both policies over 20 default seeds, frame_skip=4:
  python -m experiments.sanity_rollout --policies both

  # Only heuristic, custom seeds, watch it play:
  python -m experiments.sanity_rollout --policies heuristic --seeds 111,222,333 --render
"""

from __future__ import annotations
import argparse
from typing import List, Optional, Tuple

import numpy as np

from flappy.env.flappy_env import FlappyEnv
from flappy.game.config import HEIGHT, PLAYER_H


# ------------------------ Policies ------------------------

def random_policy_init(action_seed: int, flap_prob: float = 0.1):
    rng = np.random.RandomState(action_seed)
    def act(_obs: np.ndarray) -> int:
        return int(rng.random_sample() < flap_prob)
    return act

def tiny_heuristic_policy_init():
    """
    Very small rule: aim the player's centre at the middle of the next gap.
    Flap when the centre sits below the gap centre and is not already rising fast.
    y_norm is scaled by (H - player_h), the gap bounds by H: bring y onto the gap scale.
    """
    h_ratio = PLAYER_H / HEIGHT
    def act(obs: np.ndarray) -> int:
        y, vy, _dx, gap_top, gap_bot = (float(v) for v in obs)
        centre = y * (1.0 - h_ratio) + 0.5 * h_ratio
        target = 0.5 * (gap_top + gap_bot)
        return 1 if (centre > target and vy < 0.1) else 0
    return act


# ------------------------ Rollout core ------------------------

def run_one_episode(policy_name: str,
                    seed: int,
                    frame_skip: int,
                    steps_limit: int,
                    render: bool = False) -> Tuple[int, float, float, bool, bool, Optional[str]]:
    """
    Returns: (ep_len, ret_sum, time_s, terminated, truncated, death_cause)
    """
    env = FlappyEnv(render_mode="human" if render else None, frame_skip=frame_skip)

    if policy_name == "random":
        # Make action RNG seed a function of seed for determinism
        policy = random_policy_init(10_000 + seed)
    elif policy_name == "heuristic":
        policy = tiny_heuristic_policy_init()
    else:
        raise ValueError("Unknown policy")

    ret_sum = 0.0
    ep_len = 0
    term = trunc = False
    info = {}

    try:
        obs, info = env.reset(seed=seed)
        for _ in range(steps_limit):
            obs, r, term, trunc, info = env.step(policy(obs))
            ret_sum += float(r)
            ep_len += 1
            if term or trunc:
                break
    finally:
        env.close()

    return ep_len, ret_sum, float(info.get("time_s", 0.0)), bool(term), bool(trunc), info.get("death_cause")


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--policies", type=str, default="both",
                    choices=["random", "heuristic", "both"],
                    help="Which policy to run")
    ap.add_argument("--seeds", type=str, default="",
                    help="Comma-separated seeds. If empty, uses 20 defaults: 101..120")
    ap.add_argument("--frame-skip", type=int, default=4,
                    help="Sim frames per decision step")
    ap.add_argument("--steps", type=int, default=10_000,
                    help="Hard cap on decision steps (env may truncate earlier)")
    ap.add_argument("--render", action="store_true", help="Open a window while rolling out")
    args = ap.parse_args()

    if args.seeds.strip():
        seeds = [int(s) for s in args.seeds.split(",") if s.strip()]
    else:
        seeds = list(range(101, 121))  # 20 fixed eval seeds by default

    to_run = ["random", "heuristic"] if args.policies == "both" else [args.policies]
    decision_hz = 60 / max(1, args.frame_skip)
    print(f"Running policies={to_run} on {len(seeds)} seeds "
          f"(frame_skip={args.frame_skip}, decision_hz≈{decision_hz:.1f})")

    for policy_name in to_run:
        survived: List[float] = []
        for seed in seeds:
            ep_len, ret_sum, time_s, terminated, truncated, cause = run_one_episode(
                policy_name=policy_name,
                seed=seed,
                frame_skip=args.frame_skip,
                steps_limit=args.steps,
                render=args.render,
            )
            survived.append(time_s)
            print(f"[{policy_name}] seed={seed}  len={ep_len}  time={time_s:.2f}s  "
                  f"ret={ret_sum:.1f}  term={terminated} trunc={truncated}  cause={cause}")
        print(f"[{policy_name}] mean survival {np.mean(survived):.2f}s over {len(seeds)} seeds")

    print("✓ Sanity rollouts complete")


if __name__ == "__main__":
    main()
