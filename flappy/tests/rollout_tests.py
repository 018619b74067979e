# flappy/tests/rollout_tests.py
"""
Sanity-rollout heuristic: steers the player's centre, on the same scale as the gap.

Usage (from repo root):
  python -m flappy.tests.rollout_tests
"""
import numpy as np

from experiments.sanity_rollout import tiny_heuristic_policy_init


def _obs(y, vy, gap_top, gap_bot):
    return np.array([y, vy, 0.5, gap_top, gap_bot], dtype=np.float32)


def test_centred_player_holds():
    act = tiny_heuristic_policy_init()
    # y_norm 0.5 puts the centre at mid-screen, just above the 0.55 gap centre
    assert act(_obs(0.5, 0.0, 0.1, 1.0)) == 0


def test_aims_centre_not_top_edge():
    act = tiny_heuristic_policy_init()
    # top edge sits on the gap centre (0.2) but the body centre is below it
    assert act(_obs(0.2, 0.0, 0.0, 0.4)) == 1
    # ... unless already rising fast
    assert act(_obs(0.2, 0.5, 0.0, 0.4)) == 0


def test_above_gap_does_not_flap():
    act = tiny_heuristic_policy_init()
    assert act(_obs(0.1, -0.5, 0.5, 1.0)) == 0


def main():
    test_centred_player_holds()
    test_aims_centre_not_top_edge()
    test_above_gap_does_not_flap()
    print("✓ rollout heuristic tests passed")


if __name__ == "__main__":
    main()
