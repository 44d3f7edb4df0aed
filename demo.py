#!/usr/bin/env python3
"""Watch random reveals play Minesweeper through the Gymnasium environment."""
import time
import os

import numpy as np

from src.minefield.board import BoardConfig
from src.minefield.environment import MinesweeperEnv


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def demo(delay: float = 0.3, games: int = 5, size: int = 9, mines: int = 10, seed: int = None):
    """Run demo games with visualization."""
    config = BoardConfig(height=size, width=size, mine_amount=mines)
    env = MinesweeperEnv(config=config, render_mode="ansi")
    env.action_space.seed(seed)

    print(f"Board: {size}x{size} with {mines} mines ({100*mines/(size*size):.1f}% density)")
    wins = 0

    for game in range(games):
        obs, info = env.reset(seed=None if seed is None else seed + game)
        done = False
        step = 0

        while not done:
            mask = env.get_action_mask().astype(np.int8)
            action = env.action_space.sample(mask=mask)
            x, y = action % size, action // size

            obs, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            clear_screen()
            print(f"=== Game {game + 1}/{games} | Step {step} ===")
            print(f"Wins so far: {wins}")
            print(f"Last move: ({x}, {y})\n")
            print(env.render())

            if done:
                if info["game_state"] == "WON":
                    wins += 1
                    print("\n*** WIN! ***")
                else:
                    print("\n*** LOST (hit mine) ***")

            time.sleep(delay)

    print(f"\n=== Final: {wins}/{games} wins ({100*wins/games:.0f}%) ===")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.3, help="Delay between moves")
    parser.add_argument("--games", type=int, default=5, help="Number of games")
    parser.add_argument("--size", type=int, default=9, help="Board size (NxN)")
    parser.add_argument("--mines", type=int, default=10, help="Number of mines")
    parser.add_argument("--seed", type=int, default=None, help="Seed for boards and moves")
    args = parser.parse_args()

    demo(delay=args.delay, games=args.games, size=args.size, mines=args.mines, seed=args.seed)
