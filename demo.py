#!/usr/bin/env python3
"""Watch the random agent play."""
import time
import os

from minefield.agents import RandomAgent
from minefield.board import BoardConfig
from minefield.commands import Command
from minefield.environment import MinesweeperEnv


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def demo(delay: float = 0.1, games: int = 3, size: int = 6, ratio: float = 0.1):
    """Run demo games with visualization."""
    config = BoardConfig(width=size, height=size, mine_ratio=ratio)
    env = MinesweeperEnv(config=config, render_mode="ansi")
    agent = RandomAgent()

    print(f"Board: {size}x{size} with {config.mine_count} mines")
    print("Starting in 2 seconds...")
    time.sleep(2)

    wins = 0

    for game in range(games):
        obs, _ = env.reset()
        agent.reset()

        done = False
        step = 0

        while not done:
            valid_actions = env.get_action_mask()
            action = agent.select_action(obs, valid_actions)

            obs, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            clear_screen()
            print(f"=== Game {game + 1}/{games} | Step {step} ===")
            print(f"Wins so far: {wins}")
            print(f"Last command: {Command(action).name}\n")
            print(env.render())

            if done:
                if info.get("game_state") == "WON":
                    wins += 1
                    print(f"\n*** WIN! ***")
                else:
                    print(f"\n*** LOST (hit mine) ***")

            time.sleep(delay)

        time.sleep(1.0)  # Pause between games

    print(f"\n=== Final: {wins}/{games} wins ({100*wins/games:.0f}%) ===")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.1, help="Delay between commands")
    parser.add_argument("--games", type=int, default=3, help="Number of games")
    parser.add_argument("--size", type=int, default=6, help="Board size (NxN)")
    parser.add_argument("--ratio", type=float, default=0.1, help="Fraction of cells with mines")
    args = parser.parse_args()

    demo(delay=args.delay, games=args.games, size=args.size, ratio=args.ratio)
