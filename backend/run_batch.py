import argparse
import concurrent.futures
import logging
import math
import os
from typing import Any, Dict, List

from main import GRID_WIDTH, GRID_HEIGHT, run_simulation
from players import AVAILABLE_VARIANTS, resolve_variant_key

logger = logging.getLogger(__name__)


def summarize(results: List[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Aggregate game summaries for one bot.

    Returns:
        Dict with games, avg_score, avg_moves, ratio (total moves per food), wins,
        and a count of each death reason.
    """
    games = len(results)
    total_score = sum(r["final_score"] for r in results)
    total_moves = sum(r["moves"] for r in results)
    deaths: Dict[str, int] = {}
    for r in results:
        if r["death_reason"]:
            deaths[r["death_reason"]] = deaths.get(r["death_reason"], 0) + 1

    return {
        "games": games,
        "avg_score": round(total_score / games, 2) if games else 0.0,
        "avg_moves": round(total_moves / games, 2) if games else 0.0,
        "ratio": round(total_moves / total_score, 2) if total_score else math.nan,
        "wins": sum(1 for r in results if r["result"] == "won"),
        "deaths": deaths,
    }


def run_batch_simulations():
    parser = argparse.ArgumentParser(
        description="Run batch Snake games for each bot and compare their results."
    )
    parser.add_argument("--bots", type=str, nargs='+', default=AVAILABLE_VARIANTS,
                        help="Bots to run (default: all).")
    parser.add_argument("--num-simulations", type=int, required=True,
                        help="Number of games to run for EACH bot.")
    parser.add_argument("--max-workers", type=int, default=os.cpu_count(),
                        help="Maximum number of parallel simulation workers (threads).")

    # Game configuration arguments (mirroring main.py)
    parser.add_argument("--width", type=int, default=GRID_WIDTH,
                        help=f"Width of the board (default: {GRID_WIDTH}).")
    parser.add_argument("--height", type=int, default=GRID_HEIGHT,
                        help=f"Height of the board (default: {GRID_HEIGHT}).")
    parser.add_argument("--max-moves", type=int, default=100_000,
                        help="Move cap per game so cycling bots terminate (default: 100000).")
    parser.add_argument("--seed", type=int, default=None,
                        help="Base seed; game i of a bot uses seed + i.")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    try:
        bot_keys = [resolve_variant_key(name) for name in args.bots]
    except ValueError as e:
        parser.error(str(e))

    # 1. Generate one task per (bot, game) pair
    simulation_tasks = []
    for bot_key in bot_keys:
        for i in range(args.num_simulations):
            params = argparse.Namespace(
                width=args.width,
                height=args.height,
                max_moves=args.max_moves,
                seed=None if args.seed is None else args.seed + i,
            )
            simulation_tasks.append((bot_key, params))

    print(f"Generated {len(simulation_tasks)} total simulation tasks.")

    # 2. Execute simulations in parallel; games share no state
    results: Dict[str, List[Dict[str, Any]]] = {key: [] for key in bot_keys}
    with concurrent.futures.ThreadPoolExecutor(max_workers=args.max_workers) as executor:
        futures = {
            executor.submit(run_simulation, bot_key, params): bot_key
            for bot_key, params in simulation_tasks
        }

        for future in concurrent.futures.as_completed(futures):
            bot_key = futures[future]
            try:
                result = future.result()
            except Exception:
                logger.exception("A %s simulation raised", bot_key)
                continue
            results[bot_key].append(result)
            logger.info(
                "%s finished: score %d in %d moves (%s)",
                result["bot"], result["final_score"], result["moves"], result["result"],
            )

    # 3. Summary
    print("\nBatch summary:")
    print(f"{'bot':<12} {'games':>5} {'avg score':>10} {'avg moves':>10} {'ratio':>8} {'wins':>5}  deaths")
    for bot_key in bot_keys:
        s = summarize(results[bot_key])
        print(
            f"{bot_key:<12} {s['games']:>5} {s['avg_score']:>10} {s['avg_moves']:>10} "
            f"{s['ratio']:>8} {s['wins']:>5}  {s['deaths']}"
        )


if __name__ == "__main__":
    run_batch_simulations()
