"""
Console driver for AI Tycoon: shows the advisor's plan each period, lets the
player accept it or enter an override, and prints results and a summary.
"""

import argparse
from collections.abc import Callable

from config.config import TycoonGameConfig
from environments.tycoon import PeriodBriefing, PeriodOutcome, TycoonSimulation
from models.decision import Decision
from utils.env import env_int, load_project_dotenv
from utils.logger import get_logger

logger = get_logger("demos.ai_tycoon")

InputFn = Callable[[str], str]


def print_intro(config: TycoonGameConfig) -> None:
    print("==============================")
    print("  AI TYCOON - The Business Brain")
    print("==============================\n")
    print(
        f"Goal: Grow profits over {config.total_periods} turns. "
        "Your AI advisor learns and suggests a plan each week."
    )
    print(
        f"You sell a single product. Unit production cost = ${config.unit_cost:.0f}. "
        f"Fixed weekly overhead = ${config.fixed_cost:.0f}."
    )
    print(
        f"You begin with {config.starting_inventory} units in inventory "
        f"and ${config.starting_cash:,.0f} cash.\n"
    )


def _ask_number(input_fn: InputFn, prompt: str, current: float, cast: Callable[[str], float]) -> float:
    raw = input_fn(prompt).strip()
    if not raw:
        return current
    try:
        return cast(raw)
    except ValueError:
        logger.warning(f"Could not parse {raw!r}; keeping {current}")
        return current


def prompt_decision(briefing: PeriodBriefing, config: TycoonGameConfig, input_fn: InputFn = input) -> Decision | None:
    """Return None to accept the advisor's plan, else the player's override."""
    answer = input_fn("Accept AI plan? (y/n) ").strip()
    if not answer or answer[0] not in "nN":
        return None
    bounds = config.override_bounds
    plan = briefing.suggestion
    price = _ask_number(
        input_fn, f"Enter your Price [${bounds.price[0]:.0f}..${bounds.price[1]:.0f}]: ", plan.price, float
    )
    ad_spend = _ask_number(
        input_fn,
        f"Enter your Ad Spend [${bounds.ad_spend[0]:.0f}..${bounds.ad_spend[1]:.0f}]: ",
        plan.ad_spend,
        float,
    )
    production = _ask_number(
        input_fn,
        f"Enter your Production [{bounds.production[0]}..{bounds.production[1]}]: ",
        plan.production,
        int,
    )
    return Decision.from_override(price, ad_spend, production, bounds)


def print_briefing(briefing: PeriodBriefing) -> None:
    print(f"\n==== Week {briefing.period} ====")
    print(f"Market event: {briefing.event.name}")
    print(f"AI suggests -> {briefing.suggestion}")
    print("  AI model weights: " + ", ".join(f"{k}={v:.3f}" for k, v in briefing.model.items()))


def print_outcome(outcome: PeriodOutcome) -> None:
    record = outcome.record
    print("\n-- Results --")
    print(f"Sold: {record.sold} units | Revenue: ${record.revenue:.2f}")
    print(f"Costs: ${record.cost:.2f} | Profit: ${record.profit:.2f}")
    print(f"End Inventory: {record.inventory_end} | Cash: ${record.cash_after:.2f}")
    print(
        f"Market baseline (hidden true): {record.hidden_base_demand:.2f} "
        f"| Your inferred proxy: {outcome.proxy:.2f}"
    )
    if outcome.bankrupt:
        print("\nYou ran out of cash. Game over early.")


def print_summary(sim: TycoonSimulation) -> None:
    summary = sim.company.summary()
    print("\n================ SUMMARY ================")
    print(f"Total Profit: ${summary['total_profit']:.2f} | Total Units Sold: {summary['total_units_sold']}")
    print(f"Final Cash: ${summary['final_cash']:.2f} | Final Inventory: {summary['final_inventory']}")
    print("Thanks for playing AI Tycoon!")


def play(config: TycoonGameConfig, auto: bool = False, input_fn: InputFn = input) -> TycoonSimulation:
    """Run one game at the console. ``auto`` accepts every suggestion."""
    sim = TycoonSimulation(config)
    print_intro(config)
    while not sim.is_over:
        briefing = sim.begin_period()
        print_briefing(briefing)
        override = None if auto else prompt_decision(briefing, config, input_fn)
        print_outcome(sim.resolve_period(briefing, override))
    print_summary(sim)
    return sim


def demonstrate_ai_tycoon(config: TycoonGameConfig | None = None) -> dict:
    """
    Play a full game accepting every suggestion, without console output.
    Returns a dictionary with results and artifacts for further use or display.
    """
    config = config or TycoonGameConfig()
    logger.info("--- Starting AI Tycoon Demonstration ---")
    sim = TycoonSimulation(config)
    outcomes = sim.run()
    results = {
        "outcomes": outcomes,
        "history": sim.company.history_frame(),
        "weights": sim.advisor.weights_frame(),
        "summary": sim.company.summary(),
        "simulation": sim,
    }
    logger.info("--- AI Tycoon Demonstration Complete ---")
    return results


def build_config(argv: list[str] | None = None) -> tuple[TycoonGameConfig, bool]:
    load_project_dotenv()
    parser = argparse.ArgumentParser(description="AI Tycoon - The Business Brain")
    parser.add_argument("--seed", type=int, default=env_int("TYCOON_SEED", 12345), help="RNG seed")
    parser.add_argument(
        "--periods", type=int, default=env_int("TYCOON_PERIODS", 12), help="Number of weeks to play"
    )
    parser.add_argument("--auto", action="store_true", help="Accept every AI suggestion")
    args = parser.parse_args(argv)
    return TycoonGameConfig(seed=args.seed, total_periods=args.periods), args.auto


def main(argv: list[str] | None = None, input_fn: InputFn = input) -> int:
    config, auto = build_config(argv)
    try:
        play(config, auto=auto, input_fn=input_fn)
    except (EOFError, KeyboardInterrupt):
        print("\nGame aborted.")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
