import argparse
import json
import logging
from typing import List, Optional

from dicelab.analysis import InvalidInput
from dicelab.analysis.randomness import FairnessTests
from dicelab.analysis.sampler import MODES
from dicelab.config import settings
from dicelab.services.simulation_service import SimulationService

logger = logging.getLogger(__name__)


def run_simulation(
    modes: List[str],
    n_rolls: int,
    seed: Optional[int] = None,
    prior: Optional[List[float]] = None,
    with_tests: bool = False,
) -> dict:
    service = SimulationService(seed=seed)
    report = {}

    for mode in modes:
        session = service.session(mode)
        if prior is not None:
            session.set_prior(prior)
        session.roll(n_rolls)

        estimate = session.estimate(with_intervals=True)
        entry = estimate.model_dump()
        if with_tests:
            tester = FairnessTests(estimate.counts)
            entry["fairness_tests"] = tester.run_all_tests()
            entry["warnings"] = tester.get_warnings()
        report[mode] = entry

    return report


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Roll simulated dice and estimate their face distribution")
    parser.add_argument("--mode", choices=list(MODES) + ["both"], default="both", help="Die to roll")
    parser.add_argument("--rolls", type=int, default=100, help="Number of rolls per die")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--prior", type=float, nargs=6, default=None, metavar="P", help="Dirichlet prior per face")
    parser.add_argument("--tests", action="store_true", help="Include fairness tests against a uniform die")

    args = parser.parse_args(argv)
    if args.rolls < 0:
        parser.error("--rolls must be >= 0")

    logging.basicConfig(level=settings.log_level)
    modes = list(MODES) if args.mode == "both" else [args.mode]
    logger.info("Simulating %d rolls for %s", args.rolls, ", ".join(modes))

    try:
        report = run_simulation(modes, args.rolls, seed=args.seed, prior=args.prior, with_tests=args.tests)
    except InvalidInput as exc:
        parser.error(str(exc))
    print(json.dumps(report, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
