from __future__ import annotations

import argparse
import logging
import pathlib
from dataclasses import replace
from typing import Sequence

from epidermis.io import load_simulation_config, save_census_csv, save_snapshot_csv
from epidermis.simulator import LineageSimulator


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run epidermis lineage-differentiation simulation.")
    parser.add_argument(
        "--config",
        default="config.yaml",
        help="Path to simulation YAML config (default: config.yaml)",
    )
    parser.add_argument(
        "--steps",
        type=int,
        default=None,
        help="Override the number of simulation steps from the config",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    return parser.parse_args(argv)


def _resolve_census_path(out_path: pathlib.Path, census_out_path: str | pathlib.Path | None) -> pathlib.Path:
    if census_out_path is not None:
        return pathlib.Path(census_out_path)
    suffix = out_path.suffix or ".csv"
    return out_path.with_name(out_path.stem + "_census" + suffix)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    sim_config = load_simulation_config(args.config)
    if args.steps is not None:
        sim_config = replace(sim_config, n_steps=args.steps)

    simulator = LineageSimulator(sim_config)
    print(f"Random seed {sim_config.random_seed}")
    simulator.seed()
    print(f"Stem cells created: {len(simulator.container)}")
    snapshots = simulator.run()
    print("Simulation completed successfully!")

    final = simulator.census[-1]
    print(
        f"Step {final['step']}: {final['n_cells']} cells "
        f"(stem {final['n_stem']}, TA {final['n_transit_amplifying']}, "
        f"differentiated {final['n_differentiated']}, retired {final['n_retired']})"
    )

    if sim_config.out_path is not None:
        out_path = pathlib.Path(sim_config.out_path)
        if snapshots:
            save_snapshot_csv(snapshots, out_path)
            print(f"Wrote {len(snapshots)} cells to {out_path}")
        census_path = _resolve_census_path(out_path, sim_config.census_out_path)
        save_census_csv(simulator.census, census_path)
        print(f"Wrote census to {census_path}")
    elif sim_config.census_out_path is not None:
        save_census_csv(simulator.census, sim_config.census_out_path)
        print(f"Wrote census to {sim_config.census_out_path}")


if __name__ == "__main__":
    main()
