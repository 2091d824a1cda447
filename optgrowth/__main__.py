# -*- coding: utf-8 -*-
"""
Command-line interface: solve the growth model by VFI and compare the result
with the closed form.

Example:
    $ python -m optgrowth
    $ python -m optgrowth --nk 300 --tol 1e-8 --plot
    $ python -m optgrowth --config params.json --key baseline
"""

import argparse
import dataclasses
import logging
import sys

from optgrowth.diagnostics import (
    closed_form_steady_state,
    find_steady_state,
    sup_norm_error,
)
from optgrowth.exceptions import OptGrowthError
from optgrowth.model import LogGrowthModel, load_model, make_model
from optgrowth.vfi import solve_optgrowth

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="optgrowth",
        description="Solve the log-utility optimal growth model via VFI",
    )
    parser.add_argument('--config', type=str, default=None,
                        help="JSON file with model parameters.")
    parser.add_argument('--key', type=str, default=None,
                        help="Top-level key of the parameters in --config.")
    parser.add_argument('--alpha', type=float, default=None, help="Capital share.")
    parser.add_argument('--beta', type=float, default=None, help="Discount factor.")
    parser.add_argument('--kmin', type=float, default=None, help="Smallest grid point.")
    parser.add_argument('--kmax', type=float, default=None, help="Largest grid point.")
    parser.add_argument('--nk', type=int, default=None, help="Number of grid points.")
    parser.add_argument('--tol', type=float, default=1e-6,
                        help="Sup-norm convergence tolerance.")
    parser.add_argument('--max-iter', type=int, default=500,
                        help="Maximum number of Bellman iterations.")
    parser.add_argument('--strict', action='store_true',
                        help="Fail if the iteration budget is exhausted.")
    parser.add_argument('--plot', action='store_true',
                        help="Plot value and policy functions against the closed form.")
    parser.add_argument('--verbose', '-v', action='store_true',
                        help="Log progress every 50 iterations.")
    return parser


def model_from_args(args):
    if args.config is not None:
        model = load_model(args.config, args.key)
    else:
        model = LogGrowthModel()

    overrides = {
        'α': args.alpha, 'β': args.beta,
        'kmin': args.kmin, 'kmax': args.kmax, 'nk': args.nk,
    }
    params = {f.name: getattr(model, f.name)
              for f in dataclasses.fields(model) if f.init}
    params.update({k: v for k, v in overrides.items() if v is not None})
    return make_model(**params)


def main(argv=None):
    """Main entry point. Returns the process exit status."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    try:
        model = model_from_args(args)
        result = solve_optgrowth(model, tol=args.tol, max_iter=args.max_iter,
                                 strict=args.strict)
    except OptGrowthError as e:
        logger.error("Solver failed: %s", e)
        return 1

    _, k_ss = find_steady_state(result.grid, result.kprime)
    print(model)
    print(f"Iterations: {result.iterations}  converged: {result.converged}  "
          f"distance: {result.distance:.3e}")
    print(f"Sup-norm error vs closed form: {sup_norm_error(model, result.v):.4f}")
    print(f"Steady state k: {k_ss:.4f} (closed form {closed_form_steady_state(model):.4f})")

    if args.plot:
        import matplotlib.pyplot as plt
        from optgrowth.plotting import plot_policy_function, plot_value_function

        plot_value_function(model, result)
        plot_policy_function(model, result)
        plt.show()

    return 0


if __name__ == "__main__":
    sys.exit(main())
