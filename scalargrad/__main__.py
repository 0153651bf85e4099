"""
Train a small tanh MLP on a four-sample toy dataset.

    python -m scalargrad --steps 2000 --seed 0
"""

import argparse
import logging
import sys

from scalargrad.config import TrainConfig
from scalargrad.nn import MLP
from scalargrad.train import fit

XS = [
    [2.0, 3.0, -1.0],
    [3.0, -1.0, 0.5],
    [0.5, 1.0, 1.0],
    [1.0, 1.0, -1.0],
]
YS = [0.0, -1.0, -1.0, 1.0]


def parse_args(argv=None):
    defaults = TrainConfig()
    parser = argparse.ArgumentParser(description="Train a scalar-autograd MLP on a toy dataset.")
    parser.add_argument("--steps", type=int, default=defaults.steps, help="gradient descent iterations")
    parser.add_argument("--lr", type=float, default=defaults.learning_rate, help="learning rate")
    parser.add_argument("--layers", type=int, nargs="+", default=defaults.layer_sizes,
                        help="output size of every layer, e.g. --layers 4 4 1")
    parser.add_argument("--seed", type=int, default=None, help="initialization seed")
    parser.add_argument("--log-every", type=int, default=defaults.log_every,
                        help="log the loss every N steps (with --verbose)")
    parser.add_argument("--no-progress", action="store_true", help="hide the progress bar")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )

    try:
        config = TrainConfig.from_args(args)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    model = MLP(len(XS[0]), config.layer_sizes, seed=config.seed)
    result = fit(model, XS, YS, config)

    print(f"Loss = \t{result.loss}")
    for j, y in enumerate(result.predictions):
        print(f"Y{j} = \t{y}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
