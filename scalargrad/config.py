"""
Training configuration for scalargrad.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class TrainConfig:
    """
    Hyperparameters for the gradient-descent training loop.

    Attributes:
        steps: Number of full-batch gradient descent iterations
        learning_rate: SGD step size
        layer_sizes: Output size of every MLP layer (the input size comes from the data)
        seed: Seed for parameter initialization, None for a random start
        log_every: Log the loss every this many steps
        progress: Draw a console progress bar while training
    """
    steps: int = 20000
    learning_rate: float = 0.01
    layer_sizes: List[int] = field(default_factory=lambda: [4, 4, 1])
    seed: Optional[int] = None
    log_every: int = 1000
    progress: bool = True

    def __post_init__(self):
        if self.steps <= 0:
            raise ValueError(f"steps must be positive, got {self.steps}")
        if self.learning_rate <= 0:
            raise ValueError(f"learning_rate must be positive, got {self.learning_rate}")
        if self.log_every <= 0:
            raise ValueError(f"log_every must be positive, got {self.log_every}")
        if not self.layer_sizes or any(n <= 0 for n in self.layer_sizes):
            raise ValueError(f"layer_sizes must be non-empty and positive, got {self.layer_sizes}")

    @classmethod
    def from_args(cls, args):
        """Build a config from an argparse namespace."""
        return cls(
            steps=args.steps,
            learning_rate=args.lr,
            layer_sizes=list(args.layers),
            seed=args.seed,
            log_every=args.log_every,
            progress=not args.no_progress,
        )
