"""
Full-batch gradient descent over an MLP built from scalar Values.
"""

import logging
import sys
from dataclasses import dataclass, field
from typing import List

from scalargrad.engine import Value

logger = logging.getLogger(__name__)


def sum_squared_error(ys, ypred):
    """Sum of (y - p)^2 over all samples, as a single Value."""
    loss = Value(0.0)
    for y, p in zip(ys, ypred):
        loss = loss + (y - p) ** 2
    return loss


def sgd_step(params, learning_rate):
    """Move every parameter against its gradient."""
    for p in params:
        p.data -= learning_rate * p.grad


class ProgressBar:
    """
    A one-line console progress bar, redrawn in place with a carriage return.

        Progress ||==========---------------||
    """

    def __init__(self, total, width=25, stream=None):
        self.total = total
        self.width = width
        self.stream = stream if stream is not None else sys.stdout

    def render(self, done):
        filled = int(done / self.total * self.width)
        return "Progress ||" + "=" * filled + "-" * (self.width - filled) + "||"

    def update(self, done):
        self.stream.write(self.render(done) + "\r")
        self.stream.flush()

    def close(self):
        self.stream.write("\n")
        self.stream.flush()


@dataclass
class TrainResult:
    loss: float
    predictions: List[float]
    history: List[float] = field(default_factory=list)


def fit(model, xs, ys, config, stream=None):
    """
    Train ``model`` on ``xs``/``ys`` by full-batch gradient descent.

    Each step runs the forward pass on every sample (taking the model's first
    output), builds the squared-error loss, zeroes the parameter gradients,
    backpropagates and applies one SGD update.

    Args:
        model: A Module whose call returns a list of Values
        xs: List of input samples
        ys: List of targets (numbers or Values), one per sample
        config: TrainConfig
        stream: Where to draw the progress bar (default: stdout)

    Returns:
        TrainResult with the final loss, predictions and per-step loss history
    """
    assert len(xs) == len(ys), f"got {len(xs)} samples but {len(ys)} targets"

    logger.info("training %r for %d steps, lr=%g", model, config.steps, config.learning_rate)
    params = model.parameters()
    bar = ProgressBar(config.steps, stream=stream) if config.progress else None

    history = []
    for step in range(config.steps):
        ypred = [model(x)[0] for x in xs]
        loss = sum_squared_error(ys, ypred)

        model.zero_grad()
        loss.backward()
        sgd_step(params, config.learning_rate)

        history.append(float(loss.data))
        if (step + 1) % config.log_every == 0:
            logger.debug("step %d loss %.6f", step + 1, loss.data)
        if bar is not None:
            bar.update(step + 1)

    if bar is not None:
        bar.close()

    logger.info("final loss %.6f", loss.data)
    return TrainResult(
        loss=float(loss.data),
        predictions=[float(p.data) for p in ypred],
        history=history,
    )
