"""
Feed-forward network built from plain lists of neurons.

Every neuron keeps its weights as a list where index 0 is the bias weight and
index i multiplies input feature i-1. A forward pass therefore prefixes every
layer input with a constant 1 ("augmented input") and takes one dot product.
"""

import logging
import math
import random
from collections.abc import Sequence

from . import backprop
from .config import DEFAULT_LEARNING_RATE, NetworkConfig, TrainingConfig
from .errors import ShapeMismatchError
from .initialize_network import initialize_layer_weights, validate_topology

logger = logging.getLogger(__name__)


def _safe_log(x):
    # log terms that would be non-finite are neutralized to 0
    if not math.isfinite(x) or x <= 0:
        return 0.0
    return math.log(x)


class Neuron:
    def __init__(self, weights):
        self.weights = weights
        self.last_input = None
        self.last_pre_activation = None
        self.last_output = None

    def __repr__(self):
        return f"Neuron(weights={self.weights})"

    def evaluate(self, inputs):
        """Dot product of the weights with an augmented input [1, x0, x1, ...]."""
        if len(inputs) != len(self.weights):
            raise ShapeMismatchError(len(self.weights), len(inputs), "neuron input")
        z = 0
        for w, x in zip(self.weights, inputs):
            z += w * x
        return z


class Network:
    def __init__(self, topology, config=None, seed=None):
        """
        topology: list of integers, e.g. [2, 4, 4, 1]
        means: 2 inputs -> 4 neurons -> 4 neurons -> 1 output
        config: NetworkConfig, a mapping of options, or None for defaults
        seed: seeds the weight initialization for reproducible networks
        """
        self.topology = validate_topology(topology)
        self.config = NetworkConfig.from_options(config)

        rng = random.Random(seed)
        self.layers = []
        for i in range(1, len(self.topology)):
            layer_weights = initialize_layer_weights(self.topology[i - 1], self.topology[i], rng)
            self.layers.append([Neuron(weights) for weights in layer_weights])

        # resolved once, indexed by layer
        last = len(self.layers) - 1
        self.activators = [
            self.config.output_activator if i == last else self.config.hidden_activator
            for i in range(len(self.layers))
        ]

        logger.debug(
            "Built network %s (hidden=%s, output=%s, lambda=%s)",
            list(self.topology),
            self.config.hidden_activator.label,
            self.config.output_activator.label,
            self.config.regularization,
        )

    def __repr__(self):
        return f"Network(topology={list(self.topology)})"

    def forward(self, example):
        """Run one example through the network and return the output layer's values.

        `example` is a row of `topology[0]` features, optionally wrapped in a
        length-1 outer sequence. Each neuron caches its augmented input,
        pre-activation and output for the backward pass.
        """
        row = self._as_row(example)
        if len(row) != self.topology[0]:
            raise ShapeMismatchError(self.topology[0], len(row), "input row")

        inputs = list(row)
        for layer, activator in zip(self.layers, self.activators):
            augmented = [1] + inputs
            outputs = []
            for neuron in layer:
                z = neuron.evaluate(augmented)
                out = activator(z)
                neuron.last_input = list(augmented)
                neuron.last_pre_activation = z
                neuron.last_output = out
                outputs.append(out)
            inputs = outputs

        return inputs

    @staticmethod
    def _as_row(example):
        if (
            len(example) == 1
            and isinstance(example[0], Sequence)
            and not isinstance(example[0], (str, bytes))
        ):
            return example[0]
        return example

    def regularize(self, m):
        """L2 penalty lambda / (2m) * sum(w^2) over every non-bias weight."""
        if m < 1:
            raise ValueError(f"m must be at least 1, got {m}")
        lam = self.config.regularization
        if lam == 0:
            return 0.0

        total = 0
        for layer in self.layers:
            for neuron in layer:
                for w in neuron.weights[1:]:
                    total += w * w
        return lam / (2 * m) * total

    def _cross_entropy(self, label, output, m):
        if m < 1:
            raise ValueError(f"m must be at least 1, got {m}")
        if len(label) != len(output):
            raise ShapeMismatchError(len(label), len(output), "output")
        total = 0
        for y, y_hat in zip(label, output):
            # the second term is clamped to be non-negative
            total += y * _safe_log(y_hat) + (1 - y) * max(0, _safe_log(1 - y_hat))
        return -(1 / m) * total

    def cost(self, label, output, m):
        """Binary cross-entropy of one example plus the regularization term."""
        return self._cross_entropy(label, output, m) + self.regularize(m)

    @staticmethod
    def vec_delta(a, b):
        """Element-wise a - b."""
        if len(a) != len(b):
            raise ShapeMismatchError(len(a), len(b))
        return [x - y for x, y in zip(a, b)]

    def backward(self, delta_l, learning_rate=DEFAULT_LEARNING_RATE, m=1):
        """Backpropagate the output-layer error `delta_l` and update every weight in place.

        Gradients for all layers are computed from the current weights before
        any of them change. Uses the caches of the most recent `forward` call.
        """
        gradients = backprop.compute_gradients(self, delta_l)
        backprop.update_weights(self, gradients, learning_rate, m)

    def train(self, X, Y, options=None, **overrides):
        """Online gradient descent: one forward/backward step per example, in order.

        `options` is a TrainingConfig or a mapping with learning_rate, epochs,
        gradient_checking and log_every; keyword arguments override it.
        """
        opts = TrainingConfig.from_options(options, **overrides)
        if len(X) != len(Y):
            raise ShapeMismatchError(len(X), len(Y), "label collection")
        m = len(X)
        if m == 0:
            raise ValueError("train needs at least one example")

        iteration = 0
        for epoch in range(opts.epochs):
            logged = epoch % opts.log_every == 0 or epoch == opts.epochs - 1
            epoch_cost = 0
            for row, label in zip(X, Y):
                output = self.forward(row)
                delta_l = self.vec_delta(output, label)
                if logged:
                    epoch_cost += self._cross_entropy(label, output, m)

                gradients = backprop.compute_gradients(self, delta_l)
                if opts.gradient_checking is not None:
                    opts.gradient_checking(iteration, gradients)
                backprop.update_weights(self, gradients, opts.learning_rate, m)
                iteration += 1

            if logged:
                epoch_cost += self.regularize(m)
                logger.info("Epoch %d/%d, Cost: %.4f", epoch + 1, opts.epochs, epoch_cost)

    def snapshot_weights(self):
        """Deep copy of every weight, shaped [layer][neuron][weight]."""
        return [[list(neuron.weights) for neuron in layer] for layer in self.layers]

    def load_weights(self, snapshot):
        """Overwrite all weights from a snapshot with exactly this network's shape."""
        if len(snapshot) != len(self.layers):
            raise ShapeMismatchError(len(self.layers), len(snapshot), "layer count")
        for layer, layer_weights in zip(self.layers, snapshot):
            if len(layer_weights) != len(layer):
                raise ShapeMismatchError(len(layer), len(layer_weights), "layer width")
            for neuron, weights in zip(layer, layer_weights):
                if len(weights) != len(neuron.weights):
                    raise ShapeMismatchError(len(neuron.weights), len(weights), "weight vector")
        for layer, layer_weights in zip(self.layers, snapshot):
            for neuron, weights in zip(layer, layer_weights):
                neuron.weights = list(weights)
