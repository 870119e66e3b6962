"""
Finite-difference gradient checking.

Backpropagation with an output error of ``output - label`` yields the gradient
of the half squared error ``0.5 * sum((output - label) ** 2)`` for a single
example, before the 1/m scaling and the regularization term of the update.
The helpers here estimate that same gradient by nudging every weight in turn,
so the two can be compared while training.
"""

import logging

logger = logging.getLogger(__name__)


def squared_error(network, row, label):
    output = network.forward(row)
    diff = network.vec_delta(output, label)
    return 0.5 * sum(d * d for d in diff)


def numerical_gradients(network, row, label, epsilon=1e-5):
    """Central-difference estimate shaped [layer][neuron][weight].

    Weights are restored afterwards and the forward caches are refreshed for
    the unperturbed weights.
    """
    gradients = []
    for layer in network.layers:
        layer_grads = []
        for neuron in layer:
            neuron_grads = []
            for i in range(len(neuron.weights)):
                original = neuron.weights[i]
                neuron.weights[i] = original + epsilon
                plus = squared_error(network, row, label)
                neuron.weights[i] = original - epsilon
                minus = squared_error(network, row, label)
                neuron.weights[i] = original
                neuron_grads.append((plus - minus) / (2 * epsilon))
            layer_grads.append(neuron_grads)
        gradients.append(layer_grads)

    network.forward(row)
    return gradients


def max_relative_difference(a, b, floor=1e-4):
    """Largest |x - y| / max(|x| + |y|, floor) over two nested gradient lists."""
    worst = 0.0
    for layer_a, layer_b in zip(a, b, strict=True):
        for neuron_a, neuron_b in zip(layer_a, layer_b, strict=True):
            for x, y in zip(neuron_a, neuron_b, strict=True):
                diff = abs(x - y) / max(abs(x) + abs(y), floor)
                worst = max(worst, diff)
    return worst


class GradientChecker:
    """
    Callback for ``Network.train(gradient_checking=...)``.

    Training visits examples in order, so iteration i corresponds to example
    ``i % len(X)``. Every ``every``-th iteration the backprop gradient is
    compared with a numerical estimate; the differences are kept in
    ``self.differences`` as (iteration, difference) pairs.
    """

    def __init__(self, network, X, Y, tolerance=1e-4, epsilon=1e-5, every=1):
        self.network = network
        self.X = X
        self.Y = Y
        self.tolerance = tolerance
        self.epsilon = epsilon
        self.every = every
        self.differences = []

    def __call__(self, iteration, gradients):
        if iteration % self.every:
            return
        index = iteration % len(self.X)
        numeric = numerical_gradients(self.network, self.X[index], self.Y[index], self.epsilon)
        diff = max_relative_difference(gradients, numeric)
        self.differences.append((iteration, diff))
        if diff > self.tolerance:
            logger.warning("Gradient check failed at iteration %d: relative difference %.3g", iteration, diff)

    @property
    def worst(self):
        return max((diff for _, diff in self.differences), default=0.0)

    @property
    def passed(self):
        return self.worst <= self.tolerance
