import math
import random

from .errors import ConfigurationError


def validate_topology(topology):
    """Return the topology as a tuple of ints, or raise ConfigurationError."""
    try:
        sizes = tuple(topology)
    except TypeError:
        raise ConfigurationError(f"topology must be a sequence of layer widths, got {topology!r}") from None

    if len(sizes) < 2:
        raise ConfigurationError(f"topology needs an input width and at least one layer, got {list(sizes)}")
    for size in sizes:
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise ConfigurationError(f"layer widths must be positive integers, got {list(sizes)}")
    return sizes


def initialize_neuron_weights(fan_in, fan_out, rng=random):
    # initial params for ReLU/sigmoid alike: Glorot uniform, bias starts at 0
    a = math.sqrt(6 / (fan_in + fan_out))
    weights = [0.0]
    for _ in range(fan_in):
        weights.append((rng.random() * 2 - 1) * a)
    return weights


def initialize_layer_weights(layer1, layer2, rng=random):
    """Weight vectors for a layer of `layer2` neurons fed by `layer1` inputs."""
    return [initialize_neuron_weights(layer1, layer2, rng) for _ in range(layer2)]
