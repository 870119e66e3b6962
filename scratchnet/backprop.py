from .errors import NetworkError, ShapeMismatchError


def compute_gradients(network, delta_l):
    """
    Compute weight gradients for the example cached by the last forward pass.
    `delta_l` is the error at the output layer, usually output - label.
    Returns gradients shaped like the weights: [layer][neuron][weight],
    where index 0 of each neuron's list is the bias gradient.
    """
    layers = network.layers
    if len(delta_l) != len(layers[-1]):
        raise ShapeMismatchError(len(layers[-1]), len(delta_l), "output delta")
    for layer in layers:
        for neuron in layer:
            if neuron.last_input is None:
                raise NetworkError("backward called before forward")

    gradients = [None] * len(layers)

    # Output layer delta
    output_layer = layers[-1]
    activator = network.activators[-1]
    delta = []
    for j, neuron in enumerate(output_layer):
        delta.append(delta_l[j] * activator.derivative(neuron.last_pre_activation))
    gradients[-1] = neuron_gradients(output_layer, delta)

    # Hidden layers, last to first
    for layer_idx in range(len(layers) - 2, -1, -1):
        layer = layers[layer_idx]
        activator = network.activators[layer_idx]

        next_delta = delta
        next_layer = layers[layer_idx + 1]

        current_delta = []
        for j, neuron in enumerate(layer):
            # Sum over next layer neurons; weight j + 1 skips their bias
            sum_next = 0
            for k, next_neuron in enumerate(next_layer):
                sum_next += next_delta[k] * next_neuron.weights[j + 1]
            current_delta.append(sum_next * activator.derivative(neuron.last_pre_activation))

        delta = current_delta
        gradients[layer_idx] = neuron_gradients(layer, delta)

    return gradients


def neuron_gradients(layer, delta):
    """delta_j * augmented input of neuron j, for every neuron of the layer"""
    layer_grads = []
    for d, neuron in zip(delta, layer):
        layer_grads.append([d * x for x in neuron.last_input])
    return layer_grads


def update_weights(network, gradients, learning_rate, m=1):
    """Gradient descent step; bias weights (index 0) are not regularized"""
    lam = network.config.regularization
    for layer, layer_grads in zip(network.layers, gradients):
        for neuron, grads in zip(layer, layer_grads):
            weights = neuron.weights
            weights[0] -= learning_rate * (grads[0] / m)
            for i in range(1, len(weights)):
                weights[i] -= learning_rate * (grads[i] / m + lam / m * weights[i])
