import pytest

from scratchnet.helpers import gen_grid_data, split_training_test
from scratchnet.network import Network


@pytest.fixture
def relu_net():
    """<1 : 1 : 1> ReLU network with weights [[1, 2], [3, 4]]."""
    net = Network([1, 1, 1], {"hidden_activator": "ReLU", "output_activator": "ReLU"})
    net.layers[0][0].weights = [1, 2]
    net.layers[1][0].weights = [3, 4]
    return net


@pytest.fixture
def grid_data():
    # 2x2 grid
    #
    # 1 | 1 | 1
    # --+---+--
    # 1 | 1 | 0
    # --+---+--
    # 1 | 0 | 0
    x_train, y_train, _, _ = split_training_test(gen_grid_data(3), 1.0)
    return x_train, y_train
