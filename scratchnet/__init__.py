from .activations import Activator
from .config import NetworkConfig, TrainingConfig
from .errors import ConfigurationError, NetworkError, ShapeMismatchError
from .network import Network, Neuron

__all__ = [
    "Activator",
    "ConfigurationError",
    "Network",
    "NetworkConfig",
    "NetworkError",
    "Neuron",
    "ShapeMismatchError",
    "TrainingConfig",
]
