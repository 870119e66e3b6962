import math
from enum import Enum

from .errors import ConfigurationError


def relu(x):
    return max(0, x)

def relu_derivative(x):
    """Derivative of ReLU: 1 if x > 0, else 0"""
    return 1 if x > 0 else 0

def sigmoid(x):
    # exp(-x) overflows for large negative x, so branch on the sign
    if x >= 0:
        return 1 / (1 + math.exp(-x))
    e = math.exp(x)
    return e / (1 + e)

def sigmoid_derivative(x):
    """Derivative of sigmoid: sigmoid(x) * (1 - sigmoid(x))"""
    sig = sigmoid(x)
    return sig * (1 - sig)

def tanh(x):
    return math.tanh(x)

def tanh_derivative(x):
    t = math.tanh(x)
    return 1 - t * t

def linear(x):
    return x

def linear_derivative(x):
    return 1


class Activator(Enum):
    """Supported activation functions, each paired with its derivative."""

    RELU = ("relu", relu, relu_derivative)
    SIGMOID = ("sigmoid", sigmoid, sigmoid_derivative)
    TANH = ("tanh", tanh, tanh_derivative)
    LINEAR = ("linear", linear, linear_derivative)

    def __init__(self, label, function, derivative):
        self.label = label
        self.function = function
        self.derivative = derivative

    def __call__(self, x):
        return self.function(x)

    @classmethod
    def resolve(cls, value):
        """Turn an Activator or a case-insensitive name like "ReLU" into an Activator."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.label == value.strip().lower():
                    return member
        names = ", ".join(member.label for member in cls)
        raise ConfigurationError(f"unknown activator {value!r}, expected one of: {names}")
