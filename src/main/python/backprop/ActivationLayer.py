import logging
from abc import ABC, abstractmethod

import numpy as np

from backprop.ActivationNeuron import ActivationNeuron
from backprop.Layer import Layer

logger = logging.getLogger(__name__)

USE_FIXED_BIAS_VALUES = "useFixedBiasValues"
BIAS_VALUES = "biasValues"


class ActivationLayer(Layer, ABC):
    """
    Layer of activation neurons sharing one activation function.

    Concrete layers supply the ``activate``/``derivative`` pair. The layer
    computes output errors against an expected vector, fans error evaluation
    out to its neurons and stores whether biases are trainable.
    """
    use_fixed_bias_values: bool

    def __init__(self, neuron_count: int):
        super().__init__(neuron_count)
        self.use_fixed_bias_values = False
        for i in range(len(self.neurons)):
            self.neurons[i] = ActivationNeuron(self)
        logger.debug("Created %s with %d neurons", type(self).__name__, len(self.neurons))

    @classmethod
    def from_object_data(cls, data: dict) -> 'ActivationLayer':
        """
        Rebuilds a layer from the record produced by ``get_object_data``.
        The neuron count is taken from the number of bias values.
        """
        layer = cls.__new__(cls)
        layer.__setstate__(data)
        return layer

    def get_object_data(self) -> dict:
        """
        Only the flag and the biases are kept; input, output and error are
        recomputed on every pass.
        """
        return {
            USE_FIXED_BIAS_VALUES: self.use_fixed_bias_values,
            BIAS_VALUES: np.array([neuron.bias for neuron in self.neurons], dtype=np.float64),
        }

    def __getstate__(self) -> dict:
        return self.get_object_data()

    def __setstate__(self, state: dict) -> None:
        if not isinstance(state, dict):
            raise ValueError(f"Layer data must be a dict, got {type(state).__name__}")
        for key in (USE_FIXED_BIAS_VALUES, BIAS_VALUES):
            if state.get(key) is None:
                raise ValueError(f"Layer data has no '{key}'")
        bias_values = np.asarray(state[BIAS_VALUES], dtype=np.float64)
        if bias_values.ndim != 1:
            raise ValueError(f"'{BIAS_VALUES}' must be one-dimensional, got shape {bias_values.shape}")

        Layer.__init__(self, bias_values.shape[0])
        self.use_fixed_bias_values = bool(state[USE_FIXED_BIAS_VALUES])
        for i, bias in enumerate(bias_values):
            self.neurons[i] = ActivationNeuron(self)
            self.neurons[i].bias = float(bias)
        logger.debug("Restored %s with %d neurons", type(self).__name__, len(self.neurons))

    def initialize(self) -> None:
        """Prepares the layer for fresh training. Without an initializer nothing changes."""
        if self.initializer is not None:
            self.initializer.initialize(self)

    def set_errors(self, expected_output) -> float:
        """
        Sets every neuron error to ``expected - actual``.

        :param expected_output: one expected value per neuron
        :return: sum of squared errors for this pattern (not divided by neuron count)
        """
        if expected_output is None:
            raise ValueError("Expected output must not be None")
        expected_output = np.asarray(expected_output, dtype=np.float64)
        if expected_output.ndim != 1 or expected_output.shape[0] != len(self.neurons):
            raise ValueError(f"Length of output array {expected_output.shape} should be same "
                             f"as neuron count {len(self.neurons)}")

        squared_error = 0.
        for neuron, expected in zip(self.neurons, expected_output):
            neuron.error = float(expected) - neuron.output
            squared_error += neuron.error * neuron.error
        return squared_error

    def evaluate_errors(self) -> None:
        for neuron in self.neurons:
            neuron.evaluate_error()

    @abstractmethod
    def activate(self, input: float, previous_output: float) -> float:
        """
        Activation function of every neuron in the layer.
        :param input: current neuron input, bias included
        :param previous_output: previous output of the neuron
        """
        raise NotImplementedError

    @abstractmethod
    def derivative(self, input: float, output: float) -> float:
        """
        Derivative of ``activate``, given the neuron input and its current output.
        Must agree with ``activate``; this is not checked.
        """
        raise NotImplementedError
