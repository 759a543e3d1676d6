import logging
from typing import TYPE_CHECKING

import numpy as np

from backprop.ActivationNeuron import ActivationNeuron

if TYPE_CHECKING:
    from backprop.Initializers import Initializer

logger = logging.getLogger(__name__)


class Layer:
    """
    Base class of layers: a fixed-size ordered set of neurons plus the
    connectors leading into and out of it.
    """
    neurons: list[ActivationNeuron]
    source_connectors: list
    target_connectors: list
    initializer: 'Initializer | None'

    def __init__(self, neuron_count: int):
        if isinstance(neuron_count, bool) or not isinstance(neuron_count, (int, np.integer)):
            raise ValueError(f"Neuron count must be an integer, got {type(neuron_count).__name__}")
        if neuron_count <= 0:
            raise ValueError(f"Neuron count must be positive, got {neuron_count}")

        self.neurons = [None] * int(neuron_count)
        self.source_connectors = []
        self.target_connectors = []
        self.initializer = None

    def __len__(self) -> int:
        return len(self.neurons)

    def __getitem__(self, index: int) -> ActivationNeuron:
        return self.neurons[index]

    def __iter__(self):
        return iter(self.neurons)

    @property
    def outputs(self) -> np.ndarray:
        return np.array([neuron.output for neuron in self.neurons], dtype=np.float64)

    def set_input(self, values) -> None:
        """
        Sets the input of every neuron. Used on the input layer only.
        :param values: one value per neuron
        """
        if values is None:
            raise ValueError("Input must not be None")
        values = np.asarray(values, dtype=np.float64).ravel()
        if values.shape[0] != len(self.neurons):
            raise ValueError(f"Input size {values.shape[0]} differs from neuron count {len(self.neurons)}")
        for neuron, value in zip(self.neurons, values):
            neuron.input = float(value)

    def run(self) -> None:
        for neuron in self.neurons:
            neuron.run()

    def learn(self, learning_rate: float) -> None:
        for neuron in self.neurons:
            neuron.learn(learning_rate)

    def initialize(self) -> None:
        raise NotImplementedError
