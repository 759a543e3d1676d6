import logging

import numpy as np
from tqdm import tqdm

from backprop.ActivationLayer import ActivationLayer
from backprop.Config import Config
from backprop.Connector import Connector

logger = logging.getLogger(__name__)


class NeuralNetwork:
    """
    Feed-forward chain of activation layers, fully connected one after another.
    Runs forward passes and assigns errors backwards; weight updates are left
    to the trainer.
    """
    layers: list[ActivationLayer]
    connectors: list[Connector]

    def __init__(self, layers: list[ActivationLayer], initializer=None):
        if len(layers) == 0:
            raise ValueError("Model is empty")
        for layer in layers:
            if not isinstance(layer, ActivationLayer):
                raise ValueError(f"Expected ActivationLayer, got {type(layer).__name__}")

        self.layers = list(layers)
        self.connectors = [Connector(source, target, initializer)
                           for source, target in zip(self.layers, self.layers[1:])]
        if initializer is not None:
            for layer in self.layers:
                if layer.initializer is None:
                    layer.initializer = initializer

    @property
    def input_layer(self) -> ActivationLayer:
        return self.layers[0]

    @property
    def output_layer(self) -> ActivationLayer:
        return self.layers[-1]

    def initialize(self) -> None:
        for layer in self.layers:
            layer.initialize()
        for connector in self.connectors:
            connector.initialize()

    def run(self, input_data) -> np.ndarray:
        """
        Forward pass
        :param input_data: one value per neuron of the input layer
        :return: outputs of the output layer
        """
        self.input_layer.set_input(input_data)
        for layer in self.layers:
            layer.run()
        return self.output_layer.outputs

    def backpropagate(self, expected_output) -> float:
        """
        Sets output errors, then evaluates hidden layer errors from the output
        side towards the input.
        :return: sum of squared output errors for the pattern
        """
        squared_error = self.output_layer.set_errors(expected_output)
        for layer in reversed(self.layers[1:-1]):
            layer.evaluate_errors()
        return squared_error

    def mean_squared_error(self, x, y) -> float:
        """
        Runs every pattern forward and backward and averages the summed
        squared errors over the pattern count.
        """
        if len(x) != len(y):
            raise ValueError(f"Got {len(x)} inputs and {len(y)} expected outputs")
        if len(x) == 0:
            raise ValueError("Dataset is empty")

        total = 0.
        for input_data, expected_output in tqdm(zip(x, y), total=len(x), disable=not Config.show_progress):
            self.run(input_data)
            total += self.backpropagate(expected_output)
        error = total / len(x)
        logger.info("Mean squared error over %d patterns: %.6f", len(x), error)
        return error
