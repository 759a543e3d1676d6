import logging

import numpy as np

from backprop.Config import Config

logger = logging.getLogger(__name__)

rng = np.random.default_rng(Config.seed)


class Initializer:
    """
    Strategy that (re)seeds biases of a layer and weights of a connector
    before a new training run.
    """

    def initialize(self, layer) -> None:
        raise NotImplementedError

    def initialize_connector(self, connector) -> None:
        raise NotImplementedError


class ConstantInitializer(Initializer):

    def __init__(self, value: float = Config.constant_value):
        self.value = float(value)

    def initialize(self, layer) -> None:
        for neuron in layer:
            neuron.bias = self.value

    def initialize_connector(self, connector) -> None:
        for synapse in connector:
            synapse.weight = self.value


class ZeroInitializer(ConstantInitializer):

    def __init__(self):
        super().__init__(0.)


class RandomInitializer(Initializer):
    """Uniform values in [low, high)."""

    def __init__(self, low: float = Config.random_low, high: float = Config.random_high,
                 generator: np.random.Generator | None = None):
        if low > high:
            raise ValueError(f"Lower bound {low} is greater than upper bound {high}")
        self.low = low
        self.high = high
        self.rng = generator if generator is not None else rng

    def initialize(self, layer) -> None:
        for neuron, value in zip(layer, self.rng.uniform(self.low, self.high, size=len(layer))):
            neuron.bias = float(value)

    def initialize_connector(self, connector) -> None:
        for synapse, value in zip(connector, self.rng.uniform(self.low, self.high, size=len(connector))):
            synapse.weight = float(value)


class NguyenWidrowInitializer(Initializer):
    """
    Nguyen-Widrow initialization. Weights into a layer are drawn uniformly,
    then every neuron's incoming weight vector is rescaled to norm
    beta = 0.7 * hidden ** (1 / inputs); biases are drawn in [-beta, beta].

    :param output_range: width of the activation function output range
    """

    def __init__(self, output_range: float = Config.output_range,
                 generator: np.random.Generator | None = None):
        if output_range <= 0:
            raise ValueError(f"Output range must be positive, got {output_range}")
        self.output_range = output_range
        self.rng = generator if generator is not None else rng

    def _beta(self, layer) -> float:
        input_count = sum(len(connector.source_layer) for connector in layer.source_connectors)
        if input_count == 0:
            return 0.7
        return 0.7 * len(layer) ** (1. / input_count)

    def initialize(self, layer) -> None:
        beta = self._beta(layer)
        for neuron, value in zip(layer, self.rng.uniform(-beta, beta, size=len(layer))):
            neuron.bias = float(value)

    def initialize_connector(self, connector) -> None:
        beta = self._beta(connector.target_layer)
        # (target, source)
        weights = self.rng.uniform(-self.output_range / 2, self.output_range / 2,
                                   size=(len(connector.target_layer), len(connector.source_layer)))
        norms = np.linalg.norm(weights, axis=1, keepdims=True)
        norms[norms == 0] = 1.
        weights = beta * weights / norms
        for synapse, value in zip(connector, weights.ravel()):
            synapse.weight = float(value)
        logger.debug("Nguyen-Widrow beta=%.4f for %d synapses", beta, len(connector))
