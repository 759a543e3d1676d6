import logging

import numpy as np

from backprop.Layer import Layer
from backprop.Synapse import Synapse

logger = logging.getLogger(__name__)


class Connector:
    """
    Full connection between two layers: every source neuron is linked to every
    target neuron. Synapses are stored in (target, source) index order.
    """
    synapses: list[Synapse]

    def __init__(self, source_layer: Layer, target_layer: Layer, initializer=None):
        if source_layer is target_layer:
            raise ValueError("A layer cannot be connected to itself")
        self.source_layer = source_layer
        self.target_layer = target_layer
        self.initializer = initializer

        self.synapses = [Synapse(source_neuron, target_neuron)
                         for target_neuron in target_layer
                         for source_neuron in source_layer]
        source_layer.target_connectors.append(self)
        target_layer.source_connectors.append(self)
        logger.debug("Connected %d -> %d neurons (%d synapses)",
                     len(source_layer), len(target_layer), len(self.synapses))

    def __len__(self) -> int:
        return len(self.synapses)

    def __iter__(self):
        return iter(self.synapses)

    @property
    def weights(self) -> np.ndarray:
        # weights.shape = (target, source)
        return np.array([synapse.weight for synapse in self.synapses],
                        dtype=np.float64).reshape(len(self.target_layer), len(self.source_layer))

    def initialize(self) -> None:
        if self.initializer is not None:
            self.initializer.initialize_connector(self)

    def __getstate__(self):
        raise TypeError("Connector cannot be pickled: synapses refer to neurons of live layers. "
                        "Persist layers with get_object_data and reconnect them")
