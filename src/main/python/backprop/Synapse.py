class Synapse:
    """Weighted link between a neuron and a neuron of the next layer."""
    weight: float

    def __init__(self, source_neuron, target_neuron, weight: float = 0.):
        self.source_neuron = source_neuron
        self.target_neuron = target_neuron
        self.weight = float(weight)
        source_neuron.target_synapses.append(self)
        target_neuron.source_synapses.append(self)

    def __repr__(self):
        return f"Synapse(w={self.weight:.4f})"

    def contribution(self) -> float:
        return self.weight * self.source_neuron.output

    def propagated_error(self) -> float:
        return self.weight * self.target_neuron.error
