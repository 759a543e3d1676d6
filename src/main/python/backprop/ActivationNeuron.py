import weakref


class ActivationNeuron:
    """
    Neuron of an activation layer. The layer owns the neuron, the neuron only
    keeps a weak reference back to it to reach the activation function.
    """
    input: float
    output: float
    error: float
    bias: float

    def __init__(self, parent):
        self._parent = weakref.ref(parent)
        self.input = 0.
        self.output = 0.
        self.error = 0.
        self.bias = 0.
        self.source_synapses = []
        self.target_synapses = []

    def __repr__(self):
        return f"ActivationNeuron(input={self.input:.4f}, output={self.output:.4f}, " \
               f"error={self.error:.4f}, bias={self.bias:.4f})"

    @property
    def parent(self):
        parent = self._parent()
        if parent is None:
            raise RuntimeError("Neuron outlived its layer")
        return parent

    def run(self) -> None:
        """
        Forward pass. Neurons without incoming synapses (input layer) keep the
        input that was set from outside.
        """
        if self.source_synapses:
            self.input = self.bias
            for synapse in self.source_synapses:
                self.input += synapse.contribution()
        self.output = self.parent.activate(self.input, self.output)

    def evaluate_error(self) -> None:
        # error from the downstream layer, which is already settled
        self.error = 0.
        for synapse in self.target_synapses:
            self.error += synapse.propagated_error()
        self.error *= self.parent.derivative(self.input, self.output)

    def learn(self, learning_rate: float) -> None:
        if not self.parent.use_fixed_bias_values:
            self.bias += learning_rate * self.error
