import gc
import unittest

import numpy as np

from backprop.Connector import Connector
from backprop.TestLayers import SigmoidLayer


class TestActivationNeuron(unittest.TestCase):

    def setUp(self):
        self.source = SigmoidLayer(2)
        self.target = SigmoidLayer(1)
        self.connector = Connector(self.source, self.target)
        for synapse, weight in zip(self.connector, [0.5, -1.]):
            synapse.weight = weight

    def test_run_input_neuron(self):
        neuron = self.source[0]
        neuron.input = 0.
        neuron.run()
        self.assertAlmostEqual(neuron.output, 0.5)

    def test_run(self):
        self.source[0].output = 1.
        self.source[1].output = 0.25
        neuron = self.target[0]
        neuron.bias = 0.1

        neuron.run()

        self.assertAlmostEqual(neuron.input, 0.1 + 0.5 * 1. - 1. * 0.25)
        self.assertAlmostEqual(neuron.output, 1 / (1 + np.exp(-0.35)))

    def test_evaluate_error(self):
        self.target[0].error = 0.2
        for neuron in self.source:
            neuron.output = 0.5

        self.source.evaluate_errors()

        np.testing.assert_allclose([neuron.error for neuron in self.source], [0.5 * 0.2 * 0.25, -1. * 0.2 * 0.25])

    def test_derivative_matches_activation(self):
        layer = SigmoidLayer(1)
        x, h = 0.3, 1e-6
        numeric = (layer.activate(x + h, 0.) - layer.activate(x - h, 0.)) / (2 * h)
        self.assertAlmostEqual(layer.derivative(x, layer.activate(x, 0.)), numeric, places=6)

    def test_learn(self):
        neuron = self.target[0]
        neuron.bias = 1.
        neuron.error = 0.5
        neuron.learn(0.1)
        self.assertAlmostEqual(neuron.bias, 1.05)

        self.target.use_fixed_bias_values = True
        self.target.learn(0.1)
        self.assertAlmostEqual(neuron.bias, 1.05)

    def test_parent_not_owned(self):
        layer = SigmoidLayer(1)
        neuron = layer[0]
        del layer
        gc.collect()
        with self.assertRaises(RuntimeError):
            neuron.parent


if __name__ == '__main__':
    unittest.main()
