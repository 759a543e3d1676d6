import pickle
import unittest
from unittest import mock

import numpy as np

from backprop.Config import Config
from backprop.Initializers import ConstantInitializer
from backprop.NeuralNetwork import NeuralNetwork
from backprop.TestLayers import LinearLayer


def build_network():
    test = NeuralNetwork([LinearLayer(2), LinearLayer(2), LinearLayer(1)], ConstantInitializer(0.5))
    test.initialize()
    return test


class TestNeuralNetwork(unittest.TestCase):

    def test_init(self):
        test = build_network()
        self.assertEqual(len(test.connectors), 2)
        self.assertEqual(test.connectors[0].weights.shape, (2, 2))
        self.assertEqual(test.connectors[1].weights.shape, (1, 2))
        self.assertIs(test.input_layer.target_connectors[0], test.connectors[0])
        self.assertIs(test.output_layer.source_connectors[0], test.connectors[1])

    def test_init_empty(self):
        with self.assertRaises(ValueError):
            NeuralNetwork([])
        with self.assertRaises(ValueError):
            NeuralNetwork([object()])

    def test_run(self):
        test = build_network()
        result = test.run([1., 2.])
        np.testing.assert_allclose(test.layers[1].outputs, [2., 2.])
        np.testing.assert_allclose(result, [2.5])

    def test_run_wrong_input(self):
        with self.assertRaises(ValueError):
            build_network().run([1., 2., 3.])

    def test_backpropagate(self):
        test = build_network()
        test.run([1., 2.])

        result = test.backpropagate([3.])

        self.assertAlmostEqual(result, 0.25)
        self.assertAlmostEqual(test.output_layer[0].error, 0.5)
        np.testing.assert_allclose([neuron.error for neuron in test.layers[1]], [0.25, 0.25])
        np.testing.assert_array_equal([neuron.error for neuron in test.input_layer], [0., 0.])

    def test_mean_squared_error(self):
        test = build_network()
        x = np.array([[1., 2.], [0., 0.]])
        y = np.array([[3.], [0.5]])
        with mock.patch.object(Config, 'show_progress', False):
            self.assertAlmostEqual(test.mean_squared_error(x, y), 0.25)

    def test_pickle_not_supported(self):
        test = build_network()
        with self.assertRaises(TypeError):
            pickle.dumps(test)
        restored = pickle.loads(pickle.dumps(test.output_layer))
        np.testing.assert_array_equal([neuron.bias for neuron in restored], [0.5])

    def test_mean_squared_error_wrong_data(self):
        test = build_network()
        with self.assertRaises(ValueError):
            test.mean_squared_error([[1., 2.]], [])
        with self.assertRaises(ValueError):
            test.mean_squared_error([], [])


if __name__ == '__main__':
    unittest.main()
