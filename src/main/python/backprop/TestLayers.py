import numpy as np

from backprop.ActivationLayer import ActivationLayer


class LinearLayer(ActivationLayer):

    def activate(self, input, previous_output):
        return input

    def derivative(self, input, output):
        return 1.


class SigmoidLayer(ActivationLayer):

    def activate(self, input, previous_output):
        return 1 / (1 + np.exp(-input))

    def derivative(self, input, output):
        return output * (1. - output)
