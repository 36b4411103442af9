#!/usr/bin/env python3
"""
Quick Start - Minimal example to get started with Perceptron Lab.

Run this script to see a unit learn OR, fail on XOR, and a small network
put XOR back together.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from perceptron_lab.core.network import Network
from perceptron_lab.core.unit import Unit
from perceptron_lab.datasets.toy import get_dataset

print("Perceptron Lab - Quick Start")
print("="*40)

# A single unit with two weights, both starting at the threshold
unit = Unit(2)
print(f"\nCreated: {unit}")

data = get_dataset('or_margin')
print(f"Dataset: OR with margin ({len(data)} records)")

print("\nTraining...")
result = unit.train(data, learning_rate=0.1, err_max=0.3, verbose=True)
print(f"Result: {result.status.value} after {result.epochs} epochs")
print(f"Trained: {unit}")

# XOR is out of reach for one unit
xor_unit = Unit(2)
result = xor_unit.train(get_dataset('xor'), learning_rate=0.1, err_max=0.05)
print(f"\nXOR on a single unit: {result.status.value}")

# A 2x2 network learns it from three separately trained units
network = Network(2, 2)
network[0][0].train(get_dataset('a_and_not_b'), learning_rate=0.5, err_max=0.1)
network[0][1].train(get_dataset('b_and_not_a'), learning_rate=0.5, err_max=0.1)
network[1][0].train(get_dataset('or_of_exclusive'), learning_rate=0.5, err_max=0.1)

print("\nXOR through the network:")
for a, b in [(0, 0), (0, 1), (1, 0), (1, 1)]:
    decision = network.decide([a, b, a, b], hidden_decisions=True)
    print(f"  {a} xor {b} -> {decision}")

print("\nTry `python -m perceptron_lab network --verbose` for more!")
