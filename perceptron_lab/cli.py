"""
Command line demonstrations.

Usage:
    python -m perceptron_lab or          Single unit learns OR
    python -m perceptron_lab xor         Single unit fails on XOR
    python -m perceptron_lab network     Two-level network reproduces XOR
    python -m perceptron_lab optimizer   Learning rate search on the pattern set
    python -m perceptron_lab noise       Noise robustness of a trained OR unit
"""

import argparse
import numpy as np
from typing import List, Optional

from .analysis.generalization import noise_robustness
from .core.network import Network
from .core.training import TrainingResult
from .core.unit import Unit, WeightInit
from .datasets.toy import get_dataset

XOR_TABLE = [
    ((0.0, 0.0), False),
    ((0.0, 1.0), True),
    ((1.0, 0.0), True),
    ((1.0, 1.0), False),
]

# (learning_rate, err_max) per demo
DEFAULTS = {
    'or': (0.1, 0.3),
    'xor': (0.1, 0.05),
    'network': (0.5, 0.1),
    'optimizer': (None, 0.3),
    'noise': (0.1, 0.3),
}


def _init(args) -> WeightInit:
    if args.seed is not None:
        return WeightInit.seeded(args.seed)
    if args.random:
        return WeightInit.random()
    return WeightInit.fixed()


def _print_result(label: str, result: TrainingResult):
    print(f"{label}: {result.status.value} after {result.epochs} epochs "
          f"(learning_rate={result.learning_rate:.4f}, err_sum={result.err_sum:.4f})")


def _print_unit_table(unit: Unit, dataset):
    for record in dataset:
        raw_sum, decision = unit.response(record.input)
        print(f"  {record.input.tolist()} -> {raw_sum:.6f} | {decision} "
              f"(expected {record.expected > 0.5})")


def _plot(args, unit: Unit, dataset, result: TrainingResult):
    if not args.plot:
        return
    from .visualization.plots import plot_error_history, plot_decision_boundary, save_figure

    save_figure(plot_error_history(result), args.plot)
    print(f"Saved error history to {args.plot}")
    if unit.size == 2:
        boundary_path = args.plot.rsplit('.', 1)[0] + '_boundary.png'
        save_figure(plot_decision_boundary(unit, dataset), boundary_path)
        print(f"Saved decision boundary to {boundary_path}")


def demo_single(args, dataset_name: str):
    dataset = get_dataset(dataset_name)
    unit = Unit(dataset.input_length, init=_init(args), verbose=args.verbose)

    result = unit.train(dataset, args.learning_rate, args.err_max, verbose=args.verbose)
    _print_result(dataset_name.upper(), result)
    _print_unit_table(unit, dataset)
    _plot(args, unit, dataset, result)


def demo_network(args):
    network = Network(2, 2, init=_init(args), verbose=args.verbose)

    hidden_data = [get_dataset('a_and_not_b'), get_dataset('b_and_not_a')]
    for index, (unit, dataset) in enumerate(zip(network[0], hidden_data)):
        result = unit.train(dataset, args.learning_rate, args.err_max, verbose=args.verbose)
        _print_result(f"Hidden unit {index}", result)

    result = network[1][0].train(
        get_dataset('or_of_exclusive'), args.learning_rate, args.err_max, verbose=args.verbose
    )
    _print_result("Output unit", result)

    print("XOR through the network (hidden decisions | raw sums):")
    for (a, b), expected in XOR_TABLE:
        encoded = [a, b, a, b]
        decided = network.forward(encoded, hidden_decisions=True)[0]
        linear = network.forward(encoded)[0]
        print(f"  ({a:.0f}, {b:.0f}) -> {decided:.6f} | {linear:.6f} "
              f"(expected {expected})")


def demo_optimizer(args):
    dataset = get_dataset('patterns')
    unit = Unit(dataset.input_length, init=_init(args), verbose=args.verbose)

    result = unit.train_optimizer(
        dataset, (args.range_start, args.range_end), args.err_max, verbose=args.verbose
    )
    _print_result("Patterns", result)
    _print_unit_table(unit, dataset)
    _plot(args, unit, dataset, result)


def demo_noise(args):
    dataset = get_dataset('or_margin')
    unit = Unit(dataset.input_length, init=_init(args), verbose=args.verbose)
    result = unit.train(dataset, args.learning_rate, args.err_max, verbose=args.verbose)
    _print_result("OR", result)

    rng = np.random.default_rng(args.seed)
    levels = [0.0, 0.1, 0.2, 0.3, 0.5]
    print("Noise robustness (accuracy per noise level):")
    for level, acc in noise_robustness(unit, dataset, levels, n_trials=20, rng=rng).items():
        print(f"  {level:>4}: {acc * 100:.1f}%")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='perceptron_lab',
        description='Perceptron experiments: single units, XOR and small networks'
    )
    parser.add_argument('demo', choices=['or', 'xor', 'network', 'optimizer', 'noise'],
                        help='Demonstration to run')
    parser.add_argument('--learning-rate', type=float, default=None,
                        help='Learning rate (default depends on the demo)')
    parser.add_argument('--err-max', type=float, default=None,
                        help='Convergence margin for |err_sum| (default depends on the demo)')
    parser.add_argument('--range-start', type=float, default=0.005,
                        help='Lower end of the learning rate search (default: 0.005)')
    parser.add_argument('--range-end', type=float, default=0.3,
                        help='Upper end of the learning rate search (default: 0.3)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for random initial weights (default: fixed weights)')
    parser.add_argument('--random', action='store_true',
                        help='Unseeded random initial weights')
    parser.add_argument('--plot', type=str, default=None,
                        help='Save plots of the training run to this PNG path')
    parser.add_argument('--verbose', action='store_true',
                        help='Print per-epoch errors and search progress')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    learning_rate, err_max = DEFAULTS[args.demo]
    if args.learning_rate is None:
        args.learning_rate = learning_rate
    if args.err_max is None:
        args.err_max = err_max

    if args.demo == 'or':
        demo_single(args, 'or_margin')
    elif args.demo == 'xor':
        demo_single(args, 'xor')
    elif args.demo == 'network':
        demo_network(args)
    elif args.demo == 'optimizer':
        demo_optimizer(args)
    elif args.demo == 'noise':
        demo_noise(args)

    return 0
