"""Train a tiny network to map two input numbers onto a third."""

from __future__ import annotations

import argparse

from backprop import BackpropNetwork, NetworkConfig, RandomSource


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Train a 2-input network on a single input/output pair")
    parser.add_argument("--inputs", type=float, nargs=2, default=[0.1, 0.4])
    parser.add_argument("--target", type=float, default=0.7)
    parser.add_argument("--hidden", type=int, default=3)
    parser.add_argument("--steps", type=int, default=200)
    parser.add_argument("--lr", type=float, default=0.05)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--plot", type=str, default=None, help="Save the error curve to this file")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    config = NetworkConfig(
        input_count=2,
        hidden_count=args.hidden,
        output_count=1,
        learning_rate=args.lr,
        random_source=RandomSource.seeded(args.seed),
    )
    network = BackpropNetwork(config)
    desired = [args.target]

    errors = []
    for _ in range(args.steps):
        network.train_step(args.inputs, desired)
        errors.append(network.squared_error(args.inputs, desired))

    output = network.forward(args.inputs)
    print(f"Training with {args.steps} steps for: {desired} ->")
    print(f"Input: {args.inputs}")
    print(f"Output: {output}")
    if errors:
        print(f"Squared error: {errors[0]:.6g} -> {errors[-1]:.6g}")

    if args.plot:
        from backprop.visualization import plot_training_errors

        plot_training_errors(errors, args.plot)
        print(f"Saved error plot to {args.plot}")


if __name__ == "__main__":
    main()
