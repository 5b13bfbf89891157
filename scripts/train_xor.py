"""Train a network on the truth table of a XOR gate."""

from __future__ import annotations

import argparse

from backprop import BackpropNetwork, NetworkConfig, RandomSource

# input vector, desired output vector, ...
XOR_TRAINING_DATA = [
    [0, 0], [0],
    [1, 0], [1],
    [0, 1], [1],
    [1, 1], [0],
]


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Train a XOR gate with randomized sampling")
    parser.add_argument("--hidden", type=int, default=2)
    parser.add_argument("--draws", type=int, default=8000)
    parser.add_argument("--steps-per-draw", type=int, default=10)
    parser.add_argument("--lr", type=float, default=0.05)
    parser.add_argument("--seed", type=int, default=1, help="Negative values use system entropy")
    parser.add_argument("--progress", action="store_true")
    parser.add_argument("--plot", type=str, default=None, help="Save the error curve to this file")
    return parser.parse_args()


def total_error(network: BackpropNetwork) -> float:
    return sum(
        network.squared_error(inputs, outputs)
        for inputs, outputs in zip(network.training_inputs, network.training_outputs)
    )


def main() -> None:
    args = parse_args()
    source = RandomSource.system_entropy() if args.seed < 0 else RandomSource.seeded(args.seed)
    config = NetworkConfig(
        input_count=2,
        hidden_count=args.hidden,
        output_count=1,
        learning_rate=args.lr,
        random_source=source,
    )
    network = BackpropNetwork(config)
    network.load_training_set(XOR_TRAINING_DATA)

    if args.plot:
        errors = []
        for _ in range(args.draws):
            network.train_random(1, args.steps_per_draw)
            errors.append(total_error(network))
    else:
        network.train_random(args.draws, args.steps_per_draw, progress=args.progress)

    print(f"Trained {args.draws} draws x {args.steps_per_draw} steps (lr={args.lr})")
    for inputs, outputs in zip(network.training_inputs, network.training_outputs):
        prediction = network.forward(inputs)[0]
        print(f"{inputs} -> {prediction:.4f} (desired {outputs[0]:.0f})")
    print(f"Total squared error: {total_error(network):.6g}")

    if args.plot:
        from backprop.visualization import plot_training_errors

        plot_training_errors(errors, args.plot)
        print(f"Saved error plot to {args.plot}")


if __name__ == "__main__":
    main()
