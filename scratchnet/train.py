import argparse
import logging
import random

from .config import NetworkConfig, TrainingConfig
from .errors import ConfigurationError
from .helpers import gen_grid_data, print_table, split_training_test
from .network import Network

logger = logging.getLogger(__name__)


def parse_topology(text):
    try:
        return [int(part) for part in text.split(",")]
    except ValueError:
        raise argparse.ArgumentTypeError(f"topology must be comma-separated integers, got {text!r}") from None


def build_parser():
    ap = argparse.ArgumentParser(description="Train a small network on the grid dataset and print its predictions.")
    ap.add_argument("--topology", type=parse_topology, default=[2, 4, 1], help="layer widths, input first (default: 2,4,1)")
    ap.add_argument("--hidden", default="sigmoid", help="hidden layer activator (default: sigmoid)")
    ap.add_argument("--output", default="sigmoid", help="output layer activator (default: sigmoid)")
    ap.add_argument("--regularization", type=float, default=0.0, help="L2 regularization lambda (default: 0)")
    ap.add_argument("--learning-rate", type=float, default=0.5, help="gradient descent step size (default: 0.5)")
    ap.add_argument("--epochs", type=int, default=2000, help="number of passes over the training set (default: 2000)")
    ap.add_argument("--grid-size", type=int, default=3, help="side of the square grid dataset (default: 3)")
    ap.add_argument("--train-fraction", type=float, default=1.0, help="share of rows used for training (default: 1.0)")
    ap.add_argument("--seed", type=int, default=None, help="seed for weights and shuffling")
    ap.add_argument("-v", "--verbose", action="store_true", help="log training progress")
    return ap


def main(argv=None):
    ap = build_parser()
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    topology = args.topology
    if topology[0] != 2 or topology[-1] != 1:
        ap.error(f"grid data needs 2 inputs and 1 output, got topology {topology}")

    rng = random.Random(args.seed)
    try:
        config = NetworkConfig.from_options({
            "hidden_activator": args.hidden,
            "output_activator": args.output,
            "regularization": args.regularization,
        })
        options = TrainingConfig(learning_rate=args.learning_rate, epochs=args.epochs)
        rows = gen_grid_data(args.grid_size)
        x_train, y_train, x_test, y_test = split_training_test(
            rows, args.train_fraction, shuffle_data=args.train_fraction < 1, rng=rng
        )
        net = Network(topology, config, seed=args.seed)
    except (ConfigurationError, ValueError) as exc:
        ap.error(str(exc))
    if not x_train:
        ap.error("training split is empty")
    if not x_test:
        x_test, y_test = x_train, y_train

    logger.info("Training %r on %d examples for %d epochs", net, len(x_train), options.epochs)
    net.train(x_train, y_train, options)

    table = []
    correct = 0
    for row, label in zip(x_test, y_test):
        prediction = net.forward(row)[0]
        predicted_label = 1 if prediction >= 0.5 else 0
        correct += predicted_label == label[0]
        table.append([row[0], row[1], label[0], prediction, predicted_label])

    print_table(["x", "y", "label", "output", "predicted"], table)
    print(f"Accuracy: {correct}/{len(x_test)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
