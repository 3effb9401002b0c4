import logging

import numpy as np

from numeric_input import TokenSource, as_source


class Averager:
    """Media aritmetica di una sequenza finita di numeri reali."""

    def __init__(self):
        self.sum = 0.0
        self.count = 0

    def run(self, source):
        source = as_source(source)
        while source.has_more():
            value = source.read_double()
            self.sum += value
            self.count += 1

        # Con zero valori 0.0 / 0 dà NaN, come nel comportamento originale
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.float64(self.sum) / self.count)


def main(stream=None):
    logging.basicConfig(level=logging.INFO, format='%(asctime)s[%(levelname)s] - %(message)s', datefmt='%H:%M:%S')

    averager = Averager()
    average = averager.run(TokenSource(stream))
    logging.info(f"Letti {averager.count} valori")
    if averager.count == 0:
        logging.warning("Nessun valore in input: la media non è definita")

    print(f"Average is {average}")


if __name__ == "__main__":
    main()
