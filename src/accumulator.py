import math
import logging

from numeric_input import TokenSource, as_source


class Accumulator:
    """
    Media, varianza campionaria e deviazione standard di uno stream di numeri
    reali, calcolate in un solo passaggio con il metodo di Welford.
    Tempo e memoria costanti per ogni valore: i dati non vengono salvati.
    """

    DECIMALS = 5  # Cifre decimali stampate dal main

    def __init__(self):
        self.n = 0
        self.mean = 0.0
        self.M2 = 0.0  # Varianza campionaria * (n-1)

    def update(self, x):
        self.n += 1
        delta = x - self.mean
        self.mean += delta / self.n
        self.M2 += (self.n - 1) / self.n * delta * delta

    observe = update

    def consume(self, source):
        for x in as_source(source):
            self.update(x)
        return self

    @property
    def count(self):
        return self.n

    @property
    def variance(self):
        # Non definita con meno di due valori: NaN, non un errore
        if self.n < 2:
            return float("nan")
        return self.M2 / (self.n - 1)

    @property
    def std_dev(self):
        return math.sqrt(self.variance)

    def describe(self):
        return f"n = {self.n}, mean = {self.mean}, stddev = {self.std_dev}"

    def __str__(self):
        return self.describe()


def main(stream=None):
    logging.basicConfig(level=logging.INFO, format='%(asctime)s[%(levelname)s] - %(message)s', datefmt='%H:%M:%S')

    stats = Accumulator().consume(TokenSource(stream))
    logging.info(f"Letti {stats.count} valori")
    if stats.count < 2:
        logging.warning("Meno di due valori: varianza e deviazione standard non definite")

    d = Accumulator.DECIMALS
    print(f"n      = {stats.count}")
    print(f"mean   = {stats.mean:.{d}f}")
    print(f"stddev = {stats.std_dev:.{d}f}")
    print(f"var    = {stats.variance:.{d}f}")
    print(stats)


if __name__ == "__main__":
    main()
