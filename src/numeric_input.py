import sys
import logging
from collections import deque


class NumericSource:
    """Sorgente di numeri reali letti uno alla volta fino all'esaurimento."""

    def has_more(self):
        raise NotImplementedError

    def read_double(self):
        raise NotImplementedError

    def __iter__(self):
        while self.has_more():
            yield self.read_double()


class TokenSource(NumericSource):
    """Legge token separati da spazi da uno stream di testo (stdin di default)."""

    def __init__(self, stream=None):
        self._stream = stream if stream is not None else sys.stdin
        self._tokens = deque()
        self._exhausted = False

    def _fill(self):
        # Legge righe finché non trova almeno un token o lo stream finisce
        while not self._tokens and not self._exhausted:
            line = self._stream.readline()
            if line == "":
                self._exhausted = True
            else:
                self._tokens.extend(line.split())
        return len(self._tokens) > 0

    def has_more(self):
        return self._fill()

    def read_double(self):
        if not self._fill():
            raise EOFError("Tentativo di leggere un double ma non ci sono più token disponibili")
        token = self._tokens.popleft()
        try:
            value = float(token)
        except ValueError as err:
            raise ValueError(f"Tentativo di leggere un double ma il token successivo è '{token}'") from err
        logging.debug(f"Letto valore: {value}")
        return value


class SequenceSource(NumericSource):
    """Sorgente in memoria su un qualsiasi iterabile di numeri."""

    _END = object()

    def __init__(self, values):
        self._it = iter(values)
        self._next = next(self._it, SequenceSource._END)

    def has_more(self):
        return self._next is not SequenceSource._END

    def read_double(self):
        if self._next is SequenceSource._END:
            raise EOFError("Sequenza esaurita")
        value = float(self._next)
        self._next = next(self._it, SequenceSource._END)
        return value


def as_source(obj):
    if hasattr(obj, "has_more") and hasattr(obj, "read_double"):
        return obj
    return SequenceSource(obj)
