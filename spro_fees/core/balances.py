"""
Default balance map used when the caller does not supply its own factory.

Mirrors the host platform's createBalances container: an accumulator keyed by
token identifier with an add-amount operation.
"""

from typing import Dict, Iterator


class Balances:
    """Per-token amount accumulator"""

    def __init__(self):
        self._balances: Dict[str, float] = {}

    def add_token(self, token: str, amount) -> None:
        """Add amount to token, recording the key even when amount is zero"""
        self._balances[token] = self._balances.get(token, 0.0) + float(amount)

    def get_balances(self) -> Dict[str, float]:
        return dict(self._balances)

    def __getitem__(self, token: str) -> float:
        return self._balances[token]

    def __contains__(self, token: object) -> bool:
        return token in self._balances

    def __len__(self) -> int:
        return len(self._balances)

    def __iter__(self) -> Iterator[str]:
        return iter(self._balances)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Balances):
            return NotImplemented
        return self._balances == other._balances

    def __repr__(self) -> str:
        return f"Balances({self._balances!r})"
