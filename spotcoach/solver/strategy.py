"""Strategy representation for solved-tree lookups."""

from dataclasses import dataclass
from typing import NamedTuple, Optional, Sequence


@dataclass(frozen=True)
class HeroStrategy:
    """
    Hero's strategy at a single decision node.

    Action labels are whatever the solver wrote ('CHECK', 'BET 50.000000',
    ...). Probabilities are taken from the tree as-is; they are not
    renormalized or bounds-checked.
    """
    actions: tuple[str, ...]
    probs: tuple[float, ...]

    def __post_init__(self):
        if len(self.actions) != len(self.probs):
            raise ValueError(
                f"{len(self.actions)} actions for {len(self.probs)} probabilities"
            )

    @classmethod
    def from_vectors(
        cls,
        actions: Sequence[str],
        probs: Sequence[float],
    ) -> "HeroStrategy":
        """
        Pair action labels with a probability vector.

        Both are truncated to the shorter length. Without any labels,
        positional ones ('action #0', 'action #1', ...) are made up.
        """
        if actions:
            n = min(len(actions), len(probs))
            return cls(tuple(actions[:n]), tuple(probs[:n]))
        return cls(
            tuple(f"action #{i}" for i in range(len(probs))),
            tuple(probs),
        )

    def pairs(self) -> list[tuple[str, float]]:
        return list(zip(self.actions, self.probs))

    def get_action_probability(self, action: str) -> float:
        """Get probability of taking an action."""
        try:
            return self.probs[self.actions.index(action)]
        except ValueError:
            return 0.0

    def best_action(self) -> Optional[str]:
        """Most frequent action, or None for an empty strategy."""
        if not self.actions:
            return None
        return max(self.pairs(), key=lambda p: p[1])[0]

    def __len__(self) -> int:
        return len(self.actions)

    def __repr__(self) -> str:
        action_strs = [f"{a}: {p:.2f}" for a, p in self.pairs()]
        return f"HeroStrategy({{{', '.join(action_strs)}}})"


class StreetStrategies(NamedTuple):
    """The three hero decision points of one street."""
    oop: Optional[HeroStrategy] = None          # OOP first to act
    ip: Optional[HeroStrategy] = None           # IP after OOP checks
    oop_vs_bet: Optional[HeroStrategy] = None   # OOP after check, facing a bet

    @property
    def preferred(self) -> Optional[HeroStrategy]:
        """Single representative strategy: IP if known, else OOP."""
        return self.ip if self.ip is not None else self.oop

    @property
    def is_empty(self) -> bool:
        return self.oop is None and self.ip is None and self.oop_vs_bet is None
