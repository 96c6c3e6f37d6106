from __future__ import annotations
import random
from typing import Dict, List, Type

from mastermind.engine import CODE_LENGTH, PALETTE, Code, Color, Feedback

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    id = "base"
    name = "Base"
    version = "0.0.0"

    # Harness only builds the consistent-candidate list for solvers that read it.
    uses_candidates = False

    def __init__(self):
        self.N: int = CODE_LENGTH
        self.palette: List[Color] = list(PALETTE)
        self.rng = random.Random()

    def reset(self, *, palette=PALETTE, N: int = CODE_LENGTH,
              seed: int | None = None) -> None:
        """Start a new round. Anything learned in the previous round is dropped."""
        self.palette = list(palette)
        self.N = int(N)
        if seed is not None:
            self.rng.seed(seed)

    def next_guess(self, state: dict) -> Code:
        raise NotImplementedError("Override in subclass")

    def observe(self, guess: Code, feedback: Feedback) -> None:
        """Called after every scored guess. Stateless solvers ignore it."""
