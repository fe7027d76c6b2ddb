"""MetricsBundle: every accumulator of one space, driven in lock-step."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .abc import AbcStats
from .cognitive import CognitiveStats, NestingContext
from .common import Visit
from .cyclomatic import CyclomaticStats
from .exit import ExitStats
from .halstead import HalsteadStats
from .loc import LocStats
from .mi import MiStats
from .nargs import NArgsStats
from .nom import NomStats
from .npa import NpaStats
from .npm import NpmStats
from .wmc import WmcStats, is_method

if TYPE_CHECKING:
    from ..spaces import Space


class MetricsBundle:
    """One accumulator per metric family.

    ``compute`` runs for every node visited while this space is the top of
    the builder's stack; ``finalize`` seals the space when the traversal
    leaves it; ``merge`` folds a sealed child into its parent.
    """

    __slots__ = (
        "cognitive",
        "cyclomatic",
        "halstead",
        "loc",
        "nargs",
        "nom",
        "exit",
        "abc",
        "npa",
        "npm",
        "mi",
        "wmc",
    )

    def __init__(self) -> None:
        self.cognitive = CognitiveStats()
        self.cyclomatic = CyclomaticStats()
        self.halstead = HalsteadStats()
        self.loc = LocStats()
        self.nargs = NArgsStats()
        self.nom = NomStats()
        self.exit = ExitStats()
        self.abc = AbcStats()
        self.npa = NpaStats()
        self.npm = NpmStats()
        self.mi = MiStats()
        self.wmc = WmcStats()

    def compute(self, visit: Visit, ctx: NestingContext) -> NestingContext:
        ctx = self.cognitive.compute(visit, ctx)
        self.cyclomatic.compute(visit)
        self.halstead.compute(visit)
        self.loc.compute(visit)
        self.nargs.compute(visit)
        self.nom.compute(visit)
        self.exit.compute(visit)
        self.abc.compute(visit)
        self.npa.compute(visit)
        self.npm.compute(visit)
        return ctx

    def finalize(self, space: Space, empty: bool = False) -> None:
        self.cognitive.finalize(space)
        self.cyclomatic.finalize(space)
        self.exit.finalize(space)
        self.nargs.finalize(space)
        self.loc.finalize(space, empty=empty)
        self.wmc.finalize(space)
        self.mi.finalize(self.halstead, self.cyclomatic, self.loc)

    def merge(self, child: Space, parent: Space) -> None:
        other = child.metrics
        if is_method(child, parent):
            self.wmc.add_method(other.cyclomatic)
        self.cognitive.merge(other.cognitive)
        self.cyclomatic.merge(other.cyclomatic)
        self.halstead.merge(other.halstead)
        self.loc.merge(other.loc)
        self.nargs.merge(other.nargs)
        self.nom.merge(other.nom)
        self.exit.merge(other.exit)
        self.abc.merge(other.abc)
        self.npa.merge(other.npa)
        self.npm.merge(other.npm)
        self.wmc.merge(other.wmc)

    def to_dict(self) -> dict[str, Any]:
        return {
            "cognitive": self.cognitive.to_dict(),
            "cyclomatic": self.cyclomatic.to_dict(),
            "halstead": self.halstead.to_dict(),
            "loc": self.loc.to_dict(),
            "nargs": self.nargs.to_dict(),
            "nom": self.nom.to_dict(),
            "exit": self.exit.to_dict(),
            "abc": self.abc.to_dict(),
            "npa": self.npa.to_dict(),
            "npm": self.npm.to_dict(),
            "mi": self.mi.to_dict(),
            "wmc": self.wmc.to_dict(),
        }
