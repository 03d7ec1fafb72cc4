"""Run settings and the enumerations they use."""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass, field

from gpgomea.boolean import And, Nand, Nor, Not, Or, Xor
from gpgomea.operators import Operator
from gpgomea.regression import (
    AnalyticLog01,
    AnalyticQuotient,
    AnalyticQuotient01,
    Cos,
    Exp,
    Log,
    Minus,
    Plus,
    ProtectedDivision,
    Sin,
    Square,
    SquareRoot,
    Times,
)


class TreeInitType(enum.Enum):
    """How random trees are initialized."""

    HH = "hh"
    RHH = "rhh"
    HEURISTIC = "heuristic"


class TreeInitShape(enum.Enum):
    """Shape of a randomly initialized tree."""

    FULL = "full"
    GROW = "grow"


class SemanticLibraryType(enum.Enum):
    """Source of the subtrees stored in a semantic library."""

    RANDOM_STATIC = "random_static"
    RANDOM_DYNAMIC = "random_dynamic"
    POPULATION = "population"


class FOSType(enum.Enum):
    """Kind of family of subsets used by GOMEA."""

    LINKAGE_TREE = "linkage_tree"
    RANDOM_TREE = "random_tree"
    UNIVARIATE = "univariate"


class GOMCoeffMutStrat(enum.Enum):
    """When coefficient mutation is applied during gene-pool optimal mixing."""

    WITHIN = "within"
    INTERLEAVED = "interleaved"
    AFTER_ONCE = "after_once"
    AFTER_FOS_SIZE_TIMES = "after_fos_size_times"


def default_operators() -> list[Operator]:
    """Return a fresh instance of every available function operator."""
    return [
        Plus(),
        Minus(),
        Times(),
        AnalyticQuotient(),
        AnalyticQuotient01(),
        ProtectedDivision(),
        AnalyticLog01(),
        Exp(),
        Log(),
        Sin(),
        Cos(),
        Square(),
        SquareRoot(),
        And(),
        Or(),
        Nand(),
        Nor(),
        Not(),
        Xor(),
    ]


@dataclass
class ConfigurationOptions:
    """All settings of an evolutionary run, with their defaults."""

    all_operators: list[Operator] = field(default_factory=default_operators)

    # Meta-options
    rng_seed: int | None = None
    threads: int = 1
    caching: bool = False

    # Evolution budget
    max_generations: int = 100
    max_evaluations: int = -1
    max_time: int = -1

    # Evolution base parameters
    population_size: int = 500
    syntactic_uniqueness_tries: int = -1
    semantic_uniqueness_tries: int = -1
    functions: list[Operator] = field(default_factory=list)
    terminals: list[Operator] = field(default_factory=list)
    use_ERC: bool = False
    use_IMS: bool = False
    num_sugen_IMS: int = 10
    early_stopping_IMS: int = 1
    batch_size: int = -1

    # Initialization and variation
    initial_maximum_tree_height: int = 6
    maximum_tree_height: int = 17
    maximum_solution_size: int = -1
    tree_init_type: TreeInitType = TreeInitType.RHH

    elitism: int = 0
    subtree_crossover_proportion: float = 0.9
    subtree_mutation_proportion: float = 0.1
    reproduction_proportion: float = 0.0
    coeff_mut_prob: float = 0.0
    coeff_mut_strength: float = 0.25
    coeff_mut_decay: float = 0.5
    coeff_mut_num_gen_no_impr_decay: int = 10

    rdo_proportion: float = 0.0
    agx_proportion: float = 0.0
    semback_library_type: SemanticLibraryType = SemanticLibraryType.RANDOM_DYNAMIC
    semback_library_max_size: int = 500
    semback_library_max_height: int = 4
    semback_normalized: bool = False
    semback_linear_lib_parse: bool = False

    semantic_variation: bool = False
    uniform_depth_variation: bool = False
    offspring_selection: bool = False

    # Selection
    tournament_selection_size: int = 7

    # GOMEA
    gomea: bool = False
    fos_type: FOSType = FOSType.LINKAGE_TREE
    gomfos_noroot: bool = False
    gomea_replace_worst: float = 0.0
    gom_coeff_mut_strat: GOMCoeffMutStrat = GOMCoeffMutStrat.WITHIN

    # Multi-objective
    multi_objective: bool = False
    mo_size: bool = False

    # Extra
    linear_scaling: bool = False
    validation_perc: float = 0.0
    running_from_python: bool = False

    def clone(self) -> ConfigurationOptions:
        """Return a copy whose operator lists hold copies of every operator."""
        return dataclasses.replace(
            self,
            all_operators=[op.clone() for op in self.all_operators],
            functions=[op.clone() for op in self.functions],
            terminals=[op.clone() for op in self.terminals],
        )