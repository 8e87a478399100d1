"""Union schemas composing several variant schemas.

Three composition modes are supported:

- ``ONE_OF``: the first variant that accepts the value wins; when every
  variant fails the last variant's error is reported.
- ``ALL_OF``: every variant must accept the original value; the last
  variant's output is returned.
- ``BEST_OF``: the first accepting variant wins; when every variant fails
  the error with the lowest score from the scorer is reported, earliest
  variant first on ties.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable

from .errors import ErrorContext
from .exceptions import SchemaDefinitionError
from .schema import Schema

Scorer = Callable[[ErrorContext], int]


class UnionMode(Enum):
    """How a union combines its variants."""

    ONE_OF = "one_of"
    ALL_OF = "all_of"
    BEST_OF = "best_of"


def score_equally(error: ErrorContext) -> int:
    """Default BestOf scorer: every failure ranks the same."""
    return 0


def code_scorer(scores: dict[str, int], default: int = 0) -> Scorer:
    """Build a scorer ranking errors by their code.

    Args:
        scores: Mapping of error code to rank (lower is more relevant)
        default: Rank for codes not in the mapping

    Returns:
        Scorer function
    """
    def scorer(error: ErrorContext) -> int:
        return scores.get(error.code, default)

    scorer.scores = dict(scores)  # type: ignore[attr-defined]
    scorer.default_score = default  # type: ignore[attr-defined]
    return scorer


class UnionSchema(Schema):
    """Schema accepting values according to a set of variant schemas."""

    kind = "union"

    def __init__(
        self,
        variants: list[Schema],
        mode: UnionMode = UnionMode.ONE_OF,
        scorer: Scorer | None = None,
    ):
        """Initialize union schema.

        Args:
            variants: Variant schemas in declaration order
            mode: Composition mode
            scorer: Error ranking function, only valid for BEST_OF

        Raises:
            SchemaDefinitionError: If a scorer is given for another mode
        """
        super().__init__()
        if scorer is not None and mode is not UnionMode.BEST_OF:
            raise SchemaDefinitionError(
                f"A scorer is only used by best_of unions, not {mode.value}",
                context={"mode": mode.value},
            )
        self.variants = list(variants)
        self.mode = mode
        self.scorer: Scorer = scorer or score_equally

    def variant(self, schema: Schema) -> UnionSchema:
        """Append a variant (fluent API)."""
        self.variants.append(schema)
        return self

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["mode"] = self.mode.value
        data["variants"] = [variant.to_dict() for variant in self.variants]
        scores = getattr(self.scorer, "scores", None)
        if scores is not None:
            data["scores"] = dict(scores)
            data["default_score"] = getattr(self.scorer, "default_score", 0)
        return data
