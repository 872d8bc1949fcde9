import dataclasses
from typing import Any, List, Mapping, Optional, Union


@dataclasses.dataclass(frozen=True)
class RecipeIngredient:
    name: str
    quantity: str = ""
    unit: Optional[str] = None


# A bare ingredient name, a structured recipe line or a stored record
IngredientRef = Union[str, RecipeIngredient, Mapping[str, Any]]


def ingredient_name(ingredient: Optional[IngredientRef]) -> str:
    """Return the lowercase, trimmed name of an ingredient in any accepted form."""
    if isinstance(ingredient, RecipeIngredient):
        return (ingredient.name or "").lower().strip()
    if isinstance(ingredient, str):
        return ingredient.lower().strip()
    if isinstance(ingredient, Mapping):
        name = ingredient.get("name")
        return name.lower().strip() if isinstance(name, str) else ""
    return ""


@dataclasses.dataclass(frozen=True)
class MatchResult:
    matched: bool
    score: float
    matched_with: Optional[str]


NO_MATCH = MatchResult(matched=False, score=0.0, matched_with=None)


@dataclasses.dataclass(frozen=True)
class IngredientMatch:
    ingredient: IngredientRef
    matched: bool
    score: float
    matched_with: Optional[str]


@dataclasses.dataclass
class RecipeMatchResult:
    percentage: float
    matched_count: int
    total_count: int
    matches: List[IngredientMatch] = dataclasses.field(default_factory=list)

    @property
    def display_percentage(self) -> int:
        return int(round(self.percentage))

    @property
    def summary(self) -> str:
        return f"{self.matched_count} of {self.total_count} ingredients"

    @property
    def missing(self) -> List[IngredientRef]:
        return [m.ingredient for m in self.matches if not m.matched]
