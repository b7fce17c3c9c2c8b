"""Pydantic models for recipe data validation."""

from typing import Annotated, Any, Dict, List, Union

from pydantic import BaseModel, ConfigDict, Field, PositiveInt

Number = Union[int, float]
PositiveFiniteFloat = Annotated[float, Field(gt=0, allow_inf_nan=False)]
PositiveNumber = Union[PositiveInt, PositiveFiniteFloat]


class Ingredient(BaseModel):
    """A named quantity of something that goes into a recipe."""

    name: str = Field(..., min_length=1, description="Ingredient name")
    amount: PositiveNumber = Field(..., description="Quantity in the given unit")
    unit: str = Field(..., min_length=1, description="Unit of measure")


class Recipe(BaseModel):
    """One dish, as persisted in the recipe collection.

    Attribute names are snake_case; the JSON keys are camelCase
    (``cookingTime``, ``dateCreated``) and either form is accepted on input.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., frozen=True, description="Unique recipe id")
    name: str = Field(..., min_length=1, description="Recipe name")
    cooking_time: PositiveNumber = Field(..., alias="cookingTime", description="Cooking time in minutes")
    servings: int = Field(4, gt=0, description="Number of servings")
    ingredients: List[Ingredient] = Field(default_factory=list)
    steps: List[str] = Field(default_factory=list)
    date_created: str = Field(..., alias="dateCreated", frozen=True, description="Creation date")

    def to_json_dict(self) -> Dict[str, Any]:
        """Return the persisted form with camelCase keys in field order."""
        return self.model_dump(mode="json", by_alias=True)
