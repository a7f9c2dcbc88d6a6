"""Pydantic models for API request payloads."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

WorkoutType = Literal["cardio", "strength", "flexibility", "sports", "other"]
MealType = Literal["breakfast", "lunch", "dinner", "snack"]
FoodUnit = Literal["serving", "cup", "tbsp", "tsp", "gram", "oz", "piece"]
Goal = Literal["lose_weight", "gain_muscle", "maintain", "improve_endurance"]


class WorkoutIn(BaseModel):
    """Payload for logging a workout."""

    model_config = ConfigDict(allow_inf_nan=False)

    date: datetime | None = None
    name: str = Field(min_length=1)
    type: WorkoutType
    duration: float = Field(gt=0, strict=True)
    calories: float = Field(gt=0, strict=True)
    notes: str | None = Field(default=None, max_length=500)


class WorkoutUpdateIn(BaseModel):
    """Partial workout update; omitted fields are left unchanged."""

    model_config = ConfigDict(allow_inf_nan=False)

    name: str | None = None
    type: WorkoutType | None = None
    duration: float | None = Field(default=None, gt=0, strict=True)
    calories: float | None = Field(default=None, gt=0, strict=True)
    notes: str | None = Field(default=None, max_length=500)


class FoodItemIn(BaseModel):
    """Food item with per-unit calories and macros."""

    model_config = ConfigDict(allow_inf_nan=False)

    name: str = Field(min_length=1)
    calories: float = Field(ge=0, strict=True)
    protein: float = Field(default=0, ge=0, strict=True)
    carbs: float = Field(default=0, ge=0, strict=True)
    fats: float = Field(default=0, ge=0, strict=True)
    quantity: float = Field(default=1, gt=0, strict=True)
    unit: FoodUnit = "serving"


class MealIn(BaseModel):
    """Payload for logging or replacing a meal."""

    model_config = ConfigDict(populate_by_name=True)

    date: datetime | None = None
    meal_type: MealType = Field(alias="mealType")
    items: list[FoodItemIn] = Field(min_length=1)


class ProfileUpdateIn(BaseModel):
    """Partial profile update; omitted fields are left unchanged."""

    model_config = ConfigDict(allow_inf_nan=False)

    name: str | None = None
    age: float | None = Field(default=None, strict=True)
    height: float | None = Field(default=None, strict=True)
    weight: float | None = Field(default=None, strict=True)
    goals: Goal | None = None
