from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False  # also log every radius pass


# ----------------- MAP ---------------------


class LinkModel(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)
    from_: str = Field(alias="from")
    to: str
    distance: int
    bidirectional: bool = True

    @field_validator("distance")
    @classmethod
    def _nonneg(cls, v: int) -> int:
        if v < 0:
            raise ValueError("distance must be >= 0")
        return v


class MapModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    reference: str | None = None  # location at the origin of `polar`
    links: list[LinkModel] = Field(default_factory=list)
    coords: dict[str, tuple[float, float]] = Field(default_factory=dict)  # name -> (x, y)
    polar: dict[str, tuple[float, float]] = Field(default_factory=dict)  # name -> (dist, bearing)

    @model_validator(mode="after")
    def _check_placement(self):
        both = set(self.coords) & set(self.polar)
        if both:
            raise ValueError(f"locations placed twice: {sorted(both)}")
        if self.polar and self.reference is None:
            raise ValueError("polar placement needs a reference location")
        return self


# --------------------- STORES -------------------------


class StoreMemoryModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["memory"] = "memory"


StoreUnion = Annotated[StoreMemoryModel, Field(discriminator="kind")]


# --------------------- FINDERS -------------------------


class FinderRadiusWideningModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["radius_widening"] = "radius_widening"
    min_radius: float = 2.0  # km
    max_radius: float = 25.0  # km
    growth: float = 2.0
    batch_size: int = 10

    @field_validator("min_radius", "max_radius")
    def _positive(cls, v: float, info: ValidationInfo) -> float:
        if v <= 0:
            raise ValueError(f"{info.field_name} must be > 0")
        return v

    @field_validator("growth")
    @classmethod
    def _growing(cls, v: float) -> float:
        if v <= 1.0:
            raise ValueError("growth must be > 1")
        return v

    @field_validator("batch_size")
    @classmethod
    def _batch(cls, v: int) -> int:
        if v < 1:
            raise ValueError("batch_size must be >= 1")
        return v

    @model_validator(mode="after")
    def _check_radii(self):
        if self.min_radius > self.max_radius:
            raise ValueError(
                f"min_radius ({self.min_radius}) must not exceed max_radius ({self.max_radius})"
            )
        return self


FinderUnion = Annotated[FinderRadiusWideningModel, Field(discriminator="kind")]


# ------------------------------------------------------------------


class AppModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "mapnav"
    seed: int = 123
    log: LogModel = LogModel()
    map: MapModel = Field(default_factory=MapModel)
    store: StoreUnion = Field(default_factory=StoreMemoryModel)
    finder: FinderUnion = Field(default_factory=FinderRadiusWideningModel)
