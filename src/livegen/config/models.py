from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Engine config models map YAML sections to typed structures; every section is optional.


class EngineSection(BaseModel):
    model_config = ConfigDict(extra="forbid")
    frame_rate: float = Field(default=200.0, gt=0)
    # Each propagation level is one Python frame; stay well under the interpreter recursion limit.
    max_propagation_depth: int = Field(default=200, ge=1, le=900)
    allow_cycles: bool = True


class SurfaceSection(BaseModel):
    model_config = ConfigDict(extra="forbid")
    width: int = Field(default=640, ge=1)
    height: int = Field(default=480, ge=1)


class LoggingSection(BaseModel):
    model_config = ConfigDict(extra="forbid")
    sink: Literal["stdout", "jsonl"] = "stdout"
    path: str | None = None

    @model_validator(mode="after")
    def _require_path_for_jsonl(self) -> LoggingSection:
        if self.sink == "jsonl" and not self.path:
            raise ValueError("logging.path is required when logging.sink is 'jsonl'")
        return self


class EngineConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    engine: EngineSection = Field(default_factory=EngineSection)
    surface: SurfaceSection = Field(default_factory=SurfaceSection)
    logging: LoggingSection = Field(default_factory=LoggingSection)
