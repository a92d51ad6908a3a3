import os
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .durations import parse_duration

load_dotenv()

# a mask of 8 or more bits no longer fits the single byte the delay scale is built on
MAX_BITS = 7

DEFAULT_BASE = "1s"
DEFAULT_STEP = "100ms"
DEFAULT_BITS = "3"

TRUTHY = {"1", "true", "yes", "on"}


class DelayParameters(BaseModel):
    """
    Immutable pacing parameters, fixed once at startup.
    base/step are seconds; duration strings ("250ms") are accepted too.
    """

    model_config = ConfigDict(frozen=True)

    base: float = Field(1.0, ge=0)
    step: float = Field(0.1, ge=0)
    bits: int = Field(3, ge=0, le=MAX_BITS)

    @field_validator("base", "step", mode="before")
    @classmethod
    def _parse_duration(cls, value: Any) -> Any:
        if isinstance(value, str):
            return parse_duration(value)
        return value


def env_defaults() -> dict:
    """Raw (unparsed) defaults from the environment / .env file."""
    return {
        "base": os.getenv("ASLAP_BASE", DEFAULT_BASE),
        "step": os.getenv("ASLAP_STEP", DEFAULT_STEP),
        "bits": os.getenv("ASLAP_BITS", DEFAULT_BITS),
        "debug": debug_from_env(),
    }


def debug_from_env() -> bool:
    return os.getenv("ASLAP_DEBUG", "").strip().lower() in TRUTHY


def parameters_from_env() -> DelayParameters:
    env = env_defaults()
    return DelayParameters(base=env["base"], step=env["step"], bits=env["bits"])
