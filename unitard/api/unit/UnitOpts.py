"""Options accepted when creating a unit."""

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from .UnitError import UnsupportedOption


class UnitOpts(BaseModel):
    """Per-unit options.

    No options are recognized yet; any key is rejected so that callers
    cannot rely on silently ignored settings.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    @classmethod
    def load(cls, opts: "UnitOpts | dict[str, Any] | None") -> "UnitOpts":
        """Build options from None, a dict, or an existing instance.

        Raises:
            UnsupportedOption: If any option is given
        """
        if opts is None:
            return cls()
        if isinstance(opts, cls):
            return opts
        if not isinstance(opts, dict):
            raise UnsupportedOption(f"unit options must be a dict, got {type(opts).__name__}")
        try:
            return cls.model_validate(opts)
        except ValidationError as e:
            raise UnsupportedOption(f"unit options are not yet supported: {sorted(opts)}") from e
