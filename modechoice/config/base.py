# TITLE: Config
from __future__ import annotations

import gzip
import io
import logging
import pathlib
import typing

import addicty
import yaml
from pydantic import field_validator, model_validator

from .constraints import (
    AnyTourConstraint,
    AnyTripConstraint,
    FromTripBasedConstraintConfig,
    VehicleTourConstraintConfig,
    VehicleTripConstraintConfig,
)
from .pretty import PrettyModel
from .selectors import AnySelector, MultinomialLogitSelectorConfig

logger = logging.getLogger("modechoice.config")

PathOrContent = str | pathlib.Path

TConfig = typing.TypeVar("TConfig", bound="YamlConfig")


def _merge(target: addicty.Dict, content: addicty.Dict) -> None:
    """Merge `content` into `target`, later values winning.

    A component mapping whose `kind` changes is replaced as a whole, as the
    settings of the earlier kind do not apply to the new one.
    """
    for key, value in content.items():
        earlier = target.get(key)
        if (
            isinstance(value, dict)
            and isinstance(earlier, dict)
            and "kind" in value
            and value["kind"] != earlier.get("kind")
        ):
            del target[key]
    target.update(content)


def _read_yaml(source: PathOrContent) -> addicty.Dict:
    """Read a single YAML source, following its `include` entries."""
    if isinstance(source, str) and "\n" in source:
        # literal content has no directory to resolve includes against
        return addicty.Dict.load(source, freeze=False)

    path = pathlib.Path(source)
    opener = gzip.open if path.suffix == ".gz" else open
    with opener(path, "rt") as f:
        content = addicty.Dict.load(f, freeze=False)

    merged = addicty.Dict()
    include = content.pop("include", None) or []
    if isinstance(include, str):
        include = [include]
    for included in include:
        _merge(merged, _read_yaml(path.parent.joinpath(included)))
    _merge(merged, content)
    logger.info("loaded config from %s", path)
    return merged


class YamlConfig(PrettyModel):
    """A model that can be read from, and written to, YAML files."""

    @classmethod
    def from_yaml(
        cls: type[TConfig],
        sources: PathOrContent | list[PathOrContent],
    ) -> TConfig:
        """
        Read and validate a configuration.

        Parameters
        ----------
        sources : path-like, str, or a list of them
            YAML files, or literal YAML content given as a multi-line string.
            Sources are merged in order, so keys repeated in a later source
            replace those of earlier ones.  A file may name other files
            under an `include` key, which are read (relative to that file)
            before the rest of its content.

        Returns
        -------
        YamlConfig
        """
        if isinstance(sources, str | pathlib.Path):
            sources = [sources]
        raw = addicty.Dict()
        for source in sources:
            _merge(raw, _read_yaml(source))
        return cls.model_validate(raw.to_dict())

    def to_yaml(
        self, stream: pathlib.Path | str | io.IOBase | None = None, **dump_options
    ) -> bytes | None:
        """
        Dump this configuration as YAML.

        Parameters
        ----------
        stream : path-like or file-like, optional
            Where to write.  If not given, the YAML is returned as bytes.
        **dump_options
            Passed to `model_dump`, e.g. `exclude_defaults=True`.
        """
        content = yaml.dump(
            self.model_dump(mode="json", **dump_options),
            encoding="utf8",
            Dumper=yaml.SafeDumper,
            sort_keys=False,
        )
        if stream is None:
            return content
        if isinstance(stream, str | pathlib.Path):
            pathlib.Path(stream).write_bytes(content)
        elif isinstance(stream, io.TextIOBase):
            stream.write(content.decode("utf8"))
        else:
            stream.write(content)
        return None


class Config(YamlConfig, extra="forbid"):
    modes: list[str] = ["car", "pt", "bike", "walk"]
    """The modes considered for every trip."""

    selector: AnySelector = MultinomialLogitSelectorConfig()
    """How the realized alternative is drawn from the scored candidates.

    Use the `kind` key to pick one of `multinomial_logit`, `maximum` or `random`.

    Example
    -------
    ```{yaml}
    selector:
      kind: multinomial_logit
      minimum_utility: 700.0
      maximum_utility: 700.0
    ```
    """

    trip_constraints: list[AnyTripConstraint] = [VehicleTripConstraintConfig()]
    """Constraints checked for every trip in trip-based choice.

    A mode is feasible for a trip only if all of these constraints accept it.
    """

    tour_constraints: list[AnyTourConstraint] = [VehicleTourConstraintConfig()]
    """Constraints checked for every tour in tour-based choice.

    Include `kind: from_trip_based` to apply all the `trip_constraints` to
    each trip of the tour as well.

    Example
    -------
    ```{yaml}
    tour_constraints:
      - kind: vehicle_tour
        require_start_at_home: [car]
        require_continuity: [car]
        require_end_at_home: [car]
        require_existing_home: true
      - kind: from_trip_based
    ```
    """

    random_seed: int | None = None
    """Seed for the random draws of the selector.

    Any value set here makes choices reproducible. If None, the generator is
    seeded from fresh entropy."""

    @field_validator("modes")
    @classmethod
    def _modes_are_unique(cls, v: list[str]):
        if len(set(v)) != len(v):
            raise ValueError("modes must be unique")
        return v

    @model_validator(mode="after")
    def _from_trip_based_has_trip_constraints(self):
        """Deriving tour constraints from trip constraints needs trip constraints."""
        for tc in self.tour_constraints:
            if isinstance(tc, FromTripBasedConstraintConfig) and not self.trip_constraints:
                raise ValueError(
                    "the `from_trip_based` tour constraint requires "
                    "at least one trip constraint"
                )
        return self

    def __repr__(self):
        return "modechoice.Config:\n" + self.__repr_with_indent__(2)
