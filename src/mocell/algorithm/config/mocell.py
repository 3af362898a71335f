"""MOCell configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple

from mocell.foundation.encoding import Encoding, normalize_encoding
from mocell.foundation.exceptions import ConfigurationError, InvalidOperatorError
from mocell.operators.registry import available_operators, check_encoding

from .base import _SerializableConfig, _require_fields

_REQUIRED = (
    "pop_size",
    "archive_size",
    "max_evaluations",
    "feedback",
    "crossover",
    "mutation",
    "selection",
    "neighborhood",
)

# Accepted spellings for flat mappings (e.g. parsed JSON/YAML parameter files).
_ALIASES: dict[str, str] = {
    "pop_size": "pop_size",
    "population_size": "pop_size",
    "populationSize": "pop_size",
    "archive_size": "archive_size",
    "archiveSize": "archive_size",
    "max_evaluations": "max_evaluations",
    "maxEvaluations": "max_evaluations",
    "feedback": "feedback",
    "feedBack": "feedback",
    "crossover_prob": "crossover_prob",
    "crossover_probability": "crossover_prob",
    "crossoverProbability": "crossover_prob",
    "mutation_prob": "mutation_prob",
    "mutation_probability": "mutation_prob",
    "mutationProbability": "mutation_prob",
    "neighborhood": "neighborhood",
    "neighborhood_size": "neighborhood",
    "neighborhoodSize": "neighborhood",
    "crossover": "crossover",
    "mutation": "mutation",
    "selection": "selection",
    "encoding": "encoding",
}


@dataclass(frozen=True)
class MOCellConfigData(_SerializableConfig):
    pop_size: int
    archive_size: int
    max_evaluations: int
    feedback: int
    crossover: Tuple[str, Dict[str, Any]]
    mutation: Tuple[str, Dict[str, Any]]
    selection: Tuple[str, Dict[str, Any]]
    neighborhood: int = 8
    encoding: str = Encoding.PERMUTATION.value


class MOCellConfig:
    """
    Declarative configuration holder for MOCell settings.

    Examples:
        cfg = MOCellConfig.default()
        cfg = (
            MOCellConfig()
            .pop_size(100)
            .archive_size(100)
            .max_evaluations(25000)
            .feedback(20)
            .crossover("pmx", prob=0.9)
            .mutation("swap", prob=0.2)
            .selection("tournament")
            .neighborhood(8)
            .fixed()
        )
    """

    def __init__(self) -> None:
        self._cfg: Dict[str, Any] = {}

    @classmethod
    def default(
        cls,
        pop_size: int = 100,
        n_var: int | None = None,
        max_evaluations: int = 25000,
    ) -> "MOCellConfigData":
        """Create a default MOCell configuration."""
        mut_prob = min(1.0, 1.0 / n_var) if n_var else 0.2
        return (
            cls()
            .pop_size(pop_size)
            .archive_size(pop_size)
            .max_evaluations(max_evaluations)
            .feedback(20)
            .crossover("pmx", prob=0.9)
            .mutation("swap", prob=mut_prob)
            .selection("tournament")
            .neighborhood(8)
            .fixed()
        )

    @classmethod
    def from_dict(cls, mapping: Mapping[str, Any]) -> "MOCellConfigData":
        """
        Build a configuration from a flat mapping.

        Both snake_case keys and the camelCase names (``populationSize``,
        ``archiveSize``, ``maxEvaluations``, ``feedBack``,
        ``crossoverProbability``, ``neighborhoodSize``) are recognized. The crossover
        defaults to PMX when only its probability is given. Missing mutation,
        selection and neighbourhood fall back to swap (prob 0.2), binary
        tournament and the Moore neighbourhood.
        """
        flat: Dict[str, Any] = {}
        unknown = []
        for key, value in mapping.items():
            canonical = _ALIASES.get(key)
            if canonical is None:
                unknown.append(key)
                continue
            flat[canonical] = value
        if unknown:
            raise ConfigurationError(
                f"Unknown MOCell configuration keys: {', '.join(sorted(unknown))}.",
                suggestion=f"Recognized keys: {', '.join(sorted(set(_ALIASES)))}",
                details={"unknown": sorted(unknown)},
            )

        builder = cls()
        for key in ("pop_size", "archive_size", "max_evaluations", "feedback", "neighborhood"):
            if key in flat:
                builder._cfg[key] = flat[key]
        builder._cfg.setdefault("neighborhood", 8)
        if "encoding" in flat:
            builder.encoding(flat["encoding"])

        crossover = flat.get("crossover")
        if crossover is not None:
            builder._cfg["crossover"] = _operator_spec(crossover)
        if "crossover_prob" in flat:
            name, params = builder._cfg.get("crossover", ("pmx", {}))
            builder.crossover(name, **{**params, "prob": float(flat["crossover_prob"])})

        mutation = flat.get("mutation")
        builder._cfg["mutation"] = _operator_spec(mutation) if mutation is not None else ("swap", {"prob": 0.2})
        if "mutation_prob" in flat:
            name, params = builder._cfg["mutation"]
            builder.mutation(name, **{**params, "prob": float(flat["mutation_prob"])})

        selection = flat.get("selection")
        builder._cfg["selection"] = _operator_spec(selection) if selection is not None else ("tournament", {})
        return builder.fixed()

    def pop_size(self, value: int) -> "MOCellConfig":
        self._cfg["pop_size"] = value
        return self

    def archive_size(self, value: int) -> "MOCellConfig":
        self._cfg["archive_size"] = value
        return self

    def max_evaluations(self, value: int) -> "MOCellConfig":
        self._cfg["max_evaluations"] = value
        return self

    def feedback(self, value: int) -> "MOCellConfig":
        self._cfg["feedback"] = value
        return self

    def crossover(self, method: str, **kwargs) -> "MOCellConfig":
        self._cfg["crossover"] = (method, kwargs)
        return self

    def mutation(self, method: str, **kwargs) -> "MOCellConfig":
        self._cfg["mutation"] = (method, kwargs)
        return self

    def selection(self, method: str, **kwargs) -> "MOCellConfig":
        self._cfg["selection"] = (method, kwargs)
        return self

    def neighborhood(self, value: int) -> "MOCellConfig":
        self._cfg["neighborhood"] = value
        return self

    def encoding(self, value: str) -> "MOCellConfig":
        self._cfg["encoding"] = normalize_encoding(value).value
        return self

    def fixed(self) -> MOCellConfigData:
        _require_fields(self._cfg, _REQUIRED, "MOCell")
        data = MOCellConfigData(
            pop_size=_positive_int(self._cfg["pop_size"], "pop_size"),
            archive_size=_positive_int(self._cfg["archive_size"], "archive_size"),
            max_evaluations=_positive_int(self._cfg["max_evaluations"], "max_evaluations"),
            feedback=_non_negative_int(self._cfg["feedback"], "feedback"),
            crossover=self._cfg["crossover"],
            mutation=self._cfg["mutation"],
            selection=self._cfg["selection"],
            neighborhood=_as_int(self._cfg["neighborhood"], "neighborhood"),
            encoding=self._cfg.get("encoding", Encoding.PERMUTATION.value),
        )
        _validate(data)
        return data


def _operator_spec(value: Any) -> Tuple[str, Dict[str, Any]]:
    if isinstance(value, str):
        return value, {}
    if isinstance(value, Mapping):
        params = dict(value)
        name = params.pop("method", None) or params.pop("name", None)
        if name is None:
            raise ConfigurationError("Operator mapping needs a 'method' entry.", details={"value": dict(value)})
        return str(name), params
    if isinstance(value, (tuple, list)) and len(value) == 2:
        return str(value[0]), dict(value[1])
    raise ConfigurationError(f"Cannot interpret operator specification {value!r}.")


def _as_int(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}.", details={name: value})
    try:
        number = int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}.", details={name: value}) from exc
    if number != value:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}.", details={name: value})
    return number


def _positive_int(value: Any, name: str) -> int:
    number = _as_int(value, name)
    if number <= 0:
        raise ConfigurationError(f"{name} must be a positive integer, got {value!r}.", details={name: value})
    return number


def _non_negative_int(value: Any, name: str) -> int:
    number = _as_int(value, name)
    if number < 0:
        raise ConfigurationError(f"{name} must be a non-negative integer, got {value!r}.", details={name: value})
    return number


def _validate(data: MOCellConfigData) -> None:
    if data.neighborhood not in (4, 8):
        raise ConfigurationError(
            f"neighborhood must be 4 or 8, got {data.neighborhood}.",
            suggestion="Use 4 for von Neumann or 8 for Moore neighbourhoods",
        )
    if data.max_evaluations < data.pop_size:
        raise ConfigurationError(
            f"max_evaluations ({data.max_evaluations}) is smaller than pop_size ({data.pop_size}).",
            suggestion="The initial population alone consumes pop_size evaluations",
        )
    for kind in ("crossover", "mutation", "selection"):
        name = getattr(data, kind)[0]
        if name.lower() not in available_operators(kind):
            raise InvalidOperatorError(kind, name, available_operators(kind))
    for kind in ("crossover", "mutation"):
        name, params = getattr(data, kind)
        prob = params.get("prob")
        if prob is not None and not 0.0 <= float(prob) <= 1.0:
            raise ConfigurationError(f"{kind} probability must be in [0, 1], got {prob}.")
    encoding = normalize_encoding(data.encoding)
    check_encoding(data.crossover[0], encoding)
    check_encoding(data.mutation[0], encoding)


__all__ = ["MOCellConfig", "MOCellConfigData"]
