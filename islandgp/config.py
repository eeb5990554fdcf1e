# config.py
# Run configuration: defaults merge and eager validation
from dataclasses import dataclass, fields
from collections.abc import Mapping
from numbers import Real
from typing import Any, Callable, Optional, Tuple
from . import globals as defaults
from .util import print_report

class ConfigError(ValueError):
    """Malformed run configuration. The message lists every problem found."""

@dataclass(frozen=True)
class Function:
    op: Callable
    arity: int
    name: str = ''

    def __post_init__(self):
        if not self.name:
            object.__setattr__(self, 'name', getattr(self.op, '__name__', repr(self.op)))

@dataclass(frozen=True)
class GPConfig:
    symbols: Tuple[str, ...]
    funcs: Tuple[Function, ...]
    tests: Tuple[tuple, ...]
    actual: Tuple[Any, ...]
    term_min: float = defaults.TERM_MIN
    term_max: float = defaults.TERM_MAX
    depth_min: int = defaults.DEPTH_MIN
    depth_max: int = defaults.DEPTH_MAX
    mutation_rate: float = defaults.MUTATION_RATE
    tournament_size: int = defaults.TOURNAMENT_SIZE
    forest_size: int = defaults.FOREST_SIZE
    pop_size: int = defaults.POP_SIZE
    gens: int = defaults.GENS
    cycles: int = defaults.CYCLES
    reprate: int = defaults.REPRATE
    repfunc: Callable = print_report
    seed: Optional[int] = None
    max_workers: Optional[int] = None

REQUIRED_KEYS = ('symbols', 'funcs', 'tests', 'actual')
_KNOWN_KEYS = {f.name for f in fields(GPConfig)}

def _to_function(entry) -> Function:
    if isinstance(entry, Function):
        return entry
    if isinstance(entry, Mapping):
        return Function(entry.get('op'), entry.get('arity'), entry.get('name', ''))
    # Left as is, validate reports it
    return entry

def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)

def _is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)

def _as_tuple(value):
    try:
        return tuple(value)
    except TypeError:
        return value

def validate(o: Mapping[str, Any]) -> None:
    problems = []
    missing = [k for k in REQUIRED_KEYS if k not in o]
    if missing:
        raise ConfigError("Missing required options: " + ", ".join(missing))

    symbols = o['symbols']
    if not isinstance(symbols, tuple):
        problems.append(f"symbols must be a sequence of names, got {symbols!r}")
        symbols = ()
    elif not symbols:
        problems.append("symbols must not be empty")
    elif not all(isinstance(s, str) for s in symbols):
        problems.append("symbols must be strings")
    elif len(set(symbols)) != len(symbols):
        problems.append("symbols must be unique")

    funcs = o['funcs']
    if not isinstance(funcs, tuple):
        problems.append(f"funcs must be a sequence of functions, got {funcs!r}")
        funcs = ()
    elif not funcs:
        problems.append("funcs must not be empty")
    for f in funcs:
        if not isinstance(f, Function):
            problems.append(f"funcs entries must be Function or mapping with op/arity/name, got {f!r}")
            continue
        if not callable(f.op):
            problems.append(f"function '{f.name}' has a non-callable op")
        if not _is_int(f.arity) or f.arity < 1:
            problems.append(f"function '{f.name}' must have an integer arity >= 1, got {f.arity!r}")

    if not (_is_number(o['term_min']) and _is_number(o['term_max'])):
        problems.append(f"term_min and term_max must be numbers, got {o['term_min']!r} and {o['term_max']!r}")
    elif not o['term_max'] > o['term_min']:
        problems.append(f"term_max ({o['term_max']}) must be greater than term_min ({o['term_min']})")
    if not (_is_int(o['depth_min']) and _is_int(o['depth_max'])):
        problems.append("depth_min and depth_max must be integers")
    elif not 0 <= o['depth_min'] <= o['depth_max']:
        problems.append(f"depth bounds must satisfy 0 <= depth_min ({o['depth_min']}) <= depth_max ({o['depth_max']})")
    if not _is_number(o['mutation_rate']) or not 0 <= o['mutation_rate'] <= 1:
        problems.append(f"mutation_rate must be in [0, 1], got {o['mutation_rate']}")

    for key, low in (('forest_size', 1), ('pop_size', 1), ('gens', 1), ('cycles', 0), ('reprate', 1)):
        if not _is_int(o[key]) or o[key] < low:
            problems.append(f"{key} must be an integer >= {low}, got {o[key]!r}")
    ts = o['tournament_size']
    if not _is_int(ts) or ts < 2:
        problems.append(f"tournament_size must be an integer >= 2, got {ts!r}")
    elif _is_int(o['forest_size']) and ts > o['forest_size']:
        problems.append(f"tournament_size ({ts}) exceeds forest_size ({o['forest_size']})")

    if not callable(o['repfunc']):
        problems.append("repfunc must be callable")
    if o['max_workers'] is not None and (not _is_int(o['max_workers']) or o['max_workers'] < 1):
        problems.append(f"max_workers must be None or an integer >= 1, got {o['max_workers']!r}")

    tests, actual = o['tests'], o['actual']
    if not isinstance(tests, tuple) or not isinstance(actual, tuple):
        problems.append("tests and actual must be sequences")
        tests = actual = ()
    elif len(tests) != len(actual):
        problems.append(f"tests ({len(tests)}) and actual ({len(actual)}) must have the same length")
    bad = [i for i, args in enumerate(tests) if not isinstance(args, tuple) or len(args) != len(symbols)]
    if bad:
        problems.append(f"test cases {bad} do not have one value per symbol ({len(symbols)})")

    if problems:
        raise ConfigError("Invalid GP configuration:\n  - " + "\n  - ".join(problems))

def build_options(options: Optional[Mapping[str, Any]] = None, **kwargs) -> GPConfig:
    """Merge caller options with the defaults and validate the result.

    Keys may use hyphens ("forest-size") or underscores ("forest_size").
    Keyword arguments override entries of ``options``.
    """
    merged = {}
    for source in (options or {}), kwargs:
        for key, value in source.items():
            merged[key.replace('-', '_')] = value
    unknown = sorted(set(merged) - _KNOWN_KEYS)
    if unknown:
        raise ConfigError("Unknown options: " + ", ".join(unknown))

    o = {f.name: getattr(defaults, f.name.upper()) for f in fields(GPConfig)
         if hasattr(defaults, f.name.upper())}
    o.update(repfunc=print_report, seed=None, max_workers=None)
    o.update(merged)
    if 'funcs' in o:
        funcs = _as_tuple(o['funcs'])
        o['funcs'] = tuple(_to_function(f) for f in funcs) if isinstance(funcs, tuple) else funcs
    if 'symbols' in o:
        o['symbols'] = _as_tuple(o['symbols'])
    if 'tests' in o:
        tests = _as_tuple(o['tests'])
        o['tests'] = tuple(_as_tuple(args) for args in tests) if isinstance(tests, tuple) else tests
    if 'actual' in o:
        o['actual'] = _as_tuple(o['actual'])
    validate(o)
    return GPConfig(**o)
