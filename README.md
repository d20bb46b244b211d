# drycore

Value types and the normalizer port for a structural duplication
detector. Source files in any language are normalized into a common
form: a set of fingerprints per function, method or doctest. These
forms are then compared by Jaccard similarity. This package holds the
types that make up those forms and the results built from them. It
also holds the config tables and the abstract port that each language
adapter implements.

Every type converts to and from plain JSON-compatible values, so the
results can go through `json.dumps` and `json.loads` unchanged.

## Installation

```
pip install drycore
```

The package has no runtime dependencies. To run the tests, install
`pytest`, for example with `pip install drycore[test]`.

## Modules

- `drycore.domain.enums`
  - `FormKind`: `PRODUCTION`, `TEST`, `DOCTEST`.
  - `Tier`: `AUTO_REFACTOR`, `REVIEW_FIRST`, `ADVISORY`.
  - `Severity`: `HIGH`, `MEDIUM`, `LOW`.
  - Values are the snake_case wire labels, and `as_str()` returns the
    same label.
  - Members order by declaration, so for example
    `Tier.AUTO_REFACTOR < Tier.REVIEW_FIRST`.
- `drycore.domain.identity`
  - `FilePath`: wraps a `pathlib.Path` and is never read from disk.
    `as_path()` returns the path.
  - `Fingerprint`: an unsigned 64-bit integer. `str()` renders it as 16
    zero-padded hex digits.
  - Both serialize through `to_json()` / `from_json()`.
- `drycore.domain.span`
  - `LineColumn`: lines start at 1 and columns start at 0.
  - `Span`: the end is inclusive. A span whose start lies after its end
    raises `SpanError`, which is a `ValueError`.
- `drycore.domain.form`
  - `NormalizedForm`: the unit of comparison. It holds the kind, the
    fingerprint set, the span, the node and line counts, and the
    optional `identifier_set` and `qualified_name` lists.
  - `FormRef`: the file, span and kind of a form inside a match.
- `drycore.domain.match`
  - `Match`: forms, score and tier, plus the reserved slots
    `structural_score`, `rename_count` and `rename_density`.
  - The reserved slots always appear in `to_dict()`, as `None` when
    they are unset.
- `drycore.domain.summary`
  - `Summary`: `total_forms` plus counters `by_tier` and `by_kind`.
  - The counter keys are written in enum declaration order.
- `drycore.domain.report`
  - `Report`: the matches, the summary and the `passed` verdict.
  - `Report()` and `Report.empty_passed()` both give an empty, passing
    report.
- `drycore.domain.config`
  - The tables are `Config`, `GateConfig`, `OutputConfig`, `WalkConfig`
    and `LanguageConfig` (the last for `[rust]` and `[typescript]`).
  - The enums `Format` and `ThresholdMode` belong here too.
  - Every knob is optional, and `None` means it is not set.
    `is_default()` tells whether a table has nothing set.
  - `to_dict()` leaves out unset knobs and empty tables.
  - An unknown key raises `UnknownConfigKeyError`.
- `drycore.ports.normalizer`
  - `NormalizerPort`: the abstract base class for language adapters.
  - The errors are `NormalizeError` and its subclasses `ParseError` and
    `UnsupportedConstructError`.
  - `PlaceholderPolicy`: currently an opaque value.

## Examples

Building a match and serializing it:

```python
import json

from drycore.domain.enums import FormKind, Tier
from drycore.domain.form import FormRef
from drycore.domain.identity import FilePath
from drycore.domain.match import Match
from drycore.domain.span import LineColumn, Span

span = Span(LineColumn(1, 0), LineColumn(3, 12))
ref = FormRef(FilePath("src/foo.rs"), span, FormKind.PRODUCTION)
m = Match([ref], 0.92, Tier.REVIEW_FIRST)

text = json.dumps(m.to_dict())
assert Match.from_dict(json.loads(text)) == m
```

Reading a config document:

```python
import tomllib

from drycore.domain.config import Config, ThresholdMode

doc = tomllib.loads('[gate]\nthreshold = 0.9\nthreshold_mode = "strict"\n')
config = Config.from_dict(doc)
assert config.gate.threshold_mode is ThresholdMode.STRICT
assert config.rust.is_default()
```

Implementing an adapter:

```python
from drycore.domain.identity import FilePath
from drycore.ports.normalizer import NormalizerPort, PlaceholderPolicy


class NullAdapter(NormalizerPort):
    def extensions(self):
        return (".txt",)

    def normalize(self, source: str, path: FilePath):
        return []

    def placeholder_policy(self):
        return PlaceholderPolicy.v0_1_default()
```

`tool_name()`, `tool_version()` and `language()` have defaults.
They return `"dry"`, this package's version and `"unknown"`; an
adapter should override them.

## What this package does not do

This package only defines types and the adapter interface. It does
not do any of the following:

- parse any source language;
- walk directories;
- find or read config files;
- compare forms;
- render reports.

It provides no command-line tool either.