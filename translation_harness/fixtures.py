import json
from dataclasses import dataclass
from pathlib import Path

from translation_harness.errors import FixtureLoadError

TITLE_INPUT_CHARS = 30


@dataclass(frozen=True)
class TestCase:
    """One fixture sentence."""

    __test__ = False  # not a pytest test class

    id: int
    input: str
    type: str

    @property
    def title(self) -> str:
        preview = self.input[:TITLE_INPUT_CHARS]
        if len(self.input) > TITLE_INPUT_CHARS:
            preview += "..."
        return f'Test Case {self.id} [{self.type.upper()}]: Translate "{preview}"'


def _parse_record(index, record, path):
    if not isinstance(record, dict):
        raise FixtureLoadError(path, f"record {index} is not an object")

    fields = {"id": int, "input": str, "type": str}
    for name, kind in fields.items():
        if name not in record:
            raise FixtureLoadError(path, f"record {index} has no '{name}'")
        value = record[name]
        # bool is an int subclass, reject it for ids
        if not isinstance(value, kind) or isinstance(value, bool):
            raise FixtureLoadError(
                path, f"record {index} field '{name}' must be {kind.__name__}, got {type(value).__name__}"
            )

    return TestCase(id=record["id"], input=record["input"], type=record["type"])


def load_test_cases(path):
    """Read the fixture file into a list of TestCase, in file order.

    Any problem with the file raises FixtureLoadError; nothing is skipped.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise FixtureLoadError(path, "file not found") from e
    except OSError as e:
        raise FixtureLoadError(path, f"unreadable: {e}") from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise FixtureLoadError(path, f"invalid JSON: {e}") from e

    if not isinstance(data, list):
        raise FixtureLoadError(path, f"expected a JSON array, got {type(data).__name__}")

    cases = []
    seen = set()
    for index, record in enumerate(data):
        case = _parse_record(index, record, path)
        if case.id in seen:
            raise FixtureLoadError(path, f"duplicate id {case.id}")
        seen.add(case.id)
        cases.append(case)

    return cases
