"""Convert a file of phrases (one per line) and write the results as JSON."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import List

from phrase_units import ConverterSession

DEFAULT_OUTPUT = Path("results/phrase_batch.json")


def load_phrases(path: Path) -> List[str]:
    with path.open("r", encoding="utf-8") as fh:
        return [line.strip() for line in fh if line.strip()]


def main() -> None:
    if len(sys.argv) < 2:
        raise SystemExit("usage: run_phrase_batch.py <phrases.txt> [output.json]")
    input_path = Path(sys.argv[1])
    output_path = Path(sys.argv[2]) if len(sys.argv) > 2 else DEFAULT_OUTPUT

    session = ConverterSession()
    results = []
    for phrase in load_phrases(input_path):
        if session.parser.is_exit(phrase):
            break
        results.append({"phrase": phrase, "output": session.handle(phrase)})

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(results, indent=2), encoding="utf-8")
    print(f"Wrote {output_path} with {len(results)} entries.")
    for entry in results:
        print(f"- {entry['phrase']}: {entry['output']}")


if __name__ == "__main__":  # pragma: no cover - manual script
    main()
