"""
Trace recording and pretty printing for block operations.

Contains:
- TraceRecorder: JSON Lines trace file + compact verbose stdout
- print_header / print_result / print_round_keys: CLI formatting helpers
"""

from __future__ import annotations

import json
from typing import Any, TextIO

from .utils import State, format_word


class TraceRecorder:
    """
    Records the state after every transformation of a block operation.

    Supports:
    - JSON Lines file output  (when trace_file is set)
    - Compact verbose stdout  (when verbose is set)
    """

    def __init__(self, verbose: bool = False, trace_file: TextIO | None = None):
        self.verbose = verbose
        self.trace_file = trace_file
        self._records: list[dict[str, Any]] = []

    def record(self, **kwargs) -> None:
        """Record a trace entry (typically direction, round, operation, state)."""
        self._records.append(kwargs)

        if self.trace_file:
            self._write_jsonl(kwargs)

        if self.verbose:
            self._print_verbose(kwargs)

    def _write_jsonl(self, record: dict[str, Any]) -> None:
        serializable = self._make_serializable(record)
        self.trace_file.write(json.dumps(serializable) + "\n")
        self.trace_file.flush()

    def _make_serializable(self, obj: Any) -> Any:
        if isinstance(obj, dict):
            return {k: self._make_serializable(v) for k, v in obj.items()}
        elif isinstance(obj, (list, tuple)):
            return [self._make_serializable(item) for item in obj]
        elif isinstance(obj, (bytes, State)):
            return obj.hex()
        else:
            return obj

    def _print_verbose(self, record: dict[str, Any]) -> None:
        round_num = record.get("round", "?")
        operation = record.get("operation", "unknown")

        if "state" in record:
            print(f"R{round_num:>2}  {operation:16s} STATE:{record['state'].hex()}")

    def get_records(self) -> list[dict[str, Any]]:
        return list(self._records)

    def states_after(self, operation: str) -> list[str]:
        """Hex states recorded right after every ``operation``."""
        return [
            r["state"].hex() for r in self._records
            if r.get("operation") == operation and "state" in r
        ]

    def clear(self) -> None:
        self._records.clear()


# ------------------------------------------------------------------
# Shared formatting functions
# ------------------------------------------------------------------

def print_header(title: str) -> None:
    """Print a section header."""
    print(f"\n{'#'*70}")
    print(f"# {title}")
    print(f"{'#'*70}")


def print_round_keys(schedule) -> None:
    """Print every round key of a schedule, one per line."""
    for r, round_key in enumerate(schedule.round_keys()):
        words = " ".join(format_word(w) for w in round_key)
        print(f"  RoundKey[{r:2d}]: {words}")


def print_result(label: str, output_hex: str, rounds: int,
                 verified: bool | None = None) -> None:
    """Print final result of a block operation."""
    print(f"\n{'='*70}")
    print("RESULT")
    print(f"{'='*70}")
    print(f"{label}: {output_hex}")
    print(f"Rounds: {rounds}")

    if verified is not None:
        status = "PASS" if verified else "FAIL"
        marker = "[OK]" if verified else "[ERROR]"
        print(f"Verification: {marker} {status}")
    print(f"{'='*70}")
