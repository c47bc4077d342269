import os
from typing import List, Optional

import pandas as pd

from xgbimportance.errors import FormatError


def normalize_lines(lines) -> List[str]:
    """Copy a dump into a list of lines without trailing newline characters."""
    return [str(line).rstrip("\r\n") for line in lines]


class DumpLoader:
    """
    Handles reading a model text dump from disk and persisting importance tables.
    """

    def __init__(self, input_path: str, output_path: str = None):
        """
        Initialize DumpLoader with the dump path and an optional output CSV path.
        """
        self.input_path = str(input_path)
        self.output_path = output_path or os.path.join(
            os.path.dirname(self.input_path), "importance.csv"
        )

    def load_lines(self) -> List[str]:
        """
        Read the whole dump into memory, one entry per line.
        """
        if not os.path.exists(self.input_path):
            raise FileNotFoundError(f"File not found: {self.input_path}")

        try:
            with open(self.input_path, "r", encoding="utf-8") as f:
                lines = normalize_lines(f.read().splitlines())
        except UnicodeDecodeError as e:
            raise FormatError(f"Dump is not valid UTF-8 text: {self.input_path}") from e
        print(f"[INFO] Loaded model dump — Lines: {len(lines)} ({self.input_path})")
        return lines

    def save_table(self, df: pd.DataFrame, output_path: Optional[str] = None) -> str:
        """
        Save an importance table to CSV.
        """
        path = output_path or self.output_path
        out_dir = os.path.dirname(path)
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)
        df.to_csv(path, index=False)
        print(f"[INFO] Importance table saved to: {path}")
        return path
