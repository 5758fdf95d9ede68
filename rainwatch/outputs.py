# rainwatch/outputs.py
from typing import Dict, Optional


def write_github_outputs(path: str, values: Dict[str, str],
                         multiline: Optional[Dict[str, str]] = None,
                         delimiter: str = "EOF"):
    """
    Append step outputs to the file GitHub Actions names in $GITHUB_OUTPUT.
    Single-line values are written as KEY=value, multi-line ones as
    KEY<<EOF ... EOF blocks.
    """
    with open(path, "a", encoding="utf-8") as f:
        for key, value in values.items():
            f.write(f"{key}={value}\n")
        for key, value in (multiline or {}).items():
            f.write(f"{key}<<{delimiter}\n{value}\n{delimiter}\n")
