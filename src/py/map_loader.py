from typing import List, Sequence


def load_grid_from_txt(path: str) -> List[str]:
    lines = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.rstrip("\n").rstrip("\r")
            if not line:
                continue
            lines.append(line)
    return normalize_grid(lines)


def normalize_grid(rows: Sequence[str]) -> List[str]:
    if not rows:
        return []
    width = len(rows[0])
    normalized = []
    for row in rows:
        row = "".join(row)
        if len(row) != width:
            raise ValueError("Grid must be rectangular")
        normalized.append(row)
    return normalized
