from typing import Dict, List

import pandas as pd

REPORT_COLUMNS = ["keyword", "count", "share"]


def keyword_table(freq: Dict[str, int], keywords: List[str]) -> pd.DataFrame:
    """One row per selected keyword, in selection order. share = count / all counted tokens."""
    if not keywords:
        return pd.DataFrame(columns=REPORT_COLUMNS)
    total = sum(freq.values()) or 1
    rows = [(k, freq.get(k, 0), freq.get(k, 0) / total) for k in keywords]
    df = pd.DataFrame(rows, columns=REPORT_COLUMNS)
    df["count"] = df["count"].astype(int)
    return df


def text_stats(text: str, freq: Dict[str, int]) -> Dict[str, int]:
    return {
        "characters": len(text),
        "lines": len(text.splitlines()),
        "counted_tokens": sum(freq.values()),
        "distinct_terms": len(freq),
    }


def table_to_csv(df: pd.DataFrame) -> str:
    out = df.copy()
    out["share"] = out["share"].astype(float).round(4)
    return out.to_csv(index=False)
