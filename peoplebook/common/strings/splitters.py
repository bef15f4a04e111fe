from typing import List


def csv_to_list(v: str | List[str] | None) -> List[str]:
    """Accept a CSV string (as found in env vars) or a list and return clean items."""
    if v is None:
        return []
    if isinstance(v, (list, tuple)):
        return [str(s).strip() for s in v if s is not None and str(s).strip()]
    return [s.strip() for s in str(v).split(",") if s.strip()]
