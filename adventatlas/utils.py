from __future__ import annotations

def format_bytes(num: int) -> str:
    if num < 0:
        return str(num)
    units = ["B", "KB", "MB", "GB", "TB"]
    x = float(num)
    for u in units:
        if x < 1024.0 or u == units[-1]:
            return f"{int(x)} {u}" if u == "B" else f"{x:.2f} {u}"
        x /= 1024.0
    return f"{x:.2f} TB"
