# health_companion/utils/scoring.py
import math

def round_half_up(value: float) -> int:
    # 12.5 -> 13 (builtin round() would give 12)
    return int(math.floor(value + 0.5))

def clamp_percent(value: float) -> int:
    return max(0, min(100, round_half_up(value)))
