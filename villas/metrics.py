from typing import Dict


def init_metrics() -> Dict[str, int | float]:
    return {
        'placements_attempted': 0,
        'placements_applied': 0,
        'out_of_bounds': 0,
        'invalid_transitions': 0,
        'groups_compared': 0,
        'mismatches': 0,
        'runtime_ms': 0.0,
    }
