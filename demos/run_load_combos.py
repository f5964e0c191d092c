# File: demos/run_load_combos.py
"""
DEMO: LOAD CASES AND COMBINATIONS
"""

import logging

from mini_beam import analyze_load_cases, combine
from mini_beam.catalog import DEFAULT_INPUT, DEFAULT_LOAD_CASES, DEFAULT_COMBOS


def main():
    """
    LOAD CASES AND COMBINATIONS ON THE DEFAULT BEAM
    ===============================================
    5 m simply supported steel bar (50 x 100 mm), dead UDL + live point load,
    combined as 1.0D + 1.0L and 1.2D + 1.6L.
    """
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    beam = DEFAULT_INPUT
    results = analyze_load_cases(beam, DEFAULT_LOAD_CASES)

    print("Load cases")
    print("=" * 50)
    for case in DEFAULT_LOAD_CASES:
        res = results[case.id]
        print(f"{case.name:<12} |M|max = {res.max.M.value:9.1f} N·m at x = {res.max.M.x:.3f} m, "
              f"w_max = {res.max.deflection.value * 1000:.2f} mm")

    print()
    print("Combinations")
    print("=" * 50)
    for combo in DEFAULT_COMBOS:
        res = combine(results, combo)
        verdict = "OK" if res.safety.ok else "FAIL"
        reactions = ", ".join(f"{k} = {v:.1f}" for k, v in res.reactions.items())
        print(f"{combo.name:<12} σ_max = {res.max.sigma.value / 1e6:6.1f} MPa, "
              f"FOS = {res.safety.fos_actual:.2f} (target {beam.fos_target}) {verdict}")
        print(f"{'':<12} reactions: {reactions}")

    # Diagram data as a table (every 50th station)
    factored = combine(results, DEFAULT_COMBOS[1])
    print()
    print(factored.to_dataframe().iloc[::50].to_string(index=False))


if __name__ == "__main__":
    main()
