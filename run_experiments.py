#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(cmd):
    print("Running:", cmd)
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    py = sys.executable
    run(f"{py} -m general_search.experiments.runner --depths 4 8 12 16 20 --per_depth 10 --heuristic uniform misplaced manhattan --out results/p8.csv")
    run(f"{py} -m general_search.experiments.runner --rows 2 --cols 3 --depths 4 8 12 --per_depth 10 --heuristic misplaced manhattan --include_unsolvable --out results/r2x3.csv")
    run(f"{py} -m general_search.experiments.runner --domain p15 --depths 10 20 30 --per_depth 5 --heuristic manhattan linear_conflict --out results/p15.csv")
    run(f"{py} -m general_search.experiments.analyze results/p8.csv results/r2x3.csv --out results/summary.csv")
    run(f"{py} -m general_search.experiments.plot results/p8.csv --save results/plots --log")

if __name__ == "__main__":
    main()
