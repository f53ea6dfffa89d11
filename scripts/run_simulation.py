"""Run the assistant simulation once and print the results.

Usage:
    python scripts/run_simulation.py
"""

import os
import sys

# Ensure the project root is on the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from agent.simulation import main  # noqa: E402

if __name__ == "__main__":
    main()
