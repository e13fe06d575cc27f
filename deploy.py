"""
Contract Deployment Wrapper
Runs scripts/deploy.py
"""

import subprocess
import sys

if __name__ == "__main__":
    result = subprocess.run(
        [sys.executable, "-m", "scripts.deploy"],
        cwd="."
    )

    sys.exit(result.returncode)
