"""
Compile Script
Builds contract artifacts with the configured solc version and optimizer

Usage: python -m scripts.compile
"""

import sys
from loguru import logger

from toolchain.compiler import SolidityCompiler
from toolchain.compiler_settings import load_compiler_settings
from toolchain.errors import CompilationError


def main(config_path: str = "config/compiler_config.json") -> int:
    """Compile all sources, returning a process exit status"""
    compiler = SolidityCompiler(load_compiler_settings(config_path))

    try:
        contracts = compiler.compile()
    except CompilationError as e:
        logger.error(str(e))
        return 1

    logger.success(f"✓ Compiled {len(contracts)} contract(s): {', '.join(contracts)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
